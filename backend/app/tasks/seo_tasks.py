"""
SEO Tasks

Background tasks for search engine notification and IndexNow submission.
"""
import asyncio
import logging

from celery import shared_task

from app.database import get_task_session_maker
from app.services.indexnow_service import IndexNowService
from app.services.search_engine_notifier import PingRateLimited, SearchEngineNotifier

logger = logging.getLogger(__name__)


def run_async(coro):
    """Helper to run async code in sync context."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@shared_task(bind=True)
def notify_search_engines(self):
    """Ping search engines with the sitemap URL (rate limit applies)."""
    return run_async(_notify_search_engines())


async def _notify_search_engines() -> dict:
    session_maker = get_task_session_maker()
    async with session_maker() as session:
        try:
            result = await SearchEngineNotifier(session).notify()
        except PingRateLimited as e:
            logger.info(f"[PING] Scheduled ping skipped: {e}")
            return {"success": False, "reason": "rate_limited"}

        await session.commit()
        return result.to_dict()


@shared_task(bind=True)
def submit_indexnow(self, path: str):
    """Submit a changed path to IndexNow."""
    return run_async(_submit_indexnow(path))


async def _submit_indexnow(path: str) -> dict:
    session_maker = get_task_session_maker()
    async with session_maker() as session:
        result = await IndexNowService(session).submit(path)
        if result is None:
            return {"success": False, "skipped": True}

        await session.commit()
        return {"success": result.success, "status": result.status, "url": result.url}
