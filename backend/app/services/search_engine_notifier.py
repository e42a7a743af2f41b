"""
Search engine notifier.

Pings Google and Bing with the sitemap URL and records each outcome in
``seo_index_log``. The same table rate-limits the notifier: any ping row
younger than the window blocks a new round, whether it succeeded or not.

The check and the insert are separate statements, so two concurrent
callers can both pass the check. Move to a conditional insert or an
advisory lock if stricter guarantees are ever needed.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.integrations.search_engines import PingResult, SearchEnginePingClient
from app.models.seo import PING_ACTIONS, IndexAction, SeoIndexLog

logger = logging.getLogger(__name__)


class PingRateLimited(Exception):
    """Raised when a ping round happened inside the rate-limit window."""

    def __init__(self, window_minutes: int):
        self.window_minutes = window_minutes
        super().__init__(
            f"Last ping was less than {window_minutes} minutes ago. Try again later."
        )


@dataclass
class NotifyResult:
    """Outcome of one notification round."""
    sitemap_url: str
    google: PingResult
    bing: PingResult

    @property
    def success(self) -> bool:
        return self.google.success and self.bing.success

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "google": self.google.to_dict(),
            "bing": self.bing.to_dict(),
            "sitemap_url": self.sitemap_url,
        }


class SearchEngineNotifier:
    """Service notifying search engines about sitemap updates."""

    def __init__(
        self,
        db: AsyncSession,
        client: SearchEnginePingClient | None = None,
        window_minutes: int | None = None,
    ):
        self.db = db
        self.client = client or SearchEnginePingClient()
        if window_minutes is None:
            window_minutes = settings.PING_RATE_LIMIT_MINUTES
        self.window_minutes = window_minutes

    async def last_ping_within_window(self, now: datetime | None = None) -> SeoIndexLog | None:
        """Return a ping log row inside the rate-limit window, if any."""
        now = now or datetime.now(timezone.utc)
        cutoff = now - timedelta(minutes=self.window_minutes)
        result = await self.db.execute(
            select(SeoIndexLog)
            .where(
                SeoIndexLog.action.in_(PING_ACTIONS),
                SeoIndexLog.created_at >= cutoff,
            )
            .limit(1)
        )
        return result.scalars().first()

    async def notify(self, sitemap_url: str | None = None) -> NotifyResult:
        """
        Run one notification round.

        Raises:
            PingRateLimited: a ping was logged inside the window
        """
        if await self.last_ping_within_window() is not None:
            logger.info(f"[PING] Rate limited: last ping was less than {self.window_minutes} minutes ago")
            raise PingRateLimited(self.window_minutes)

        sitemap_url = sitemap_url or settings.sitemap_url
        logger.info(f"[PING] Notifying search engines about sitemap: {sitemap_url}")

        results = await self.client.ping_all(sitemap_url)
        google, bing = results["google"], results["bing"]

        self.db.add_all([
            self._log_row(IndexAction.GOOGLE_PING, sitemap_url, google),
            self._log_row(IndexAction.BING_PING, sitemap_url, bing),
        ])
        await self.db.flush()

        return NotifyResult(sitemap_url=sitemap_url, google=google, bing=bing)

    @staticmethod
    def _log_row(action: IndexAction, target_url: str, result: PingResult) -> SeoIndexLog:
        metadata = {"error": result.error} if result.error else {}
        return SeoIndexLog(
            action=action.value,
            target_url=target_url,
            status_code=result.status,
            success=result.success,
            log_metadata=metadata,
        )
