"""
Celery app for indexing work.

Runs the daily sitemap ping and the IndexNow submissions queued when an
admin saves an SEO page. Start with:

    celery -A app.worker.celery_app worker -Q seo
    celery -A app.worker.celery_app beat
"""
import logging

from celery import Celery
from celery.schedules import crontab

from app.config import settings

logger = logging.getLogger(__name__)

celery_app = Celery(
    "noor_seo",
    broker=settings.REDIS_URL,
    backend=settings.REDIS_URL,
    include=["app.tasks.seo_tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,

    # Two sequential outbound calls at most, each bounded by OUTBOUND_TIMEOUT_SECONDS
    task_time_limit=120,
    task_soft_time_limit=90,
    task_acks_late=True,

    worker_prefetch_multiplier=1,
    worker_concurrency=2,

    result_expires=3600,

    task_default_queue="seo",
    task_routes={"app.tasks.seo_tasks.*": {"queue": "seo"}},

    # IndexNow bursts after bulk edits
    task_annotations={"app.tasks.seo_tasks.submit_indexnow": {"rate_limit": "30/m"}},
)

celery_app.conf.beat_schedule = {
    "notify-search-engines": {
        "task": "app.tasks.seo_tasks.notify_search_engines",
        "schedule": crontab(hour=2, minute=0),
    },
}


class NoorTask(celery_app.Task):
    """Logs failures with the task's arguments."""

    abstract = True

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        logger.error(f"Task {self.name}[{task_id}] failed with args={args}: {type(exc).__name__}: {exc}")


celery_app.Task = NoorTask
