"""
Background Tasks Package

Contains Celery tasks for async processing:
- seo_tasks: sitemap pings and IndexNow submissions
"""

from app.tasks.seo_tasks import notify_search_engines, submit_indexnow

__all__ = ["notify_search_engines", "submit_indexnow"]
