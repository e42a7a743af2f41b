"""
Notification history service.
"""
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.notification import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for reading notification campaigns."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_recent(self, limit: int = 20, status: str | None = None) -> list[Notification]:
        """Newest notifications first; empty on a failed query."""
        query = select(Notification)
        if status:
            query = query.where(Notification.status == status)
        query = query.order_by(Notification.created_at.desc()).limit(limit)

        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Error loading notifications: {e}")
            return []
        return list(result.scalars().all())
