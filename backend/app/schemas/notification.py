"""
Notification schemas.
"""
from datetime import datetime

from app.schemas.common import IDSchema


class NotificationResponse(IDSchema):
    """A notification campaign row."""

    title: str
    body: str | None
    target_platform: str
    status: str
    scheduled_at: datetime | None
    sent_at: datetime | None
    sent_count: int
    failed_count: int
    created_at: datetime
