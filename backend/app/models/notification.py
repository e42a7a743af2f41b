"""
Admin notification model (history of push campaigns).
"""
from sqlalchemy import Column, DateTime, Integer, String, Text

from app.models.base import Base, BaseModel


class Notification(Base, BaseModel):
    """A notification campaign as composed in the admin panel."""

    __tablename__ = "admin_notifications"

    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=True)
    target_platform = Column(String(20), nullable=False, default="all")
    status = Column(String(20), nullable=False, default="draft", index=True)
    scheduled_at = Column(DateTime(timezone=True), nullable=True)
    sent_at = Column(DateTime(timezone=True), nullable=True)
    sent_count = Column(Integer, nullable=False, default=0)
    failed_count = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Notification {self.title} ({self.status})>"
