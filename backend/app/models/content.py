"""
Admin-managed content model.
"""
from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, String, Text

from app.models.base import Base, BaseModel


class ContentStatus(str, PyEnum):
    """Editorial workflow status."""
    DRAFT = "draft"
    REVIEW = "review"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class AdminContent(Base, BaseModel):
    """A piece of published content (article, dua, hadith note, ...)."""

    __tablename__ = "admin_content"

    content_type = Column(String(50), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    body = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=ContentStatus.DRAFT.value, index=True)
    is_published = Column(Boolean, nullable=False, default=False)

    @property
    def path(self) -> str:
        return f"/{self.content_type}/{self.id}"

    def __repr__(self) -> str:
        return f"<AdminContent {self.content_type}/{self.id}>"
