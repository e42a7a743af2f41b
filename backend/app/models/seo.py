"""
SEO models: per-page metadata and the indexing audit log.
"""
from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, Float, Integer, String, Text

from app.models.base import Base, BaseModel, JSONType


class IndexAction(str, PyEnum):
    """Actions recorded in the indexing log."""
    GOOGLE_PING = "google_ping"
    BING_PING = "bing_ping"
    INDEXNOW_SUBMIT = "indexnow_submit"


# Actions that count towards the sitemap ping rate limit
PING_ACTIONS = (IndexAction.GOOGLE_PING.value, IndexAction.BING_PING.value)


class SeoPage(Base, BaseModel):
    """Metadata for one indexable URL, used for the sitemap and page meta tags."""

    __tablename__ = "seo_pages"

    path = Column(String(2048), nullable=False, unique=True, index=True)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    canonical_url = Column(String(2048), nullable=True)
    robots = Column(String(100), nullable=True)
    json_ld = Column(JSONType, nullable=True)
    changefreq = Column(String(20), nullable=True)
    priority = Column(Float, nullable=True)

    @property
    def is_indexable(self) -> bool:
        return "noindex" not in (self.robots or "").lower()

    def __repr__(self) -> str:
        return f"<SeoPage {self.path}>"


class SeoIndexLog(Base, BaseModel):
    """Append-only record of search engine notifications.

    Doubles as the rate-limit source for sitemap pings.
    """

    __tablename__ = "seo_index_log"

    action = Column(String(50), nullable=False, index=True)
    target_url = Column(String(2048), nullable=True)
    status_code = Column(Integer, nullable=True)
    success = Column(Boolean, nullable=False, default=False)
    # "metadata" is reserved on declarative classes
    log_metadata = Column("metadata", JSONType, default=dict)

    def __repr__(self) -> str:
        return f"<SeoIndexLog {self.action} status={self.status_code}>"
