"""
SEO schemas.
"""
from typing import Any
from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.common import BaseSchema, IDSchema, RecordSchema

CHANGEFREQ_VALUES = ("always", "hourly", "daily", "weekly", "monthly", "yearly", "never")


class SeoPageUpsert(BaseSchema):
    """Create or update an SEO page, keyed by path."""

    path: str = Field(min_length=1, max_length=2048)
    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    canonical_url: str | None = None
    robots: str | None = "index,follow"
    json_ld: Any = None
    changefreq: str | None = "weekly"
    priority: float | None = Field(default=0.8, ge=0.0, le=1.0)

    @field_validator("path")
    @classmethod
    def path_must_be_absolute(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("path must start with '/'")
        return v

    @field_validator("changefreq")
    @classmethod
    def known_changefreq(cls, v: str | None) -> str | None:
        if v is not None and v not in CHANGEFREQ_VALUES:
            raise ValueError(f"changefreq must be one of {', '.join(CHANGEFREQ_VALUES)}")
        return v


class SeoPageResponse(RecordSchema):
    """SEO page response."""

    path: str
    title: str | None
    description: str | None
    canonical_url: str | None
    robots: str | None
    json_ld: Any
    changefreq: str | None
    priority: float | None


class SeoIndexLogResponse(IDSchema):
    """Indexing log row."""

    action: str
    target_url: str | None
    status_code: int | None
    success: bool
    metadata: dict = Field(default_factory=dict, validation_alias="log_metadata")
    created_at: datetime


class IndexingStatusResponse(BaseSchema):
    """Summary for the admin indexing dashboard."""

    indexable_pages: int
    total_pages: int
    sitemap_url: str
    last_google_ping: SeoIndexLogResponse | None = None
    last_bing_ping: SeoIndexLogResponse | None = None


class PageMetaResponse(BaseSchema):
    """Resolved meta tags for a public page."""

    path: str
    title: str | None = None
    description: str | None = None
    canonical_url: str | None = None
    robots: str = "index,follow"
    json_ld: Any = None
    source: str = Field(description="seo_page, defaults, global or admin")


class IndexNowSubmitRequest(BaseSchema):
    """IndexNow submission request."""

    path: str | None = None


class IndexNowResponse(BaseSchema):
    """Outcome of a submission; status is the IndexNow endpoint's verbatim."""

    success: bool
    status: int
    url: str


class PingStatus(BaseSchema):
    success: bool
    status: int | None


class NotifyResponse(BaseSchema):
    """Result of a search engine notification round."""

    success: bool
    google: PingStatus
    bing: PingStatus
    sitemap_url: str
