"""
SQLAlchemy models for Noor SEO.
"""
from app.models.base import Base, BaseModel
from app.models.seo import SeoPage, SeoIndexLog, IndexAction, PING_ACTIONS
from app.models.content import AdminContent, ContentStatus
from app.models.settings import AppSetting, LayoutSetting, PageSection, SectionSize
from app.models.ads import Ad, AdStatus, AdType
from app.models.notification import Notification

__all__ = [
    "Base",
    "BaseModel",
    "SeoPage",
    "SeoIndexLog",
    "IndexAction",
    "PING_ACTIONS",
    "AdminContent",
    "ContentStatus",
    "AppSetting",
    "LayoutSetting",
    "PageSection",
    "SectionSize",
    "Ad",
    "AdStatus",
    "AdType",
    "Notification",
]
