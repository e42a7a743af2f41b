"""
Settings models: key/value app settings and layout configuration.
"""
from enum import Enum as PyEnum

from sqlalchemy import Boolean, Column, Integer, String

from app.models.base import Base, BaseModel, JSONType


class SectionSize(str, PyEnum):
    """Render size of a layout section."""
    COMPACT = "compact"
    NORMAL = "normal"
    LARGE = "large"


class AppSetting(Base, BaseModel):
    """Singleton settings record keyed by name (branding, seo, indexnow, ...)."""

    __tablename__ = "app_settings"

    setting_key = Column(String(100), nullable=False, unique=True, index=True)
    setting_value = Column(JSONType, nullable=False, default=dict)

    def __repr__(self) -> str:
        return f"<AppSetting {self.setting_key}>"


class LayoutSetting(Base, BaseModel):
    """Ordering and visibility of one section within a layout."""

    __tablename__ = "admin_layout_settings"

    layout_key = Column(String(100), nullable=False, index=True)
    platform = Column(String(20), nullable=False, default="web")
    order_index = Column(Integer, nullable=False, default=0)
    section_key = Column(String(100), nullable=False)
    visible = Column(Boolean, nullable=False, default=True)
    size = Column(String(20), nullable=False, default=SectionSize.NORMAL.value)
    settings = Column(JSONType, default=dict)

    def __repr__(self) -> str:
        return f"<LayoutSetting {self.layout_key}/{self.section_key} ({self.platform})>"


class PageSection(Base, BaseModel):
    """A page builder section."""

    __tablename__ = "admin_page_sections"

    page = Column(String(100), nullable=False, index=True)
    section_key = Column(String(100), nullable=False)
    title = Column(String(255), nullable=False, default="")
    position = Column(Integer, nullable=False, default=0)
    visible = Column(Boolean, nullable=False, default=True)
    settings = Column(JSONType, default=dict)
    # "web", "app" or "all"
    platform = Column(String(10), nullable=False, default="all")

    def __repr__(self) -> str:
        return f"<PageSection {self.page}/{self.section_key}>"
