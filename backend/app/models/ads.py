"""
Ad placement model.
"""
from enum import Enum as PyEnum

from sqlalchemy import Column, DateTime, Integer, String, Text

from app.models.base import Base, BaseModel


class AdStatus(str, PyEnum):
    """Ad lifecycle status."""
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    ENDED = "ended"


class AdType(str, PyEnum):
    """How the ad is rendered."""
    IMAGE = "image"
    HTML = "html"
    ADSENSE = "adsense"
    ADMOB = "admob"


class Ad(Base, BaseModel):
    """An ad creative bound to a placement and platform."""

    __tablename__ = "admin_ads"

    title = Column(String(255), nullable=False)
    ad_type = Column(String(20), nullable=False, default=AdType.IMAGE.value)
    ad_code = Column(Text, nullable=True)
    image_path = Column(String(2048), nullable=True)
    link_url = Column(String(2048), nullable=True)
    button_text = Column(String(100), nullable=True)
    placement = Column(String(100), nullable=True, index=True)
    # "web", "app" or "all"
    target_platform = Column(String(10), nullable=False, default="all")
    priority = Column(Integer, nullable=False, default=0)
    start_at = Column(DateTime(timezone=True), nullable=True)
    end_at = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(20), nullable=False, default=AdStatus.DRAFT.value, index=True)
    show_after_n_items = Column(Integer, nullable=True)
    frequency_per_session = Column(Integer, nullable=True)
    max_daily_views = Column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Ad {self.title} ({self.placement}/{self.target_platform})>"
