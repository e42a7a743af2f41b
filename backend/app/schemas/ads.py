"""
Ad schemas.
"""
from datetime import datetime
from uuid import UUID

from app.schemas.common import BaseSchema


class AdResponse(BaseSchema):
    """An ad selected for a slot."""

    id: UUID
    title: str
    ad_type: str
    ad_code: str | None
    image_path: str | None
    link_url: str | None
    button_text: str | None
    placement: str | None
    target_platform: str
    priority: int
    start_at: datetime | None
    end_at: datetime | None
    status: str
    show_after_n_items: int | None
    frequency_per_session: int | None
    max_daily_views: int | None
