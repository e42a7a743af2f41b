"""
Settings and layout schemas.
"""
from typing import Any
from uuid import UUID

from pydantic import Field

from app.schemas.common import BaseSchema


class AppSettingResponse(BaseSchema):
    """A settings value keyed by name."""

    setting_key: str
    setting_value: dict[str, Any] = Field(default_factory=dict)


class LayoutSettingResponse(BaseSchema):
    """A layout section row."""

    id: UUID
    layout_key: str
    platform: str
    order_index: int
    section_key: str
    visible: bool
    size: str
    settings: dict[str, Any] | None = None


class PageSectionResponse(BaseSchema):
    """A page builder section row."""

    id: UUID
    page: str
    section_key: str
    title: str
    position: int
    visible: bool
    settings: dict[str, Any] | None = None
    platform: str
