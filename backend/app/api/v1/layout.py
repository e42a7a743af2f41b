"""
Layout and page builder endpoints.
"""
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_db
from app.schemas.settings import LayoutSettingResponse, PageSectionResponse
from app.services.layout_service import LayoutService

router = APIRouter(tags=["Layout"])

Platform = Literal["web", "app"]


@router.get("/layout/{layout_key}", response_model=list[LayoutSettingResponse])
async def get_layout(
    layout_key: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    platform: Platform = Query(default="web"),
):
    """Sections of a layout for a platform, in display order."""
    rows = await LayoutService(db).list_layout(layout_key, platform)
    return [LayoutSettingResponse.model_validate(r) for r in rows]


@router.get("/page-sections/{page}", response_model=list[PageSectionResponse])
async def get_page_sections(
    page: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    platform: Platform = Query(default="web"),
):
    """Visible page builder sections for a page."""
    rows = await LayoutService(db).list_page_sections(page, platform)
    return [PageSectionResponse.model_validate(r) for r in rows]
