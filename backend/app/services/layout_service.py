"""
Layout and page builder service.

Reads degrade to empty lists so a missing or broken table never breaks
page rendering.
"""
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.settings import LayoutSetting, PageSection

logger = logging.getLogger(__name__)

ALL_PLATFORMS = "all"


class LayoutService:
    """Service for layout and page section reads."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_layout(self, layout_key: str, platform: str) -> list[LayoutSetting]:
        """Layout rows for one layout and platform, in display order."""
        try:
            result = await self.db.execute(
                select(LayoutSetting)
                .where(
                    LayoutSetting.layout_key == layout_key,
                    LayoutSetting.platform == platform,
                )
                .order_by(LayoutSetting.order_index)
            )
        except SQLAlchemyError as e:
            logger.error(f"Error loading layout {layout_key}/{platform}: {e}")
            return []
        return list(result.scalars().all())

    async def list_page_sections(self, page: str, platform: str) -> list[PageSection]:
        """Visible sections of a page for ``platform`` (or shared ones), by position."""
        try:
            result = await self.db.execute(
                select(PageSection)
                .where(
                    PageSection.page == page,
                    PageSection.visible.is_(True),
                    PageSection.platform.in_([platform, ALL_PLATFORMS]),
                )
                .order_by(PageSection.position)
            )
        except SQLAlchemyError as e:
            logger.error(f"Error loading page sections for {page}: {e}")
            return []
        return list(result.scalars().all())
