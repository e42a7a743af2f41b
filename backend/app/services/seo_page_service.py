"""
SEO page service: page metadata CRUD, the indexing log and meta resolution.
"""
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.seo import IndexAction, SeoIndexLog, SeoPage
from app.schemas.seo import PageMetaResponse, SeoPageUpsert
from app.services.app_settings_service import AppSettingsService
from app.services.seo_defaults import get_page_seo_defaults

MAX_TITLE_LENGTH = 60
MAX_DESCRIPTION_LENGTH = 160
DEFAULT_ROBOTS = "index,follow"
ADMIN_ROBOTS = "noindex,nofollow"


def normalize_title(title: str | None) -> str | None:
    if not title:
        return None
    if len(title) > MAX_TITLE_LENGTH:
        return title[: MAX_TITLE_LENGTH - 3] + "..."
    return title


def normalize_description(description: str | None) -> str | None:
    if not description:
        return None
    if len(description) > MAX_DESCRIPTION_LENGTH:
        return description[: MAX_DESCRIPTION_LENGTH - 3] + "..."
    return description


def is_admin_path(path: str) -> bool:
    return path == "/admin" or path.startswith("/admin/")


class SeoPageService:
    """Service for SEO page operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_pages(self) -> list[SeoPage]:
        result = await self.db.execute(select(SeoPage).order_by(SeoPage.path))
        return list(result.scalars().all())

    async def get_by_id(self, page_id: UUID) -> SeoPage | None:
        result = await self.db.execute(select(SeoPage).where(SeoPage.id == page_id))
        return result.scalar_one_or_none()

    async def get_by_path(self, path: str) -> SeoPage | None:
        result = await self.db.execute(select(SeoPage).where(SeoPage.path == path))
        return result.scalar_one_or_none()

    async def upsert(self, data: SeoPageUpsert) -> SeoPage:
        """Insert a page or update the one with the same path."""
        page = await self.get_by_path(data.path)
        if page is None:
            page = SeoPage(**data.model_dump())
            self.db.add(page)
        else:
            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(page, field, value)

        await self.db.flush()
        await self.db.refresh(page)
        return page

    async def delete(self, page_id: UUID) -> bool:
        page = await self.get_by_id(page_id)
        if not page:
            return False

        await self.db.delete(page)
        await self.db.flush()
        return True

    async def list_index_log(self, limit: int = 20) -> list[SeoIndexLog]:
        """Newest log rows first."""
        result = await self.db.execute(
            select(SeoIndexLog).order_by(SeoIndexLog.created_at.desc()).limit(limit)
        )
        return list(result.scalars().all())

    async def last_log_for(self, action: IndexAction) -> SeoIndexLog | None:
        result = await self.db.execute(
            select(SeoIndexLog)
            .where(SeoIndexLog.action == action.value)
            .order_by(SeoIndexLog.created_at.desc())
            .limit(1)
        )
        return result.scalars().first()

    async def resolve_meta(self, path: str, app_name: str | None = None) -> PageMetaResponse:
        """
        Resolve the meta tags for a public page.

        Precedence: the page's own seo_pages row, then the built-in
        defaults, then the global "seo" setting. Admin routes are never
        indexed.
        """
        if is_admin_path(path):
            return PageMetaResponse(path=path, robots=ADMIN_ROBOTS, source="admin")

        page = await self.get_by_path(path)
        global_seo = await AppSettingsService(self.db).get_value_or_empty("seo")

        if page is not None:
            return PageMetaResponse(
                path=path,
                title=normalize_title(page.title or global_seo.get("title") or app_name),
                description=normalize_description(page.description or global_seo.get("description")),
                canonical_url=page.canonical_url,
                robots=page.robots or DEFAULT_ROBOTS,
                json_ld=page.json_ld,
                source="seo_page",
            )

        defaults = get_page_seo_defaults(path, app_name)
        if defaults is not None:
            return PageMetaResponse(
                path=path,
                title=normalize_title(defaults.title),
                description=normalize_description(defaults.description),
                source="defaults",
            )

        return PageMetaResponse(
            path=path,
            title=normalize_title(global_seo.get("title") or app_name),
            description=normalize_description(global_seo.get("description")),
            source="global",
        )
