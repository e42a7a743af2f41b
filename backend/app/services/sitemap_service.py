"""
Sitemap generation from SEO pages and published content.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.content import AdminContent, ContentStatus
from app.models.seo import SeoPage

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

SITEMAP_XMLNS = "http://www.sitemaps.org/schemas/sitemap/0.9"

DEFAULT_CHANGEFREQ = "weekly"
DEFAULT_PAGE_PRIORITY = 0.8
CONTENT_PRIORITY = 0.6


class SitemapDataError(Exception):
    """Raised when the SEO pages cannot be read."""


@dataclass
class SitemapEntry:
    """One <url> element of the sitemap."""
    loc: str
    lastmod: str
    changefreq: str
    priority: float


def format_priority(value: float) -> str:
    """Render a priority without trailing zeros (0.8, 1, 0.25)."""
    return f"{value:g}"


def format_lastmod(value: datetime | None, today: datetime | None = None) -> str:
    """Return the UTC calendar date of ``value``, or today when unset."""
    if value is None:
        value = today or datetime.now(timezone.utc)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).date().isoformat()


def resolve_origin(host_param: str | None, scheme: str, netloc: str) -> str:
    """Origin for sitemap URLs: ?host= wins over the request's own host."""
    if host_param:
        return f"https://{host_param}"
    return f"{scheme}://{netloc}"


def get_jinja_env() -> Environment:
    """Get the Jinja2 environment for sitemap templates."""
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["priority"] = format_priority
    return env


jinja_env = get_jinja_env()


def render_urlset(entries: list[SitemapEntry]) -> str:
    """Serialize entries into a sitemap <urlset> document."""
    template = jinja_env.get_template("sitemap.xml")
    return template.render(xmlns=SITEMAP_XMLNS, entries=entries)


class SitemapService:
    """Service building the sitemap for the public site."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def fetch_seo_pages(self) -> list[SeoPage]:
        """All SEO pages ordered by path. Failure here is fatal for the sitemap."""
        try:
            result = await self.db.execute(select(SeoPage).order_by(SeoPage.path.asc()))
        except SQLAlchemyError as e:
            logger.error(f"[SITEMAP] Error fetching seo_pages: {e}")
            raise SitemapDataError("Error fetching sitemap data") from e
        return list(result.scalars().all())

    async def fetch_published_content(self) -> list[AdminContent]:
        """Published content rows; a failed query degrades to an empty list."""
        try:
            result = await self.db.execute(
                select(AdminContent).where(
                    AdminContent.is_published.is_(True),
                    AdminContent.status == ContentStatus.PUBLISHED.value,
                )
            )
        except SQLAlchemyError as e:
            logger.error(f"[SITEMAP] Error fetching admin_content: {e}")
            return []
        return list(result.scalars().all())

    async def build_entries(self, origin: str) -> list[SitemapEntry]:
        """Collect sitemap entries: SEO pages first, then content not already listed."""
        pages = await self.fetch_seo_pages()
        contents = await self.fetch_published_content()

        indexable = [page for page in pages if page.is_indexable]
        entries = [
            SitemapEntry(
                loc=f"{origin}{page.path}",
                lastmod=format_lastmod(page.updated_at),
                changefreq=page.changefreq or DEFAULT_CHANGEFREQ,
                priority=page.priority if page.priority is not None else DEFAULT_PAGE_PRIORITY,
            )
            for page in indexable
        ]

        # A noindex SEO page does not shadow content at the same path
        known_paths = {page.path for page in indexable}
        for content in contents:
            path = content.path
            if path in known_paths:
                continue
            known_paths.add(path)
            entries.append(
                SitemapEntry(
                    loc=f"{origin}{path}",
                    lastmod=format_lastmod(content.updated_at),
                    changefreq=DEFAULT_CHANGEFREQ,
                    priority=CONTENT_PRIORITY,
                )
            )

        logger.info(f"[SITEMAP] Built {len(entries)} entries for {origin}")
        return entries

    async def generate(self, origin: str) -> str:
        """Generate the sitemap XML document for ``origin``."""
        entries = await self.build_entries(origin)
        return render_urlset(entries)
