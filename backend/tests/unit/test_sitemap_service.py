"""
Unit tests for the sitemap service.

Tests sitemap generation including:
- noindex filtering
- Deduplication of content URLs against SEO pages
- Priority and changefreq defaults
- Degradation when the content query fails
"""
import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.models.content import AdminContent
from app.models.seo import SeoPage
from app.services.sitemap_service import (
    SitemapDataError,
    SitemapEntry,
    SitemapService,
    format_lastmod,
    format_priority,
    render_urlset,
    resolve_origin,
)

ORIGIN = "https://noor.example"
UPDATED = datetime(2026, 1, 10, 8, 30, tzinfo=timezone.utc)


async def add_page(db, path, robots=None, changefreq=None, priority=None):
    page = SeoPage(
        path=path,
        robots=robots,
        changefreq=changefreq,
        priority=priority,
        updated_at=UPDATED,
    )
    db.add(page)
    await db.flush()
    return page


async def add_content(db, content_type="article", published=True, status="published", content_id=None):
    content = AdminContent(
        id=content_id or uuid.uuid4(),
        content_type=content_type,
        title="Content",
        status=status,
        is_published=published,
        updated_at=UPDATED,
    )
    db.add(content)
    await db.flush()
    return content


class TestFormatting:
    """Test the small formatting helpers."""

    def test_priority_drops_trailing_zeros(self):
        assert format_priority(0.8) == "0.8"
        assert format_priority(1.0) == "1"
        assert format_priority(0.25) == "0.25"

    def test_lastmod_is_utc_date(self):
        value = datetime(2026, 1, 10, 23, 30, tzinfo=timezone.utc)
        assert format_lastmod(value) == "2026-01-10"

    def test_lastmod_treats_naive_as_utc(self):
        assert format_lastmod(datetime(2026, 3, 1, 0, 5)) == "2026-03-01"

    def test_lastmod_defaults_to_today(self, fixed_now):
        assert format_lastmod(None, today=fixed_now) == "2026-01-10"

    def test_origin_from_host_param(self):
        assert resolve_origin("noor.app", "http", "api.internal:8000") == "https://noor.app"

    def test_origin_from_request(self):
        assert resolve_origin(None, "http", "api.internal:8000") == "http://api.internal:8000"

    def test_render_urlset(self):
        xml = render_urlset([
            SitemapEntry(loc=f"{ORIGIN}/quran", lastmod="2026-01-10", changefreq="daily", priority=1.0),
        ])

        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
        assert '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">' in xml
        assert "<loc>https://noor.example/quran</loc>" in xml
        assert "<lastmod>2026-01-10</lastmod>" in xml
        assert "<changefreq>daily</changefreq>" in xml
        assert "<priority>1</priority>" in xml
        assert xml.endswith("</urlset>")

    def test_render_escapes_loc(self):
        xml = render_urlset([
            SitemapEntry(loc=f"{ORIGIN}/search?q=a&b", lastmod="2026-01-10", changefreq="weekly", priority=0.5),
        ])

        assert "<loc>https://noor.example/search?q=a&amp;b</loc>" in xml


class TestSitemapService:
    """Test entry collection against the database."""

    @pytest.mark.asyncio
    async def test_defaults_for_unset_priority_and_changefreq(self, db_session):
        await add_page(db_session, "/a")

        xml = await SitemapService(db_session).generate(ORIGIN)

        assert "<loc>https://noor.example/a</loc>" in xml
        assert "<priority>0.8</priority>" in xml
        assert "<changefreq>weekly</changefreq>" in xml
        assert "<lastmod>2026-01-10</lastmod>" in xml

    @pytest.mark.asyncio
    async def test_explicit_values_kept(self, db_session):
        await add_page(db_session, "/quran", changefreq="daily", priority=1.0)

        entries = await SitemapService(db_session).build_entries(ORIGIN)

        assert entries == [
            SitemapEntry(loc=f"{ORIGIN}/quran", lastmod="2026-01-10", changefreq="daily", priority=1.0)
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("robots", ["noindex", "noindex,follow", "NOINDEX, NOFOLLOW", "index,NoIndex"])
    async def test_noindex_pages_excluded(self, db_session, robots):
        await add_page(db_session, "/hidden", robots=robots)
        await add_page(db_session, "/visible", robots="index,follow")

        xml = await SitemapService(db_session).generate(ORIGIN)

        assert "/hidden" not in xml
        assert "<loc>https://noor.example/visible</loc>" in xml

    @pytest.mark.asyncio
    async def test_pages_ordered_by_path(self, db_session):
        await add_page(db_session, "/zakat")
        await add_page(db_session, "/dua")
        await add_page(db_session, "/")

        entries = await SitemapService(db_session).build_entries(ORIGIN)

        assert [e.loc for e in entries] == [f"{ORIGIN}/", f"{ORIGIN}/dua", f"{ORIGIN}/zakat"]

    @pytest.mark.asyncio
    async def test_published_content_included_after_pages(self, db_session):
        await add_page(db_session, "/quran")
        content = await add_content(db_session, content_type="article")

        entries = await SitemapService(db_session).build_entries(ORIGIN)

        assert len(entries) == 2
        assert entries[0].loc == f"{ORIGIN}/quran"
        assert entries[1] == SitemapEntry(
            loc=f"{ORIGIN}/article/{content.id}",
            lastmod="2026-01-10",
            changefreq="weekly",
            priority=0.6,
        )

    @pytest.mark.asyncio
    async def test_unpublished_content_excluded(self, db_session):
        await add_content(db_session, published=False, status="published")
        await add_content(db_session, published=True, status="draft")

        entries = await SitemapService(db_session).build_entries(ORIGIN)

        assert entries == []

    @pytest.mark.asyncio
    async def test_content_not_duplicated_when_seo_page_exists(self, db_session):
        content_id = uuid.uuid4()
        await add_content(db_session, content_type="dua", content_id=content_id)
        await add_page(db_session, f"/dua/{content_id}", priority=0.9)

        xml = await SitemapService(db_session).generate(ORIGIN)

        assert xml.count(f"/dua/{content_id}</loc>") == 1
        assert "<priority>0.9</priority>" in xml
        assert "<priority>0.6</priority>" not in xml

    @pytest.mark.asyncio
    async def test_noindex_page_does_not_hide_matching_content(self, db_session):
        content_id = uuid.uuid4()
        await add_content(db_session, content_type="dua", content_id=content_id)
        await add_page(db_session, f"/dua/{content_id}", robots="noindex")

        xml = await SitemapService(db_session).generate(ORIGIN)

        assert xml.count(f"/dua/{content_id}</loc>") == 1
        assert "<priority>0.6</priority>" in xml

    @pytest.mark.asyncio
    async def test_empty_tables_produce_empty_urlset(self, db_session):
        xml = await SitemapService(db_session).generate(ORIGIN)

        assert "<url>" not in xml
        assert "<urlset" in xml


class TestSitemapQueryFailures:
    """Test behaviour when the database misbehaves."""

    @staticmethod
    def _result(rows):
        result = MagicMock()
        result.scalars.return_value.all.return_value = rows
        return result

    @pytest.mark.asyncio
    async def test_primary_query_failure_raises(self):
        db = MagicMock()
        db.execute = AsyncMock(side_effect=SQLAlchemyError("connection lost"))

        with pytest.raises(SitemapDataError):
            await SitemapService(db).generate(ORIGIN)

    @pytest.mark.asyncio
    async def test_secondary_query_failure_treated_as_empty(self):
        page = SeoPage(path="/quran", robots=None, changefreq=None, priority=None, updated_at=UPDATED)
        db = MagicMock()
        db.execute = AsyncMock(side_effect=[self._result([page]), SQLAlchemyError("no such table")])

        entries = await SitemapService(db).build_entries(ORIGIN)

        assert [e.loc for e in entries] == [f"{ORIGIN}/quran"]
