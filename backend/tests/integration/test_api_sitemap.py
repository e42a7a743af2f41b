"""
Integration tests for the sitemap endpoint.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi import status
from sqlalchemy.exc import SQLAlchemyError

from app.core.deps import get_db
from app.models.seo import SeoPage

SITEMAP = "/functions/v1/sitemap"


@pytest_asyncio.fixture
async def pages(db_session):
    updated = datetime(2026, 1, 9, tzinfo=timezone.utc)
    db_session.add_all([
        SeoPage(path="/", changefreq="daily", priority=1.0, updated_at=updated),
        SeoPage(path="/quran", updated_at=updated),
        SeoPage(path="/admin", robots="noindex,nofollow", updated_at=updated),
    ])
    await db_session.flush()


class TestSitemapAPI:
    """Test the public sitemap document."""

    @pytest.mark.asyncio
    async def test_sitemap_xml(self, async_client, pages):
        response = await async_client.get(SITEMAP, params={"host": "noor.app"})

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"] == "application/xml; charset=utf-8"
        assert response.headers["cache-control"] == "public, max-age=3600, s-maxage=3600"

        body = response.text
        assert "<loc>https://noor.app/</loc>" in body
        assert "<loc>https://noor.app/quran</loc>" in body
        assert "/admin" not in body
        assert body.count("<url>") == 2

    @pytest.mark.asyncio
    async def test_origin_from_request_host(self, async_client, pages):
        response = await async_client.get(SITEMAP)

        assert "<loc>http://test/quran</loc>" in response.text

    @pytest.mark.asyncio
    async def test_empty_sitemap(self, async_client):
        response = await async_client.get(SITEMAP)

        assert response.status_code == status.HTTP_200_OK
        assert "<url>" not in response.text

    @pytest.mark.asyncio
    async def test_primary_query_failure(self, app, async_client):
        db = MagicMock()
        db.execute = AsyncMock(side_effect=SQLAlchemyError("connection lost"))

        async def failing_db():
            yield db

        app.dependency_overrides[get_db] = failing_db

        response = await async_client.get(SITEMAP)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Error fetching sitemap data"

    @pytest.mark.asyncio
    async def test_unexpected_failure(self, app, async_client):
        db = MagicMock()
        db.execute = AsyncMock(side_effect=RuntimeError("boom"))

        async def failing_db():
            yield db

        app.dependency_overrides[get_db] = failing_db

        response = await async_client.get(SITEMAP)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Internal server error"
