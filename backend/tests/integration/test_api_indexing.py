"""
Integration tests for search engine notification and IndexNow endpoints.
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import status
from sqlalchemy import select

from app.models.seo import SeoIndexLog
from app.models.settings import AppSetting

SITEMAP_URL = "https://api.noor.test/functions/v1/sitemap"


class TestNotifySearchEngines:
    """Test POST /notify-search-engines."""

    @pytest.mark.asyncio
    async def test_pings_both_engines(self, async_client, outbound):
        response = await async_client.post("/functions/v1/notify-search-engines")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "success": True,
            "google": {"success": True, "status": 200},
            "bing": {"success": True, "status": 200},
            "sitemap_url": SITEMAP_URL,
        }
        assert outbound.hosts() == ["www.google.com", "www.bing.com"]
        assert all(r.url.params["sitemap"] == SITEMAP_URL for r in outbound.requests)

    @pytest.mark.asyncio
    async def test_partial_failure_is_200(self, async_client, outbound, db_session):
        outbound.statuses["www.bing.com"] = 503

        response = await async_client.post("/functions/v1/notify-search-engines")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is False
        assert data["google"] == {"success": True, "status": 200}
        assert data["bing"] == {"success": False, "status": 503}

        rows = (await db_session.execute(select(SeoIndexLog))).scalars().all()
        assert len(rows) == 2

    @pytest.mark.asyncio
    async def test_rate_limited(self, async_client, outbound, db_session):
        db_session.add(SeoIndexLog(
            action="bing_ping",
            target_url=SITEMAP_URL,
            status_code=200,
            success=True,
            log_metadata={},
            created_at=datetime.now(timezone.utc) - timedelta(minutes=2),
        ))
        await db_session.flush()

        response = await async_client.post("/functions/v1/notify-search-engines")

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        data = response.json()
        assert data["success"] is False
        assert data["reason"] == "rate_limited"
        assert "10 minutes" in data["message"]
        assert outbound.requests == []

    @pytest.mark.asyncio
    async def test_unexpected_error(self, async_client):
        with patch(
            "app.api.v1.search_engines.SearchEngineNotifier.notify",
            new=AsyncMock(side_effect=RuntimeError("database unavailable")),
        ):
            response = await async_client.post("/functions/v1/notify-search-engines")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"success": False, "error": "database unavailable"}


class TestIndexNowSubmit:
    """Test POST /indexnow-submit."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [None, {}, {"path": ""}])
    async def test_path_required(self, async_client, outbound, body):
        response = await async_client.post("/functions/v1/indexnow-submit", json=body)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"success": False, "error": "Path is required"}
        assert outbound.requests == []

    @pytest.mark.asyncio
    async def test_skipped_when_not_configured(self, async_client, outbound):
        response = await async_client.post("/functions/v1/indexnow-submit", json={"path": "/quran"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "success": False,
            "skipped": True,
            "message": "IndexNow not configured",
        }
        assert outbound.requests == []

    @pytest.mark.asyncio
    async def test_submitted(self, async_client, outbound, db_session):
        db_session.add(AppSetting(
            setting_key="indexnow",
            setting_value={"api_key": "abc123", "host": "noor.app"},
        ))
        await db_session.flush()
        outbound.statuses["api.indexnow.org"] = 202

        response = await async_client.post("/functions/v1/indexnow-submit", json={"path": "/dua"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "status": 202, "url": "https://noor.app/dua"}
        assert outbound.hosts() == ["api.indexnow.org"]
