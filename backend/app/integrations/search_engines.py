"""
Sitemap ping client for Google and Bing.
"""
import logging
from dataclasses import dataclass

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


@dataclass
class PingResult:
    """Outcome of a single sitemap ping."""
    engine: str
    success: bool
    status: int | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        return {"success": self.success, "status": self.status}


class SearchEnginePingClient:
    """HTTP client that notifies search engines about a sitemap."""

    def __init__(
        self,
        google_url: str | None = None,
        bing_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.endpoints = {
            "google": google_url or settings.GOOGLE_PING_URL,
            "bing": bing_url or settings.BING_PING_URL,
        }
        self.timeout = timeout or settings.OUTBOUND_TIMEOUT_SECONDS
        self.transport = transport

    async def ping(self, engine: str, sitemap_url: str) -> PingResult:
        """
        Ping one search engine with the sitemap URL.

        Failures are reported in the result, never raised. A ping
        succeeds on any 2xx response.
        """
        endpoint = self.endpoints[engine]
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(endpoint, params={"sitemap": sitemap_url})
        except httpx.HTTPError as e:
            logger.warning(f"[PING] {engine} ping failed: {type(e).__name__}: {e}")
            return PingResult(engine=engine, success=False, error=str(e))

        logger.info(f"[PING] {engine} ping status: {response.status_code}")
        return PingResult(
            engine=engine,
            success=response.is_success,
            status=response.status_code,
        )

    async def ping_all(self, sitemap_url: str) -> dict[str, PingResult]:
        """Ping every configured engine, one after another."""
        results = {}
        for engine in self.endpoints:
            results[engine] = await self.ping(engine, sitemap_url)
        return results
