"""
IndexNow API client.

Submits changed URLs to https://api.indexnow.org, which fans the
notification out to participating search engines.
"""
import logging
from dataclasses import dataclass

import httpx

from app.config import settings

logger = logging.getLogger(__name__)

# IndexNow answers 200 (submitted) or 202 (accepted, key validation pending)
ACCEPTED_STATUSES = (200, 202)


@dataclass
class IndexNowResult:
    """Outcome of an IndexNow submission."""
    url: str
    status: int
    success: bool


class IndexNowClient:
    """HTTP client for the IndexNow submission endpoint."""

    def __init__(
        self,
        endpoint: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.endpoint = endpoint or settings.INDEXNOW_ENDPOINT
        self.timeout = timeout or settings.OUTBOUND_TIMEOUT_SECONDS
        self.transport = transport

    @staticmethod
    def build_payload(host: str, api_key: str, urls: list[str]) -> dict:
        return {
            "host": host,
            "key": api_key,
            "keyLocation": f"https://{host}/{api_key}.txt",
            "urlList": urls,
        }

    async def submit_url(self, host: str, api_key: str, path: str) -> IndexNowResult:
        """
        Submit a single path of ``host``.

        Args:
            host: Bare host name the key is registered for
            api_key: IndexNow key, also served at https://{host}/{key}.txt
            path: Absolute path on the host, e.g. "/quran"

        Returns:
            The submitted URL and the endpoint's status, verbatim
        """
        full_url = f"https://{host}{path}"
        logger.info(f"[INDEXNOW] Submitting {full_url}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                self.endpoint,
                json=self.build_payload(host, api_key, [full_url]),
            )

        logger.info(f"[INDEXNOW] Response status: {response.status_code}")
        return IndexNowResult(
            url=full_url,
            status=response.status_code,
            success=response.status_code in ACCEPTED_STATUSES,
        )
