"""
External service integrations for Noor SEO.

- search_engines: sitemap pings for Google and Bing
- indexnow: IndexNow URL submission
"""

from app.integrations.search_engines import PingResult, SearchEnginePingClient
from app.integrations.indexnow import IndexNowClient, IndexNowResult

__all__ = [
    "PingResult",
    "SearchEnginePingClient",
    "IndexNowClient",
    "IndexNowResult",
]
