"""
Ad slot selection.

Picks active ads for a placement and decides, from the caller's request
headers, whether third-party script ads may be served at all. Script ads
are never served inside WebViews, in-app browsers, installed PWAs,
iframes, to crawlers, or on admin pages.
"""
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from urllib.parse import urlparse

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.ads import Ad, AdStatus, AdType

logger = logging.getLogger(__name__)

WEBVIEW_PATTERN = re.compile(r"\bwv\b|WebView", re.IGNORECASE)
IN_APP_BROWSER_PATTERN = re.compile(r"FBAN|FBAV|Instagram", re.IGNORECASE)
BOT_PATTERN = re.compile(r"bot|crawl|spider|slurp|baidu|yandex|duckduck", re.IGNORECASE)

ALL_PLATFORMS = "all"

# Ad types that load an external script in the page
SCRIPT_AD_TYPES = (AdType.ADSENSE.value,)


@dataclass
class EmbedContext:
    """Where the requesting page is being rendered."""
    webview: bool = False
    in_app_browser: bool = False
    standalone: bool = False
    iframe: bool = False
    bot: bool = False
    admin_route: bool = False

    @property
    def embedded(self) -> bool:
        return self.webview or self.in_app_browser or self.standalone or self.iframe

    @property
    def allows_script_ads(self) -> bool:
        return not (self.embedded or self.bot or self.admin_route)


def detect_embed_context(
    user_agent: str | None,
    display_mode: str | None = None,
    fetch_dest: str | None = None,
    referer: str | None = None,
) -> EmbedContext:
    """
    Classify the rendering context from request headers.

    Args:
        user_agent: User-Agent header; a missing UA is treated as a bot
        display_mode: X-Display-Mode header sent by the installed PWA
        fetch_dest: Sec-Fetch-Dest header ("iframe" when framed)
        referer: Referer header, used to spot admin pages
    """
    ua = user_agent or ""
    referer_path = urlparse(referer).path if referer else ""

    return EmbedContext(
        webview=bool(WEBVIEW_PATTERN.search(ua)),
        in_app_browser=bool(IN_APP_BROWSER_PATTERN.search(ua)),
        standalone=(display_mode or "").lower() == "standalone",
        iframe=(fetch_dest or "").lower() in ("iframe", "frame"),
        bot=not ua or bool(BOT_PATTERN.search(ua)),
        admin_route=referer_path.startswith("/admin"),
    )


class AdService:
    """Service selecting ads for a slot."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def ads_for_slot(
        self,
        platform: str,
        placement: str,
        limit: int = 1,
        context: EmbedContext | None = None,
        now: datetime | None = None,
    ) -> list[Ad]:
        """Active, in-window ads for the slot, highest priority first."""
        now = now or datetime.now(timezone.utc)
        context = context or EmbedContext()

        query = select(Ad).where(
            Ad.status == AdStatus.ACTIVE.value,
            Ad.placement == placement,
            Ad.target_platform.in_([platform, ALL_PLATFORMS]),
            or_(Ad.start_at.is_(None), Ad.start_at <= now),
            or_(Ad.end_at.is_(None), Ad.end_at >= now),
        )
        if not context.allows_script_ads:
            query = query.where(Ad.ad_type.not_in(SCRIPT_AD_TYPES))
        query = query.order_by(Ad.priority.desc()).limit(limit)

        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Error loading ads for {platform}/{placement}: {e}")
            return []
        return list(result.scalars().all())
