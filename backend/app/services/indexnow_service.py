"""
IndexNow submission service.
"""
import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.integrations.indexnow import IndexNowClient, IndexNowResult
from app.models.seo import IndexAction, SeoIndexLog
from app.services.app_settings_service import AppSettingsService

logger = logging.getLogger(__name__)


@dataclass
class IndexNowConfig:
    """Credentials stored in the ``indexnow`` app setting."""
    api_key: str
    host: str


class IndexNowService:
    """Service submitting changed paths to IndexNow."""

    def __init__(self, db: AsyncSession, client: IndexNowClient | None = None):
        self.db = db
        self.client = client or IndexNowClient()

    async def get_config(self) -> IndexNowConfig | None:
        """Read the IndexNow config; None when the key or host is missing."""
        value = await AppSettingsService(self.db).get_value(settings.INDEXNOW_SETTING_KEY)
        if not isinstance(value, dict) or not value.get("api_key") or not value.get("host"):
            return None
        return IndexNowConfig(api_key=value["api_key"], host=value["host"])

    async def submit(self, path: str) -> IndexNowResult | None:
        """
        Submit ``path`` to IndexNow.

        Returns:
            The submission result, or None when IndexNow is not configured
            (nothing is sent in that case)
        """
        config = await self.get_config()
        if config is None:
            logger.info("[INDEXNOW] No IndexNow config found, skipping")
            return None

        result = await self.client.submit_url(config.host, config.api_key, path)

        self.db.add(
            SeoIndexLog(
                action=IndexAction.INDEXNOW_SUBMIT.value,
                target_url=result.url,
                status_code=result.status,
                success=result.success,
                log_metadata={"path": path},
            )
        )
        await self.db.flush()
        return result
