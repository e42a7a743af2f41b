"""
App settings service (key/value JSON settings).
"""
import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.settings import AppSetting

logger = logging.getLogger(__name__)


class AppSettingsService:
    """Service for app settings operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_key(self, key: str) -> AppSetting | None:
        result = await self.db.execute(
            select(AppSetting).where(AppSetting.setting_key == key)
        )
        return result.scalar_one_or_none()

    async def get_value(self, key: str) -> Any:
        """Get a setting's value, or None when the row does not exist."""
        setting = await self.get_by_key(key)
        if setting is None:
            return None
        return setting.setting_value or {}

    async def get_value_or_empty(self, key: str) -> dict[str, Any]:
        """Get a setting's value, degrading to {} when missing or unreadable."""
        try:
            value = await self.get_value(key)
        except SQLAlchemyError as e:
            logger.error(f"Error loading setting {key}: {e}")
            return {}
        return value or {}

    async def upsert(self, key: str, value: dict[str, Any]) -> AppSetting:
        """Create or replace the value stored under ``key``."""
        setting = await self.get_by_key(key)
        if setting is None:
            setting = AppSetting(setting_key=key, setting_value=value)
            self.db.add(setting)
        else:
            setting.setting_value = value

        await self.db.flush()
        await self.db.refresh(setting)
        return setting
