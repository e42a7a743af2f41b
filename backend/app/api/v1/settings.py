"""
App settings endpoints.
"""
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import AdminClaims, get_db
from app.schemas.settings import AppSettingResponse
from app.services.app_settings_service import AppSettingsService

router = APIRouter(prefix="/settings", tags=["Settings"])

SettingKey = Annotated[str, Path(min_length=1, max_length=100, pattern=r"^[a-z0-9_\-]+$")]


@router.get("/{key}", response_model=dict[str, Any])
async def get_setting(
    key: SettingKey,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Get a setting value; {} when it has never been saved."""
    return await AppSettingsService(db).get_value_or_empty(key)


@router.put("/{key}", response_model=AppSettingResponse)
async def save_setting(
    key: SettingKey,
    admin: AdminClaims,
    db: Annotated[AsyncSession, Depends(get_db)],
    value: dict[str, Any] = Body(...),
):
    """Replace a setting value."""
    setting = await AppSettingsService(db).upsert(key, value)
    return AppSettingResponse.model_validate(setting)
