"""
Notification history endpoints.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import AdminClaims, get_db
from app.schemas.notification import NotificationResponse
from app.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    admin: AdminClaims,
    db: Annotated[AsyncSession, Depends(get_db)],
    limit: int = Query(default=20, ge=1, le=100),
    status: str | None = None,
):
    """Latest notification campaigns, newest first."""
    rows = await NotificationService(db).list_recent(limit, status)
    return [NotificationResponse.model_validate(r) for r in rows]
