"""
Ad slot endpoint.
"""
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_db, get_embed_context
from app.schemas.ads import AdResponse
from app.services.ad_service import AdService, EmbedContext

router = APIRouter(prefix="/ads", tags=["Ads"])


@router.get("/slot", response_model=list[AdResponse])
async def get_ads_for_slot(
    db: Annotated[AsyncSession, Depends(get_db)],
    context: Annotated[EmbedContext, Depends(get_embed_context)],
    placement: str = Query(..., min_length=1),
    platform: Literal["web", "app"] = Query(default="web"),
    limit: int = Query(default=1, ge=1, le=20),
):
    """Ads to show in one slot, highest priority first."""
    ads = await AdService(db).ads_for_slot(platform, placement, limit, context)
    return [AdResponse.model_validate(a) for a in ads]
