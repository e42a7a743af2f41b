"""
SEO administration endpoints: page metadata, indexing log and page meta.
"""
import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.deps import AdminClaims, get_db
from app.core.exceptions import NotFoundError
from app.models.seo import IndexAction
from app.schemas.common import MessageResponse
from app.schemas.seo import (
    IndexingStatusResponse,
    PageMetaResponse,
    SeoIndexLogResponse,
    SeoPageResponse,
    SeoPageUpsert,
)
from app.services.seo_page_service import SeoPageService
from app.tasks.seo_tasks import submit_indexnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seo", tags=["SEO"])


@router.get("/pages", response_model=list[SeoPageResponse])
async def list_seo_pages(
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List SEO pages ordered by path."""
    pages = await SeoPageService(db).list_pages()
    return [SeoPageResponse.model_validate(p) for p in pages]


@router.put("/pages", response_model=SeoPageResponse)
async def upsert_seo_page(
    data: SeoPageUpsert,
    admin: AdminClaims,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Create or update the SEO page for ``data.path``."""
    page = await SeoPageService(db).upsert(data)

    if settings.INDEXNOW_AUTO_SUBMIT and page.is_indexable:
        # The page write must survive a broker outage
        try:
            submit_indexnow.delay(page.path)
        except Exception as e:
            logger.warning(f"[INDEXNOW] Could not queue submission for {page.path}: {e}")

    return SeoPageResponse.model_validate(page)


@router.delete("/pages/{page_id}", response_model=MessageResponse)
async def delete_seo_page(
    page_id: UUID,
    admin: AdminClaims,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Delete an SEO page."""
    deleted = await SeoPageService(db).delete(page_id)
    if not deleted:
        raise NotFoundError("SEO page")

    return MessageResponse(message="SEO page deleted")


@router.get("/index-log", response_model=list[SeoIndexLogResponse])
async def list_index_log(
    admin: AdminClaims,
    db: Annotated[AsyncSession, Depends(get_db)],
    limit: int = Query(default=20, ge=1, le=200),
):
    """Latest indexing log rows, newest first."""
    rows = await SeoPageService(db).list_index_log(limit)
    return [SeoIndexLogResponse.model_validate(r) for r in rows]


@router.get("/status", response_model=IndexingStatusResponse)
async def get_indexing_status(
    admin: AdminClaims,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Indexable page count and the latest ping per search engine."""
    service = SeoPageService(db)
    pages = await service.list_pages()
    last_google = await service.last_log_for(IndexAction.GOOGLE_PING)
    last_bing = await service.last_log_for(IndexAction.BING_PING)

    return IndexingStatusResponse(
        indexable_pages=sum(1 for p in pages if p.is_indexable),
        total_pages=len(pages),
        sitemap_url=settings.sitemap_url,
        last_google_ping=SeoIndexLogResponse.model_validate(last_google) if last_google else None,
        last_bing_ping=SeoIndexLogResponse.model_validate(last_bing) if last_bing else None,
    )


@router.get("/meta", response_model=PageMetaResponse)
async def get_page_meta(
    db: Annotated[AsyncSession, Depends(get_db)],
    path: str = Query(default="/", min_length=1),
    app_name: str | None = None,
):
    """Resolve the meta tags for a public page."""
    return await SeoPageService(db).resolve_meta(path, app_name)
