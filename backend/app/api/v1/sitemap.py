"""
Sitemap endpoint.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.deps import get_db
from app.services.sitemap_service import SitemapDataError, SitemapService, resolve_origin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Sitemap"])


@router.get(
    "/sitemap",
    response_class=Response,
    responses={
        200: {"content": {"application/xml": {}}, "description": "Sitemap document"},
        500: {"content": {"text/plain": {}}, "description": "Sitemap data unavailable"},
    },
)
async def get_sitemap(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    host: str | None = Query(default=None, description="Public host to build URLs for"),
):
    """Generate the sitemap from SEO pages and published content."""
    origin = resolve_origin(host, request.url.scheme, request.url.netloc)

    try:
        xml = await SitemapService(db).generate(origin)
    except SitemapDataError as e:
        return PlainTextResponse(str(e), status_code=500)
    except Exception:
        logger.exception("[SITEMAP] Sitemap generation error")
        return PlainTextResponse("Internal server error", status_code=500)

    max_age = settings.SITEMAP_CACHE_MAX_AGE
    return Response(
        content=xml,
        media_type="application/xml; charset=utf-8",
        headers={"Cache-Control": f"public, max-age={max_age}, s-maxage={max_age}"},
    )
