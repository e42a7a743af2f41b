"""
Search engine notification endpoint.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_db, get_ping_client
from app.integrations.search_engines import SearchEnginePingClient
from app.schemas.common import FunctionErrorResponse, RateLimitedResponse
from app.schemas.seo import NotifyResponse
from app.services.search_engine_notifier import PingRateLimited, SearchEngineNotifier

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Indexing"])


@router.post(
    "/notify-search-engines",
    response_model=NotifyResponse,
    responses={
        429: {"model": RateLimitedResponse, "description": "A ping round ran inside the rate-limit window"},
        500: {"model": FunctionErrorResponse},
    },
)
async def notify_search_engines(
    db: Annotated[AsyncSession, Depends(get_db)],
    client: Annotated[SearchEnginePingClient, Depends(get_ping_client)],
):
    """Ping Google and Bing with the sitemap URL."""
    notifier = SearchEngineNotifier(db, client)

    try:
        result = await notifier.notify()
    except PingRateLimited as e:
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content=RateLimitedResponse(message=str(e)).model_dump(),
        )
    except Exception as e:
        logger.exception("[PING] Search engine notification error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=FunctionErrorResponse(error=str(e) or "Unknown error").model_dump(),
        )

    return result.to_dict()
