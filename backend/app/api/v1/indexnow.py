"""
IndexNow submission endpoint.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.deps import get_db, get_indexnow_client
from app.integrations.indexnow import IndexNowClient
from app.schemas.common import FunctionErrorResponse, SkippedResponse
from app.schemas.seo import IndexNowResponse, IndexNowSubmitRequest
from app.services.indexnow_service import IndexNowService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Indexing"])


@router.post(
    "/indexnow-submit",
    response_model=IndexNowResponse | SkippedResponse,
    responses={
        400: {"model": FunctionErrorResponse, "description": "Path is missing"},
        500: {"model": FunctionErrorResponse},
    },
)
async def indexnow_submit(
    db: Annotated[AsyncSession, Depends(get_db)],
    client: Annotated[IndexNowClient, Depends(get_indexnow_client)],
    data: IndexNowSubmitRequest | None = None,
):
    """Submit one path to IndexNow. Skipped when IndexNow is not configured."""
    if data is None or not data.path:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=FunctionErrorResponse(error="Path is required").model_dump(),
        )

    try:
        result = await IndexNowService(db, client).submit(data.path)
    except Exception as e:
        logger.exception("[INDEXNOW] IndexNow submission error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=FunctionErrorResponse(error=str(e) or "Unknown error").model_dump(),
        )

    if result is None:
        return SkippedResponse(message="IndexNow not configured")

    return IndexNowResponse(success=result.success, status=result.status, url=result.url)
