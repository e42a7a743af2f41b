"""
FastAPI dependencies for authentication, database and outbound clients.
"""
from typing import Annotated, Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.security import decode_token, is_admin
from app.database import get_db
from app.integrations.indexnow import IndexNowClient
from app.integrations.search_engines import SearchEnginePingClient
from app.services.ad_service import EmbedContext, detect_embed_context

security = HTTPBearer(auto_error=False)


async def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> dict[str, Any]:
    """Get the claims of the bearer JWT."""
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    payload = decode_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedError("Could not validate credentials")

    return payload


async def require_admin(
    claims: Annotated[dict[str, Any], Depends(get_current_claims)],
) -> dict[str, Any]:
    """Ensure the caller holds an admin role."""
    if not is_admin(claims):
        raise ForbiddenError("Admin role required")
    return claims


def get_ping_client() -> SearchEnginePingClient:
    return SearchEnginePingClient()


def get_indexnow_client() -> IndexNowClient:
    return IndexNowClient()


def get_embed_context(request: Request) -> EmbedContext:
    """Classify where the caller renders the page, from its headers."""
    return detect_embed_context(
        user_agent=request.headers.get("user-agent"),
        display_mode=request.headers.get("x-display-mode"),
        fetch_dest=request.headers.get("sec-fetch-dest"),
        referer=request.headers.get("referer"),
    )


# Common dependencies
AdminClaims = Annotated[dict[str, Any], Depends(require_admin)]

__all__ = [
    "get_db",
    "get_current_claims",
    "require_admin",
    "get_ping_client",
    "get_indexnow_client",
    "get_embed_context",
    "AdminClaims",
]
