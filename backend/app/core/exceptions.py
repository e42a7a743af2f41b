"""
HTTP errors raised by the admin endpoints.

The public function endpoints answer with ``{"success": false, ...}``
bodies instead and never raise these.
"""
from fastapi import HTTPException, status


class AdminAPIError(HTTPException):
    """An HTTPException with a per-class status code and default detail."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None, headers: dict[str, str] | None = None):
        super().__init__(
            status_code=self.http_status,
            detail=detail or self.default_detail,
            headers=headers,
        )


class UnauthorizedError(AdminAPIError):
    """Missing or invalid bearer token."""

    http_status = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid credentials"

    def __init__(self, detail: str | None = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(AdminAPIError):
    http_status = status.HTTP_403_FORBIDDEN
    default_detail = "Access denied"


class NotFoundError(AdminAPIError):
    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str = "Resource"):
        super().__init__(f"{resource} not found")
