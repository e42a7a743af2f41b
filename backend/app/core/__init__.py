"""
Core utilities for Noor SEO.
"""
from app.core.security import (
    create_access_token,
    decode_token,
    is_admin,
)
from app.core.deps import (
    get_current_claims,
    require_admin,
    AdminClaims,
)

__all__ = [
    "create_access_token",
    "decode_token",
    "is_admin",
    "get_current_claims",
    "require_admin",
    "AdminClaims",
]
