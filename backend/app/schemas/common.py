"""
Shared Pydantic building blocks.
"""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Reads ORM objects and accepts fields by name or alias."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class IDSchema(BaseSchema):
    id: UUID


class RecordSchema(IDSchema):
    """A stored row with its timestamps."""

    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseSchema):
    """Acknowledgement of an admin write."""

    message: str
    success: bool = True


class FunctionErrorResponse(BaseSchema):
    """Error body of the public function endpoints."""

    success: bool = False
    error: str


class RateLimitedResponse(BaseSchema):
    success: bool = False
    reason: str = "rate_limited"
    message: str


class SkippedResponse(BaseSchema):
    success: bool = False
    skipped: bool = True
    message: str
