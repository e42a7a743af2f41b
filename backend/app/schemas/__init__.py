"""
Pydantic schemas for API request/response validation.
"""
from app.schemas.common import (
    BaseSchema,
    IDSchema,
    RecordSchema,
    MessageResponse,
    FunctionErrorResponse,
    RateLimitedResponse,
    SkippedResponse,
)
from app.schemas.seo import (
    SeoPageUpsert,
    SeoPageResponse,
    SeoIndexLogResponse,
    IndexingStatusResponse,
    PageMetaResponse,
    IndexNowSubmitRequest,
    IndexNowResponse,
    PingStatus,
    NotifyResponse,
)
from app.schemas.settings import (
    AppSettingResponse,
    LayoutSettingResponse,
    PageSectionResponse,
)
from app.schemas.ads import AdResponse
from app.schemas.notification import NotificationResponse

__all__ = [
    "BaseSchema",
    "IDSchema",
    "RecordSchema",
    "MessageResponse",
    "FunctionErrorResponse",
    "RateLimitedResponse",
    "SkippedResponse",
    "SeoPageUpsert",
    "SeoPageResponse",
    "SeoIndexLogResponse",
    "IndexingStatusResponse",
    "PageMetaResponse",
    "IndexNowSubmitRequest",
    "IndexNowResponse",
    "PingStatus",
    "NotifyResponse",
    "AppSettingResponse",
    "LayoutSettingResponse",
    "PageSectionResponse",
    "AdResponse",
    "NotificationResponse",
]
