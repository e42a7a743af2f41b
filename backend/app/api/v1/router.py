"""
API v1 router aggregating all endpoints.
"""
from fastapi import APIRouter

from app.api.v1.sitemap import router as sitemap_router
from app.api.v1.search_engines import router as search_engines_router
from app.api.v1.indexnow import router as indexnow_router
from app.api.v1.seo import router as seo_router
from app.api.v1.settings import router as settings_router
from app.api.v1.layout import router as layout_router
from app.api.v1.ads import router as ads_router
from app.api.v1.notifications import router as notifications_router

api_router = APIRouter()

api_router.include_router(sitemap_router)
api_router.include_router(search_engines_router)
api_router.include_router(indexnow_router)
api_router.include_router(seo_router)
api_router.include_router(settings_router)
api_router.include_router(layout_router)
api_router.include_router(ads_router)
api_router.include_router(notifications_router)
