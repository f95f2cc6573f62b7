"""Admin API router for management endpoints."""

from fastapi import APIRouter

from exclude_categories.api.admin.exclusions import router as exclusions_router
from exclude_categories.api.admin.health import router as health_router

admin_router = APIRouter(prefix="/admin/v1", tags=["Admin"])

admin_router.include_router(health_router, prefix="/health")
admin_router.include_router(exclusions_router, prefix="/exclusions")
