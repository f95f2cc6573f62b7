"""V1 API router for host-facing hook endpoints."""

from fastapi import APIRouter

from exclude_categories.api.v1.queries import router as queries_router

v1_router = APIRouter(prefix="/v1", tags=["Hooks"])

v1_router.include_router(queries_router)
