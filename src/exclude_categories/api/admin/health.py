"""Health check endpoints for liveness/readiness probes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from sqlalchemy import text

from exclude_categories import __version__
from exclude_categories.api.deps import DBSession
from exclude_categories.schemas.health import LivenessResponse, ReadinessResponse

router = APIRouter()


@router.get(
    "/live",
    response_model=LivenessResponse,
    summary="Liveness probe",
)
async def liveness() -> LivenessResponse:
    return LivenessResponse(version=__version__)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
)
async def readiness(db: DBSession) -> ORJSONResponse:
    db_status = "disconnected"

    try:
        await db.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception:
        pass

    overall = "ok" if db_status == "connected" else "degraded"

    return ORJSONResponse(
        status_code=200 if overall == "ok" else 503,
        content=ReadinessResponse(status=overall, database=db_status).model_dump(),
    )
