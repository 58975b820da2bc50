"""Health check routes."""

import time
from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from threadly.config import Settings

API_VERSION = "0.1.0"

_STARTED_AT = time.monotonic()

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness report."""

    status: str
    timestamp: datetime
    uptime_seconds: float
    version: str
    environment: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up.

    Touches no database, so a slow database never fails the liveness probe.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        uptime_seconds=round(time.monotonic() - _STARTED_AT, 3),
        version=API_VERSION,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
