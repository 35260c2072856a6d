"""
Health check endpoints.

Provides health check endpoints for monitoring service status.
"""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Request

from astrobookings import __version__
from astrobookings.api.v1.health.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        Service status, version, server time and uptime in seconds
    """
    started_at = getattr(request.app.state, "started_at", time.monotonic())
    return HealthResponse(
        status="ok",
        version=__version__,
        timestamp=datetime.now(UTC),
        uptime=round(time.monotonic() - started_at, 3),
    )
