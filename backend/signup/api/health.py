"""Health check endpoint."""

import time
from fastapi import APIRouter

from signup.config import get_settings
from signup.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness check. The service has no external dependencies to probe."""
    return HealthResponse(
        status="healthy",
        version=get_settings().VERSION,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
