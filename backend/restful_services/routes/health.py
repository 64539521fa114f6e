"""
RESTful Services — Health Check Route
======================================

What:  Liveness endpoint for container health checks and load balancers.
How:   Reports status, version and uptime. The service has no downstream
       dependencies, so a response at all means it is healthy.
"""

import time

from fastapi import APIRouter

from restful_services import __version__
from restful_services.schemas.common import HealthResponse

HEALTH_PATH = "/health"

router = APIRouter(tags=["Health"])

# Set once at import; uptime is measured from here
_start_time = time.time()


@router.get(
    HEALTH_PATH,
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
