"""
Todoolittle Backend: Health Check Route
=========================================

What:  Liveness/readiness probe for process supervisors and load balancers.
How:   Runs SELECT 1 against the todo store.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from todoolittle import __version__
from todoolittle.context import AppContext
from todoolittle.dependencies import get_context
from todoolittle.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    context: AppContext = Depends(get_context),
) -> HealthResponse:
    db_ok = await context.database.ping()
    if not db_ok:
        logger.warning("Health check failed: database unreachable")
        response.status_code = 503

    return HealthResponse(
        status="healthy" if db_ok else "unhealthy",
        version=__version__,
        database="connected" if db_ok else "disconnected",
        uptime_seconds=round(time.time() - context.started_at, 2),
    )
