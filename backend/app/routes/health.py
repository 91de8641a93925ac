"""
Booklist Backend - Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings the document store and reports aggregate status.
Who:   Called by container health checks, load balancers, and monitoring.

Status levels:
    - healthy:   store reachable (HTTP 200)
    - unhealthy: store unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app import __version__
from app.schemas.common import HealthResponse
from app.store import DocumentStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(store: DocumentStore = Depends(get_store)) -> JSONResponse:
    """
    Probe the store with a trivial query and report status and uptime.

    Why lightweight: health checks run every few seconds; SELECT 1 is free.
    """
    reachable = await store.ping()
    if not reachable:
        logger.warning("Health check: store unreachable")

    body = HealthResponse(
        status="healthy" if reachable else "unhealthy",
        version=__version__,
        database="connected" if reachable else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(status_code=200 if reachable else 503, content=body.model_dump())
