"""
Animal API: Health Check Route
==============================

What:  Liveness endpoint for monitoring and load balancer probes.
How:   The store lives in process memory, so a response from this handler
       already proves the store is reachable; it reports the record count
       and uptime alongside the version.
"""

import time

from fastapi import APIRouter, Depends

from animal_api import __version__
from animal_api.dependencies import get_store
from animal_api.schemas.animal import HealthResponse
from animal_api.services.store_base import AnimalStore

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: AnimalStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        animals=store.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
