"""
Nainaland Backend — Health Check Route
========================================

What:  Liveness probe for the process and a quick look at the store.
Why:   With no database, "healthy" means the app is serving and its store is
       attached; the record counts show at a glance whether seeding ran.
"""

import logging
import time

from fastapi import APIRouter, Depends

from nainaland import __version__
from nainaland.dependencies import get_storage
from nainaland.schemas.common import HealthResponse
from nainaland.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(storage: MemStorage = Depends(get_storage)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        records=storage.counts(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
