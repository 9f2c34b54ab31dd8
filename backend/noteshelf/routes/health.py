"""
NoteShelf Backend: Health Check Routes
======================================

What:  Liveness and readiness probes.
Who:   Docker health checks, load balancers, and humans poking the API.

    GET /test    always {"message": "API is working"} while the process serves HTTP
    GET /health  also probes the database with SELECT 1
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from noteshelf import __version__
from noteshelf.schemas.common import HealthResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: initialized once when the module loads
_start_time = time.time()


@router.get("/test", response_model=MessageResponse, summary="Liveness probe")
async def liveness() -> MessageResponse:
    return MessageResponse(message="API is working")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Reports database connectivity and uptime.",
)
async def health_check() -> HealthResponse:
    """
    Check the health of the service and its database.

    Returns:
        HealthResponse with status "healthy" when SELECT 1 succeeds,
        "unhealthy" otherwise.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        from noteshelf.database import engine
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
