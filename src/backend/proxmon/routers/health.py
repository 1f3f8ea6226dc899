"""Health check endpoints.

Both endpoints are mounted at root (no /api prefix) and are meant for
container liveness and readiness checks.
"""

import importlib.metadata
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from proxmon.database import AsyncSessionLocal

log = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check: returns 200 if the application process is running."""
    version = importlib.metadata.version("proxmon")
    return {"status": "ok", "version": version}


@router.get("/health/ready")
async def health_ready() -> JSONResponse:
    """Readiness check: returns 200 if the DB is reachable, 503 otherwise."""
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
    except Exception as exc:  # noqa: BLE001
        log.warning("Readiness check failed: %s", exc)
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "detail": str(exc)},
        )
    return JSONResponse(status_code=200, content={"status": "ok"})
