"""Proxmox Monitor FastAPI application.

Entry point: uvicorn proxmon.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from proxmon.config import settings
from proxmon.database import AsyncSessionLocal, async_engine
from proxmon.demo.seed import seed_demo_data
from proxmon.errors import ProxmonError, ValidationError
from proxmon.middleware import RequestIDMiddleware, get_request_id
from proxmon.routers import alerts, dashboard, health, servers, storage, vms

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if settings.SEED_DEMO_DATA:
        async with AsyncSessionLocal() as session:
            await seed_demo_data(session)

    yield

    await async_engine.dispose()


app = FastAPI(title="Proxmox Monitor", lifespan=lifespan)

app.add_middleware(RequestIDMiddleware)


def _error_response(exc: ProxmonError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.code,
                "message": exc.message,
                "request_id": get_request_id(),
            }
        },
        headers={"X-Request-ID": get_request_id()},
    )


@app.exception_handler(ProxmonError)
async def proxmon_error_handler(request: Request, exc: ProxmonError) -> JSONResponse:
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return _error_response(ValidationError(problems or "Invalid request"))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(ProxmonError("Internal server error"))


app.include_router(health.router)
app.include_router(servers.router)
app.include_router(vms.router)
app.include_router(alerts.router)
app.include_router(storage.router)
app.include_router(dashboard.router)
