"""Request ID and access-log middleware.

Takes the caller's X-Request-ID header (or generates a UUID4), stores it in
a ContextVar so it can be read anywhere in the request lifecycle, echoes it
back on the response and writes one access-log line per request.
"""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

log = logging.getLogger(__name__)

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_HEADER = "X-Request-ID"


def get_request_id() -> str:
    return request_id_var.get()


def _log_access(request: Request, status_code: int, started: float, req_id: str) -> None:
    elapsed_ms = (time.perf_counter() - started) * 1000
    log.info(
        "%s %s -> %d (%.1f ms) [%s]",
        request.method,
        request.url.path,
        status_code,
        elapsed_ms,
        req_id,
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        req_id = request.headers.get(_HEADER) or str(uuid.uuid4())
        request_id_var.set(req_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors become a 500 in the outer ServerErrorMiddleware
            _log_access(request, 500, started, req_id)
            raise
        response.headers[_HEADER] = req_id
        _log_access(request, response.status_code, started, req_id)
        return response
