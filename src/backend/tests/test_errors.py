"""Tests for the ProxmonError hierarchy and the global exception handlers.

Every error response has the shape
  {"error": {"code": "...", "message": "...", "request_id": "..."}}
"""

import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from proxmon import main
from proxmon.errors import NotFoundError, ProxmonError, ValidationError
from proxmon.main import proxmon_error_handler
from proxmon.middleware import RequestIDMiddleware
from proxmon.routers import servers


def make_test_app(*error_classes: type[ProxmonError]) -> FastAPI:
    """Build a minimal FastAPI app with one route per error class."""
    test_app = FastAPI()
    test_app.add_middleware(RequestIDMiddleware)
    test_app.add_exception_handler(ProxmonError, proxmon_error_handler)

    for cls in error_classes:
        path = f"/raise/{cls.__name__.lower()}"

        async def make_route(error_cls=cls):
            raise error_cls("test message")

        test_app.get(path)(make_route)

    return test_app


ERROR_CASES = [
    (NotFoundError, 404, "NOT_FOUND"),
    (ValidationError, 400, "VALIDATION_ERROR"),
    (ProxmonError, 500, "INTERNAL_ERROR"),
]


class TestErrorHierarchy:
    @pytest.mark.parametrize("error_cls,expected_status,expected_code", ERROR_CASES)
    async def test_error_status_and_code(self, error_cls, expected_status, expected_code):
        app = make_test_app(error_cls)

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            response = await client.get(f"/raise/{error_cls.__name__.lower()}")

        assert response.status_code == expected_status
        body = response.json()
        assert body["error"]["code"] == expected_code
        assert body["error"]["message"] == "test message"
        assert "request_id" in body["error"]

    async def test_request_id_in_body_matches_header(self):
        app = make_test_app(NotFoundError)

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            response = await client.get("/raise/notfounderror")

        body = response.json()
        assert body["error"]["request_id"] == response.headers["x-request-id"]

    async def test_incoming_request_id_is_reused(self):
        app = make_test_app(NotFoundError)

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            response = await client.get(
                "/raise/notfounderror", headers={"X-Request-ID": "trace-abc"}
            )

        assert response.headers["x-request-id"] == "trace-abc"
        assert response.json()["error"]["request_id"] == "trace-abc"


class TestAppErrorHandlers:
    async def test_malformed_body_returns_400(self, client):
        response = await client.post("/api/servers", json={"name": "pve"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert "host" in body["error"]["message"]

    async def test_non_integer_path_id_returns_400(self, client):
        response = await client.get("/api/servers/not-a-number")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_unexpected_exception_returns_500(self, client):
        class BrokenService:
            async def list_servers(self, status=None):
                raise RuntimeError("connection reset")

        main.app.dependency_overrides[servers._service] = lambda: BrokenService()
        response = await client.get("/api/servers")

        assert response.status_code == 500
        body = response.json()
        assert body["error"]["code"] == "INTERNAL_ERROR"
        assert "connection reset" not in body["error"]["message"]

    async def test_unexpected_exception_is_access_logged(self, client, caplog):
        class BrokenService:
            async def list_servers(self, status=None):
                raise RuntimeError("connection reset")

        main.app.dependency_overrides[servers._service] = lambda: BrokenService()
        caplog.set_level(logging.INFO, logger="proxmon.middleware")

        await client.get("/api/servers", headers={"X-Request-ID": "rid-500"})

        access_lines = [
            r.getMessage() for r in caplog.records if r.name == "proxmon.middleware"
        ]
        assert len(access_lines) == 1
        assert access_lines[0].startswith("GET /api/servers -> 500")
        assert access_lines[0].endswith("[rid-500]")

    async def test_validation_failure_is_access_logged(self, client, caplog):
        caplog.set_level(logging.INFO, logger="proxmon.middleware")

        await client.get("/api/servers/abc")

        access_lines = [
            r.getMessage() for r in caplog.records if r.name == "proxmon.middleware"
        ]
        assert len(access_lines) == 1
        assert access_lines[0].startswith("GET /api/servers/abc -> 400")
