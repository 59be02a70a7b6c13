# ABOUTME: Shared fixtures for Starlette integration tests
# ABOUTME: Builds applications with a host fallback error handler and test clients

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.testclient import TestClient


async def something_broke(request: Request, exc: Exception) -> PlainTextResponse:
    """Host fallback for errors the chain delegates."""
    return PlainTextResponse("Something broke!", status_code=500)


@pytest.fixture
def make_client():
    """Factory building a TestClient for the given routes."""

    def _make(*routes, exception_handlers=None) -> TestClient:
        handlers = {Exception: something_broke}
        handlers.update(exception_handlers or {})
        app = Starlette(routes=list(routes), exception_handlers=handlers)
        return TestClient(app, raise_server_exceptions=False)

    return _make
