"""Unit tests for request context middleware.

Tests cover:
- Request ID generation and propagation
- Logging context binding
- Processing time header
- Slow request warnings
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from recipe_finder.core.middleware.request_context import (
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    RequestContextMiddleware,
)
from recipe_finder.observability.logging import get_context


pytestmark = pytest.mark.unit


def _request(headers: dict[str, str] | None = None) -> MagicMock:
    request = MagicMock()
    request.headers = headers or {}
    request.state = MagicMock()
    request.method = "GET"
    request.url.path = "/api/v1/recipe-finder/search"
    return request


def _response() -> MagicMock:
    response = MagicMock()
    response.headers = {}
    return response


class TestRequestContextMiddleware:
    """Tests for RequestContextMiddleware."""

    def test_default_threshold(self) -> None:
        """Should flag requests slower than two seconds by default."""
        middleware = RequestContextMiddleware(MagicMock())
        assert middleware.slow_threshold == 2.0

    async def test_generates_request_id(self) -> None:
        """Should generate an id when the caller sends none."""
        middleware = RequestContextMiddleware(MagicMock())
        request = _request()
        call_next = AsyncMock(return_value=_response())

        result = await middleware.dispatch(request, call_next)

        request_id = result.headers[REQUEST_ID_HEADER]
        assert len(request_id) == 32
        assert request.state.request_id == request_id

    async def test_propagates_request_id(self) -> None:
        """Should reuse the caller's request id."""
        middleware = RequestContextMiddleware(MagicMock())
        request = _request({REQUEST_ID_HEADER: "abc-123"})
        call_next = AsyncMock(return_value=_response())

        result = await middleware.dispatch(request, call_next)

        assert result.headers[REQUEST_ID_HEADER] == "abc-123"
        assert get_context()["request_id"] == "abc-123"

    async def test_clears_previous_context(self) -> None:
        """Should start every request with a fresh logging context."""
        middleware = RequestContextMiddleware(MagicMock())
        call_next = AsyncMock(return_value=_response())

        with (
            patch(
                "recipe_finder.core.middleware.request_context.clear_context"
            ) as mock_clear,
            patch(
                "recipe_finder.core.middleware.request_context.bind_context"
            ) as mock_bind,
        ):
            await middleware.dispatch(_request({REQUEST_ID_HEADER: "r1"}), call_next)

        mock_clear.assert_called_once()
        mock_bind.assert_called_once_with(request_id="r1")

    async def test_adds_process_time(self) -> None:
        """Should report the processing time in milliseconds."""
        middleware = RequestContextMiddleware(MagicMock())
        call_next = AsyncMock(return_value=_response())

        result = await middleware.dispatch(_request(), call_next)

        assert result.headers[PROCESS_TIME_HEADER].endswith("ms")
        float(result.headers[PROCESS_TIME_HEADER].removesuffix("ms"))

    async def test_warns_on_slow_request(self) -> None:
        """Should log a warning above the threshold."""
        middleware = RequestContextMiddleware(MagicMock(), slow_threshold=0.0)

        async def slow_next(_: Request) -> MagicMock:
            await asyncio.sleep(0.01)
            return _response()

        with patch("recipe_finder.core.middleware.request_context.logger") as log:
            await middleware.dispatch(_request(), slow_next)

        log.warning.assert_called_once()
        assert log.warning.call_args.args[0] == "Slow request detected"

    async def test_no_warning_for_fast_request(self) -> None:
        """Should stay quiet below the threshold."""
        middleware = RequestContextMiddleware(MagicMock(), slow_threshold=60.0)
        call_next = AsyncMock(return_value=_response())

        with patch("recipe_finder.core.middleware.request_context.logger") as log:
            await middleware.dispatch(_request(), call_next)

        log.warning.assert_not_called()


class TestRequestContextInApp:
    """Tests for the middleware mounted on an application."""

    def test_headers_on_real_response(self) -> None:
        """Should decorate responses of a real route."""
        app = FastAPI()
        app.add_middleware(RequestContextMiddleware)

        @app.get("/ping")
        async def ping(request: Request) -> dict[str, str]:
            return {"request_id": request.state.request_id}

        response = TestClient(app).get("/ping", headers={REQUEST_ID_HEADER: "xyz"})

        assert response.headers[REQUEST_ID_HEADER] == "xyz"
        assert response.json() == {"request_id": "xyz"}
        assert PROCESS_TIME_HEADER in response.headers
