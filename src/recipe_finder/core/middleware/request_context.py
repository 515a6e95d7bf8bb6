"""Request context middleware.

Gives every request an id (propagated from ``X-Request-ID`` when the caller
sends one), binds it to the logging context, and reports the processing
time in ``X-Process-Time``.
"""

from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING, Final

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipe_finder.observability.logging import bind_context, clear_context, get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = get_logger(__name__)

REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
PROCESS_TIME_HEADER: Final[str] = "X-Process-Time"

# Requests slower than this are logged at WARNING (seconds)
SLOW_REQUEST_THRESHOLD: Final[float] = 2.0


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Attach a request id and timing header to every response."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        slow_threshold: float = SLOW_REQUEST_THRESHOLD,
    ) -> None:
        super().__init__(app)
        self.slow_threshold = slow_threshold

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Bind the request id, time the request and decorate the response."""
        clear_context()

        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        bind_context(request_id=request_id)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started
        elapsed_ms = round(elapsed * 1000, 2)

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed_ms}ms"

        # Searches fan out to many gateway calls; flag the slow ones
        if elapsed > self.slow_threshold:
            logger.warning(
                "Slow request detected",
                method=request.method,
                path=request.url.path,
                process_time_ms=elapsed_ms,
                threshold_ms=self.slow_threshold * 1000,
            )

        return response
