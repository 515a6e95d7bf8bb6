"""HTTP error envelope and exception handlers.

Route handlers either raise an ``AppException`` directly or let a search or
gateway error propagate; ``to_app_exception`` decides the status code and
error code for the latter. Every error body is an ``ErrorResponse``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipe_finder.clients.mealdb.exceptions import GatewayError
from recipe_finder.observability.logging import get_logger
from recipe_finder.services.search.exceptions import (
    DetailsFetchFailedError,
    InvalidQueryError,
    RandomRecipeUnavailableError,
    SearchError,
)


if TYPE_CHECKING:
    from fastapi import Request

logger = get_logger(__name__)


class ErrorDetail(BaseModel):
    """One invalid request field."""

    code: str
    message: str
    field: str | None = None


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    message: str
    details: list[ErrorDetail] | None = None
    request_id: str | None = None


class AppException(Exception):
    """Base for exceptions that carry their own HTTP status and error code."""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        details: list[ErrorDetail] | None = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundException(AppException):
    """No resource with the requested identifier."""

    def __init__(self, resource: str, identifier: Any) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error="NOT_FOUND",
            message=f"{resource} with identifier '{identifier}' not found",
        )


class InvalidQueryException(AppException):
    """Blank or otherwise unusable search query."""

    def __init__(self, message: str = "Search query must not be blank") -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="INVALID_QUERY",
            message=message,
        )


class DetailsUnavailableException(AppException):
    """Recipe details could not be fetched from the gateway."""

    def __init__(self, recipe_id: str) -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error="DETAILS_UNAVAILABLE",
            message=f"Details for recipe '{recipe_id}' are currently unavailable",
        )


class ServiceUnavailableException(AppException):
    """The recipe gateway could not serve the request."""

    def __init__(self, message: str = "Recipe gateway unavailable") -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error="SERVICE_UNAVAILABLE",
            message=message,
        )


def to_app_exception(exc: SearchError | GatewayError) -> AppException:
    """Translate a search or gateway error into its HTTP counterpart."""
    if isinstance(exc, InvalidQueryError):
        return InvalidQueryException(str(exc))
    if isinstance(exc, DetailsFetchFailedError):
        return DetailsUnavailableException(exc.recipe_id)
    if isinstance(exc, RandomRecipeUnavailableError):
        return ServiceUnavailableException(str(exc))
    return ServiceUnavailableException()


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: list[ErrorDetail] | None = None,
) -> ORJSONResponse:
    body = ErrorResponse(
        error=error,
        message=message,
        details=details,
        request_id=getattr(request.state, "request_id", None),
    )
    return ORJSONResponse(status_code=status_code, content=body.model_dump())


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> ORJSONResponse:
        return _error_response(
            request, exc.status_code, exc.error, exc.message, exc.details
        )

    @app.exception_handler(SearchError)
    @app.exception_handler(GatewayError)
    async def domain_exception_handler(
        request: Request,
        exc: SearchError | GatewayError,
    ) -> ORJSONResponse:
        """Render search and gateway errors that escaped a route handler."""
        translated = to_app_exception(exc)
        if translated.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.warning(
                "Recipe gateway unavailable",
                path=request.url.path,
                error=str(exc),
            )
        return _error_response(
            request, translated.status_code, translated.error, translated.message
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        return _error_response(request, exc.status_code, "HTTP_ERROR", str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        """List every rejected query or path parameter."""
        details = [
            ErrorDetail(
                code="VALIDATION_ERROR",
                message=error["msg"],
                field=".".join(str(loc) for loc in error["loc"]),
            )
            for error in exc.errors()
        ]
        return _error_response(
            request,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "VALIDATION_ERROR",
            "Request validation failed",
            details,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        logger.opt(exception=exc).error(
            "Unhandled exception", path=request.url.path
        )
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_SERVER_ERROR",
            "An unexpected error occurred",
        )
