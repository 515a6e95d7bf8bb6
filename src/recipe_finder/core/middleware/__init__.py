"""Custom middleware components."""

from recipe_finder.core.middleware.logging import LoggingMiddleware
from recipe_finder.core.middleware.request_context import RequestContextMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestContextMiddleware",
]
