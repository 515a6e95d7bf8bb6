"""Application factory for creating FastAPI instances.

This module provides the create_app factory function that:
- Configures the FastAPI application from settings
- Sets up the middleware stack in the correct order
- Registers exception handlers
- Mounts the API router
- Configures metrics
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from recipe_finder.api.v1.router import router as v1_router
from recipe_finder.core.config import Settings, get_settings
from recipe_finder.core.events import lifespan
from recipe_finder.core.exceptions import setup_exception_handlers
from recipe_finder.core.middleware import LoggingMiddleware, RequestContextMiddleware
from recipe_finder.observability.metrics import setup_metrics


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    prefix = settings.api.v1_prefix
    show_docs = settings.is_non_production

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description=(
            "Recipe search over TheMealDB: ranked multi-strategy search, "
            "preferred-cuisine promotion and suggestions"
        ),
        lifespan=lifespan,
        docs_url=f"{prefix}/docs" if show_docs else None,
        redoc_url=f"{prefix}/redoc" if show_docs else None,
        openapi_url=f"{prefix}/openapi.json" if show_docs else None,
        debug=settings.app.debug,
    )

    # Read by the lifespan handler
    app.state.settings = settings

    setup_exception_handlers(app)

    # Middleware order matters - first added = last executed
    _setup_middleware(app, settings)

    _setup_routers(app, settings)

    # Metrics after routes are mounted
    setup_metrics(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    Order from request perspective:
    1. RequestContextMiddleware (request ID, timing)
    2. LoggingMiddleware (logs requests/responses)
    3. GZipMiddleware (compresses responses)
    4. CORSMiddleware (handles CORS)
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID", "X-Process-Time"],
        )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    prefix = settings.api.v1_prefix
    app.add_middleware(
        LoggingMiddleware,
        exclude_paths={f"{prefix}/health", f"{prefix}/ready", f"{prefix}/metrics"},
    )

    app.add_middleware(RequestContextMiddleware)


def _setup_routers(app: FastAPI, settings: Settings) -> None:
    """Mount API routers.

    Args:
        app: FastAPI application instance.
        settings: Application settings.
    """
    app.include_router(v1_router, prefix=settings.api.v1_prefix)
