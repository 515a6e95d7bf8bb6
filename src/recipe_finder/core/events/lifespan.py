"""Application lifespan event handlers.

This module defines the lifespan context manager that handles:
- Application startup: build the response cache, the gateway client and
  the search service, and store them on ``app.state``
- Application shutdown: close the gateway client's HTTP connections
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from recipe_finder.cache.memory import ResponseCache
from recipe_finder.clients.mealdb.client import MealDbClient
from recipe_finder.core.config import Settings, get_settings
from recipe_finder.observability.logging import get_logger, setup_logging
from recipe_finder.services.search.keywords import load_keyword_catalog
from recipe_finder.services.search.service import RecipeSearchService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services during startup.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.
    """
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )

    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    response_cache = _init_cache(settings)
    app.state.response_cache = response_cache

    mealdb_client = MealDbClient(settings.mealdb, cache=response_cache)
    await mealdb_client.initialize()
    app.state.mealdb_client = mealdb_client

    # Keyword allowlists are critical: a bad file must fail startup
    catalog = load_keyword_catalog(settings.search.keywords_file)
    app.state.search_service = RecipeSearchService(
        mealdb_client,
        settings=settings.search,
        catalog=catalog,
    )
    logger.info(
        "RecipeSearchService initialized",
        preferred_area=settings.mealdb.preferred_area,
        suggestion_limit=settings.search.suggestion_limit,
    )

    logger.info("Application startup complete")


def _init_cache(settings: Settings) -> ResponseCache | None:
    """Build the response cache, or None when caching is disabled."""
    if not settings.cache.enabled:
        logger.info("Response cache disabled")
        return None
    logger.info("Response cache enabled", ttl_seconds=settings.cache.ttl_seconds)
    return ResponseCache(ttl_seconds=settings.cache.ttl_seconds)


async def _shutdown(app: FastAPI) -> None:
    """Shutdown all application services.

    Args:
        app: The FastAPI application instance.
    """
    logger.info("Shutting down application")

    app.state.search_service = None

    client: MealDbClient | None = getattr(app.state, "mealdb_client", None)
    if client is not None:
        await client.shutdown()
        app.state.mealdb_client = None

    cache: ResponseCache | None = getattr(app.state, "response_cache", None)
    if cache is not None:
        cache.clear()
        app.state.response_cache = None

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Uses the settings stored on ``app.state`` by the application factory,
    falling back to the cached global settings.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    try:
        yield
    finally:
        await _shutdown(app)
