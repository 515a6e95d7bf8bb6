"""FastAPI dependencies for service access.

Services are built during application startup and stored in ``app.state``;
these dependencies hand them to route handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status

from recipe_finder.core.config import Settings, get_settings


if TYPE_CHECKING:
    from recipe_finder.cache.memory import ResponseCache
    from recipe_finder.services.search.service import RecipeSearchService


async def get_search_service(request: Request) -> RecipeSearchService:
    """Get the recipe search service from app state.

    Raises:
        HTTPException: 503 if the service is not initialized.
    """
    service: RecipeSearchService | None = getattr(
        request.app.state, "search_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe search service not available",
        )
    return service


async def get_response_cache(request: Request) -> ResponseCache | None:
    """Get the response cache from app state; None when caching is disabled."""
    return getattr(request.app.state, "response_cache", None)


async def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()
