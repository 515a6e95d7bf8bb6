"""Search endpoints.

Provides:
- GET /search for ranked free-text recipe search
- GET /suggestions for the preferred-cuisine suggestion list
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from recipe_finder.api.dependencies import get_search_service
from recipe_finder.schemas.enums import DietType
from recipe_finder.schemas.search import RecipeListResponse, SearchResponse
from recipe_finder.services.search.service import RecipeSearchService  # noqa: TC001


router = APIRouter(tags=["Search"])


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search recipes",
    description=(
        "Searches the recipe gateway by ingredient and by name, for the whole "
        "query and for each word of a multi-word query, and returns the merged "
        "results ranked by relevance with the preferred cuisine first. When "
        "nothing matches, preferred-cuisine suggestions are returned instead. "
        "Gateway failures are reported in the body's status, not as HTTP errors."
    ),
    responses={
        400: {
            "description": "Blank query",
            "content": {
                "application/json": {
                    "example": {
                        "error": "INVALID_QUERY",
                        "message": "Search query must not be blank",
                    }
                }
            },
        },
    },
)
async def search_recipes(
    service: Annotated[RecipeSearchService, Depends(get_search_service)],
    q: Annotated[
        str,
        Query(description="Free-text query: a dish, an ingredient or both"),
    ] = "",
    diet: Annotated[
        DietType,
        Query(description="Restrict results to a diet type"),
    ] = DietType.ALL,
) -> SearchResponse:
    """Run a ranked recipe search.

    A blank query raises ``InvalidQueryError``, rendered as 400.
    """
    return await service.search(q, diet=diet)


@router.get(
    "/suggestions",
    response_model=RecipeListResponse,
    summary="Suggested recipes",
    description=(
        "Preferred-cuisine recipes, popular dishes first. Empty when the "
        "preferred cuisine cannot be fetched."
    ),
)
async def get_suggestions(
    service: Annotated[RecipeSearchService, Depends(get_search_service)],
) -> RecipeListResponse:
    """Return the suggestion list."""
    recipes = await service.get_suggestions()
    return RecipeListResponse(recipes=recipes, total_count=len(recipes))
