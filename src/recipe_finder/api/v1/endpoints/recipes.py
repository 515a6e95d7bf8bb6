"""Recipe endpoints.

Provides:
- GET /recipes/random for a random recipe, usually of the preferred cuisine
- GET /recipes/browse for listing recipes by cuisine, category and diet
- GET /recipes/{recipeId} for a recipe's full details
- GET /categories and GET /areas for the gateway's filter values
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from recipe_finder.api.dependencies import get_search_service
from recipe_finder.core.exceptions import NotFoundException
from recipe_finder.schemas.enums import DietType
from recipe_finder.schemas.search import (
    NameListResponse,
    RandomRecipeResponse,
    RecipeDetailResponse,
    RecipeListResponse,
)
from recipe_finder.services.search.service import RecipeSearchService  # noqa: TC001


router = APIRouter(tags=["Recipes"])

SearchService = Annotated[RecipeSearchService, Depends(get_search_service)]


@router.get(
    "/recipes/random",
    response_model=RandomRecipeResponse,
    summary="Get a random recipe",
    responses={503: {"description": "Recipe gateway unavailable"}},
)
async def random_recipe(
    service: SearchService,
    prefer_cuisine: Annotated[
        bool,
        Query(
            alias="preferCuisine",
            description="Usually pick from the preferred cuisine",
        ),
    ] = True,
) -> RandomRecipeResponse:
    """Return one random recipe."""
    recipe, from_preferred = await service.random_recipe(prefer_cuisine=prefer_cuisine)
    return RandomRecipeResponse(recipe=recipe, from_preferred_cuisine=from_preferred)


@router.get(
    "/recipes/browse",
    response_model=RecipeListResponse,
    summary="Browse recipes by filters",
    description=(
        "Lists recipes of a cuisine and/or category, optionally restricted "
        "to a diet. With both filters only recipes in both lists are returned. "
        "Without filters the preferred cuisine is listed."
    ),
)
async def browse_recipes(
    service: SearchService,
    cuisine: Annotated[
        str | None, Query(description="Area/cuisine name, e.g. Indian")
    ] = None,
    category: Annotated[
        str | None, Query(description="Category name, e.g. Vegetarian")
    ] = None,
    diet: Annotated[DietType, Query(description="Diet restriction")] = DietType.ALL,
) -> RecipeListResponse:
    """List recipes matching the filters."""
    recipes = await service.browse(cuisine=cuisine, category=category, diet=diet)
    return RecipeListResponse(recipes=recipes, total_count=len(recipes))


@router.get(
    "/recipes/{recipeId}",
    response_model=RecipeDetailResponse,
    summary="Get recipe details",
    responses={
        404: {"description": "No recipe with this id"},
        503: {"description": "Details unavailable"},
    },
)
async def get_recipe_details(
    service: SearchService,
    recipe_id: Annotated[str, Path(alias="recipeId", min_length=1)],
) -> RecipeDetailResponse:
    """Return a recipe's full record with display-ready lines."""
    recipe = await service.get_recipe_details(recipe_id)
    if recipe is None:
        raise NotFoundException("Recipe", recipe_id)

    return RecipeDetailResponse.from_record(recipe)


@router.get(
    "/categories",
    response_model=NameListResponse,
    summary="List recipe categories",
    responses={503: {"description": "Recipe gateway unavailable"}},
)
async def list_categories(service: SearchService) -> NameListResponse:
    """Return every category name."""
    return NameListResponse(names=await service.list_categories())


@router.get(
    "/areas",
    response_model=NameListResponse,
    summary="List cuisines",
    responses={503: {"description": "Recipe gateway unavailable"}},
)
async def list_areas(service: SearchService) -> NameListResponse:
    """Return every area/cuisine name."""
    return NameListResponse(names=await service.list_areas())
