"""Pydantic schemas for gateway payloads and API responses."""

# Base classes
from recipe_finder.schemas.base import APIResponse, GatewayPayload

# Enums
from recipe_finder.schemas.enums import (
    DietType,
    HealthStatus,
    ReadinessStatus,
    SearchStatus,
)

# Health schemas
from recipe_finder.schemas.health import (
    HealthResponse,
    ReadinessResponse,
    RootResponse,
)

# Recipe schemas
from recipe_finder.schemas.recipe import (
    Ingredient,
    MealsEnvelope,
    RecipeRecord,
    ScoredRecipe,
    extract_ingredients,
)

# Search schemas
from recipe_finder.schemas.search import (
    SEARCH_HINTS,
    NameListResponse,
    RandomRecipeResponse,
    RecipeDetailResponse,
    RecipeListResponse,
    SearchResponse,
)


__all__ = [
    "SEARCH_HINTS",
    "APIResponse",
    "DietType",
    "GatewayPayload",
    "HealthResponse",
    "HealthStatus",
    "Ingredient",
    "MealsEnvelope",
    "NameListResponse",
    "RandomRecipeResponse",
    "ReadinessResponse",
    "ReadinessStatus",
    "RecipeDetailResponse",
    "RecipeListResponse",
    "RecipeRecord",
    "RootResponse",
    "ScoredRecipe",
    "SearchResponse",
    "SearchStatus",
    "extract_ingredients",
]
