"""Search and browse response schemas."""

from __future__ import annotations

from typing import Final

from pydantic import Field

from recipe_finder.schemas.base import APIResponse
from recipe_finder.schemas.enums import SearchStatus
from recipe_finder.schemas.recipe import RecipeRecord, ScoredRecipe


SEARCH_HINTS: Final[tuple[str, ...]] = (
    "Common ingredients: chicken, beef, rice, potato, onion, tomato",
    "Indian ingredients: paneer, dal, masala, curry, biryani",
    "Cooking methods: fried, grilled, baked, stewed",
    "Meal types: breakfast, lunch, dinner, dessert",
)


class SearchResponse(APIResponse):
    """Result of one free-text search.

    ``recipes`` holds the ranked matches when the status is RESULTS;
    ``suggestions`` holds unscored preferred-cuisine dishes when it is
    SUGGESTIONS. Both are empty for EMPTY and ERROR.
    """

    status: SearchStatus
    query: str = Field(description="The query as entered, trimmed")
    recipes: list[ScoredRecipe] = Field(default_factory=list)
    suggestions: list[RecipeRecord] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)
    special_cuisine_count: int = Field(
        default=0,
        ge=0,
        description="Recipes whose name carries a cuisine keyword",
    )
    is_multiword: bool = False
    hints: list[str] = Field(default_factory=list)

    @property
    def has_results(self) -> bool:
        """True when the recipes are direct matches for the query."""
        return self.status == SearchStatus.RESULTS and bool(self.recipes)


class RecipeListResponse(APIResponse):
    """A plain list of recipes (suggestions, browse results)."""

    recipes: list[RecipeRecord] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0)


class RandomRecipeResponse(APIResponse):
    """A single randomly chosen recipe."""

    recipe: RecipeRecord
    from_preferred_cuisine: bool = False


class RecipeDetailResponse(APIResponse):
    """Full recipe details with display-ready ingredient and step lists."""

    recipe: RecipeRecord
    ingredient_lines: list[str] = Field(default_factory=list)
    instruction_steps: list[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: RecipeRecord) -> RecipeDetailResponse:
        """Build the detail view of a record."""
        return cls(
            recipe=record,
            ingredient_lines=record.ingredient_lines,
            instruction_steps=record.instruction_steps,
        )


class NameListResponse(APIResponse):
    """Category or area names known to the gateway."""

    names: list[str] = Field(default_factory=list)
