"""Recipe record schemas.

This module contains the normalized recipe record built from the gateway's
flat meal payloads, and its scored variant used by the search pipeline.
"""

from __future__ import annotations

from typing import Any, Final

from pydantic import Field

from recipe_finder.schemas.base import APIResponse, GatewayPayload


# The gateway exposes ingredients as strIngredient1..20 / strMeasure1..20
MAX_INGREDIENT_SLOTS: Final[int] = 20


def _clean(value: Any) -> str | None:
    """Strip a raw gateway string field, mapping blank or non-string values to None."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


class MealsEnvelope(GatewayPayload):
    """Gateway response envelope; ``meals`` is null when nothing matched."""

    meals: list[dict[str, Any]] | None = None

    @property
    def items(self) -> list[dict[str, Any]]:
        """Meal payloads, treating a null/absent list as empty."""
        return self.meals or []


class Ingredient(APIResponse):
    """One ingredient line of a recipe."""

    name: str = Field(min_length=1, description="Ingredient name")
    measure: str | None = Field(default=None, description="Free-text quantity")

    @property
    def line(self) -> str:
        """Display line, e.g. ``"2 tbsp Ghee"``."""
        return f"{self.measure} {self.name}" if self.measure else self.name


class RecipeRecord(APIResponse):
    """One dish as returned by the recipe gateway.

    Filter endpoints return only id, name and thumbnail; search and lookup
    endpoints fill in the rest.
    """

    id: str = Field(min_length=1, description="Gateway identifier (idMeal)")
    name: str = Field(min_length=1, description="Display name")
    thumbnail_url: str | None = None
    category: str | None = None
    area: str | None = None
    instructions: str | None = None
    ingredients: list[Ingredient] = Field(default_factory=list, max_length=20)
    video_url: str | None = None
    source_url: str | None = None

    @classmethod
    def from_meal(cls, meal: dict[str, Any]) -> RecipeRecord:
        """Build a record from a flat gateway meal payload.

        Raises:
            pydantic.ValidationError: If the id or name is missing.
        """
        return cls(
            id=_clean(meal.get("idMeal")) or "",
            name=_clean(meal.get("strMeal")) or "",
            thumbnail_url=_clean(meal.get("strMealThumb")),
            category=_clean(meal.get("strCategory")),
            area=_clean(meal.get("strArea")),
            instructions=meal["strInstructions"]
            if _clean(meal.get("strInstructions"))
            else None,
            ingredients=extract_ingredients(meal),
            video_url=_clean(meal.get("strYoutube")),
            source_url=_clean(meal.get("strSource")),
        )

    @property
    def ingredient_lines(self) -> list[str]:
        """Ingredients formatted as ``"<measure> <ingredient>"``."""
        return [ingredient.line for ingredient in self.ingredients]

    @property
    def instruction_steps(self) -> list[str]:
        """Instructions split on line breaks, blank lines dropped."""
        if not self.instructions:
            return []
        return [
            step.strip() for step in self.instructions.splitlines() if step.strip()
        ]


class ScoredRecipe(RecipeRecord):
    """A recipe record annotated with its relevance to one search."""

    relevance_score: float = Field(default=0.0, ge=0.0)

    @classmethod
    def from_record(cls, record: RecipeRecord, score: float) -> ScoredRecipe:
        """Attach a relevance score to a record."""
        data = record.model_dump(by_alias=False, exclude={"relevance_score"})
        return cls(**data, relevance_score=score)


def extract_ingredients(meal: dict[str, Any]) -> list[Ingredient]:
    """Collect ingredient/measure pairs from the numbered slots.

    Scanning stops at the first empty ingredient slot; later slots are
    ignored even when populated.
    """
    ingredients: list[Ingredient] = []
    for index in range(1, MAX_INGREDIENT_SLOTS + 1):
        name = _clean(meal.get(f"strIngredient{index}"))
        if name is None:
            break
        ingredients.append(
            Ingredient(name=name, measure=_clean(meal.get(f"strMeasure{index}")))
        )
    return ingredients
