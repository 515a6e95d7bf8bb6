"""Factory configuration and exports.

This module exports all factories for convenient importing in tests.
"""

from tests.factories.recipe import (
    IngredientFactory,
    RecipeRecordFactory,
    ScoredRecipeFactory,
)
from tests.factories.settings import TEST_BASE_URL, TEST_PREFIX, build_settings


__all__ = [
    "TEST_BASE_URL",
    "TEST_PREFIX",
    "IngredientFactory",
    "RecipeRecordFactory",
    "ScoredRecipeFactory",
    "build_settings",
]
