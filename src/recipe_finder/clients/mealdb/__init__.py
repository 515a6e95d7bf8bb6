"""TheMealDB recipe gateway client package."""

from recipe_finder.clients.mealdb.client import (
    ENDPOINT_TEMPLATES,
    Endpoint,
    MealDbClient,
)
from recipe_finder.clients.mealdb.exceptions import (
    GatewayCallFailedError,
    GatewayError,
)


__all__ = [
    "ENDPOINT_TEMPLATES",
    "Endpoint",
    "GatewayCallFailedError",
    "GatewayError",
    "MealDbClient",
]
