"""TheMealDB API client.

Thin async HTTP client over the public recipe gateway. Every endpoint takes
at most one string parameter and answers with a ``{"meals": [...] | null}``
envelope; a null or absent list is an empty result, not an error.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any, Final

import httpx
import orjson
from pydantic import ValidationError

from recipe_finder.clients.mealdb.exceptions import GatewayCallFailedError
from recipe_finder.observability.logging import get_logger
from recipe_finder.observability.metrics import gateway_latency, gateway_requests
from recipe_finder.schemas.recipe import MealsEnvelope, RecipeRecord


if TYPE_CHECKING:
    from recipe_finder.cache.memory import ResponseCache
    from recipe_finder.core.config.settings import MealDbSettings

logger = get_logger(__name__)


class Endpoint(StrEnum):
    """Gateway operations, used as cache-key and metric label."""

    FILTER_BY_INGREDIENT = "filter_by_ingredient"
    SEARCH_BY_NAME = "search_by_name"
    FILTER_BY_AREA = "filter_by_area"
    FILTER_BY_CATEGORY = "filter_by_category"
    LOOKUP_BY_ID = "lookup_by_id"
    RANDOM = "random"
    LIST_CATEGORIES = "list_categories"
    LIST_AREAS = "list_areas"


# endpoint -> (path, query parameter name)
ENDPOINT_TEMPLATES: Final[dict[Endpoint, tuple[str, str | None]]] = {
    Endpoint.FILTER_BY_INGREDIENT: ("filter.php", "i"),
    Endpoint.SEARCH_BY_NAME: ("search.php", "s"),
    Endpoint.FILTER_BY_AREA: ("filter.php", "a"),
    Endpoint.FILTER_BY_CATEGORY: ("filter.php", "c"),
    Endpoint.LOOKUP_BY_ID: ("lookup.php", "i"),
    Endpoint.RANDOM: ("random.php", None),
    Endpoint.LIST_CATEGORIES: ("categories.php", None),
    Endpoint.LIST_AREAS: ("list.php", "a"),
}

# Each call must be free to return a different record
UNCACHED_ENDPOINTS: Final[frozenset[Endpoint]] = frozenset({Endpoint.RANDOM})


class MealDbClient:
    """Async client for TheMealDB.

    Responses of every endpoint except ``random`` go through the optional
    response cache, keyed by ``(endpoint, value)``.

    Example:
        ```python
        client = MealDbClient(settings.mealdb, cache=ResponseCache(300))
        await client.initialize()

        records = await client.search_by_name("biryani")

        await client.shutdown()
        ```
    """

    def __init__(
        self,
        settings: MealDbSettings,
        cache: ResponseCache | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Gateway base URL, timeout and preferred area.
            cache: Response cache; None disables caching.
            http_client: HTTP client for API requests.
        """
        self._settings = settings
        self._cache = cache
        self._http = http_client
        self._owns_http_client = http_client is None

    @property
    def base_url(self) -> str:
        """Gateway base URL without trailing slash."""
        return self._settings.base_url.rstrip("/")

    @property
    def preferred_area(self) -> str:
        """Area whose recipes are promoted by the search pipeline."""
        return self._settings.preferred_area

    async def initialize(self) -> None:
        """Initialize the HTTP client if not provided."""
        if self._http is None:
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(self._settings.timeout),
                headers={"Accept": "application/json"},
            )
        logger.info(
            "MealDbClient initialized",
            base_url=self.base_url,
            timeout=self._settings.timeout,
            cache_enabled=self._cache is not None,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_http_client and self._http is not None:
            await self._http.aclose()
            self._http = None
        logger.debug("MealDbClient shutdown")

    # =========================================================================
    # Recipe endpoints
    # =========================================================================

    async def search_by_ingredient(self, ingredient: str) -> list[RecipeRecord]:
        """Recipes using the given main ingredient (summary records)."""
        return await self._fetch_records(Endpoint.FILTER_BY_INGREDIENT, ingredient)

    async def search_by_name(self, name: str) -> list[RecipeRecord]:
        """Recipes whose name matches (full records)."""
        return await self._fetch_records(Endpoint.SEARCH_BY_NAME, name)

    async def filter_by_area(self, area: str) -> list[RecipeRecord]:
        """Recipes of one area/cuisine (summary records)."""
        return await self._fetch_records(Endpoint.FILTER_BY_AREA, area)

    async def filter_by_category(self, category: str) -> list[RecipeRecord]:
        """Recipes of one category (summary records)."""
        return await self._fetch_records(Endpoint.FILTER_BY_CATEGORY, category)

    async def preferred_cuisine(self) -> list[RecipeRecord]:
        """Recipes of the configured preferred area."""
        return await self.filter_by_area(self.preferred_area)

    async def lookup_by_id(self, recipe_id: str) -> RecipeRecord | None:
        """Full record for one id, or None when the gateway has no such recipe."""
        records = await self._fetch_records(Endpoint.LOOKUP_BY_ID, recipe_id)
        return records[0] if records else None

    async def random_recipe(self) -> RecipeRecord | None:
        """One random full record; never served from cache."""
        records = await self._fetch_records(Endpoint.RANDOM)
        return records[0] if records else None

    # =========================================================================
    # Listing endpoints
    # =========================================================================

    async def list_categories(self) -> list[str]:
        """Names of every recipe category."""
        payload = await self.fetch(Endpoint.LIST_CATEGORIES)
        return _collect_names(payload.get("categories"), "strCategory")

    async def list_areas(self) -> list[str]:
        """Names of every area/cuisine."""
        payload = await self.fetch(Endpoint.LIST_AREAS, "list")
        return _collect_names(payload.get("meals"), "strArea")

    # =========================================================================
    # Transport
    # =========================================================================

    async def fetch(
        self, endpoint: Endpoint, value: str | None = None
    ) -> dict[str, Any]:
        """Return the decoded JSON body of one gateway call.

        Args:
            endpoint: Gateway operation.
            value: The operation's single parameter, if it takes one.

        Returns:
            The decoded response object, possibly served from cache.

        Raises:
            GatewayCallFailedError: On transport errors, non-2xx statuses or
                bodies that are not a JSON object.
        """
        cacheable = self._cache is not None and endpoint not in UNCACHED_ENDPOINTS
        cache_key = (endpoint.value, value)

        if cacheable:
            cached = self._cache.get(cache_key)
            if cached is not None:
                gateway_requests.labels(endpoint=endpoint.value, outcome="cached").inc()
                return cached

        payload = await self._request(endpoint, value)

        if cacheable:
            self._cache.put(cache_key, payload)

        return payload

    async def _request(self, endpoint: Endpoint, value: str | None) -> dict[str, Any]:
        if self._http is None:
            msg = "Client not initialized. Call initialize() first."
            raise RuntimeError(msg)

        path, param = ENDPOINT_TEMPLATES[endpoint]
        url = f"{self.base_url}/{path}"
        params = {param: value or ""} if param is not None else None

        logger.debug("Calling recipe gateway", endpoint=endpoint.value, value=value)

        try:
            with gateway_latency.labels(endpoint=endpoint.value).time():
                response = await self._http.get(url, params=params)
        except httpx.HTTPError as e:
            gateway_requests.labels(endpoint=endpoint.value, outcome="error").inc()
            raise GatewayCallFailedError(
                endpoint.value, value, f"{type(e).__name__}: {e}"
            ) from e

        if not response.is_success:
            gateway_requests.labels(endpoint=endpoint.value, outcome="error").inc()
            raise GatewayCallFailedError(
                endpoint.value,
                value,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            gateway_requests.labels(endpoint=endpoint.value, outcome="error").inc()
            raise GatewayCallFailedError(
                endpoint.value, value, "response body is not valid JSON"
            ) from e

        if not isinstance(payload, dict):
            gateway_requests.labels(endpoint=endpoint.value, outcome="error").inc()
            raise GatewayCallFailedError(
                endpoint.value, value, "response body is not a JSON object"
            )

        gateway_requests.labels(endpoint=endpoint.value, outcome="success").inc()
        return payload

    async def _fetch_records(
        self, endpoint: Endpoint, value: str | None = None
    ) -> list[RecipeRecord]:
        payload = await self.fetch(endpoint, value)

        try:
            envelope = MealsEnvelope.model_validate(payload)
        except ValidationError as e:
            raise GatewayCallFailedError(
                endpoint.value, value, "unexpected meals envelope"
            ) from e

        records: list[RecipeRecord] = []
        for meal in envelope.items:
            try:
                records.append(RecipeRecord.from_meal(meal))
            except ValidationError:
                logger.debug(
                    "Skipping malformed meal",
                    endpoint=endpoint.value,
                    meal_id=meal.get("idMeal"),
                )
        return records


def _collect_names(items: Any, field: str) -> list[str]:
    """Pull a non-blank string field out of each listing entry."""
    if not isinstance(items, list):
        return []
    names: list[str] = []
    for item in items:
        if isinstance(item, dict):
            name = item.get(field)
            if isinstance(name, str) and name.strip():
                names.append(name.strip())
    return names
