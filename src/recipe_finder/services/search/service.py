"""Recipe search service.

Orchestrates the search pipeline: plans the gateway calls for a query,
dispatches them concurrently, merges and ranks the settled results, then
either reorders them by cuisine band or falls back to suggestions. Also
hosts the lookup, random, browse and listing operations built on the same
gateway.
"""

from __future__ import annotations

import asyncio
import random
from typing import TYPE_CHECKING

from recipe_finder.clients.mealdb.exceptions import GatewayCallFailedError
from recipe_finder.observability.logging import get_logger
from recipe_finder.observability.metrics import search_outcomes
from recipe_finder.schemas.enums import DietType, SearchStatus
from recipe_finder.schemas.search import SEARCH_HINTS, SearchResponse
from recipe_finder.services.search.constants import (
    RANDOM_PREFERRED_PROBABILITY,
    SUGGESTION_LIMIT,
)
from recipe_finder.services.search.exceptions import (
    DetailsFetchFailedError,
    RandomRecipeUnavailableError,
)
from recipe_finder.services.search.filters import filter_by_diet, intersect_by_id
from recipe_finder.services.search.keywords import load_keyword_catalog
from recipe_finder.services.search.planner import (
    CallKind,
    plan_calls,
    plan_query,
)
from recipe_finder.services.search.prioritizer import prioritize
from recipe_finder.services.search.ranker import CallOutcome, merge_results
from recipe_finder.services.search.suggestions import suggest


if TYPE_CHECKING:
    from collections.abc import Awaitable

    from recipe_finder.clients.mealdb.client import MealDbClient
    from recipe_finder.core.config.settings import SearchSettings
    from recipe_finder.schemas.recipe import RecipeRecord
    from recipe_finder.services.search.keywords import KeywordCatalog
    from recipe_finder.services.search.planner import PlannedCall

logger = get_logger(__name__)


class RecipeSearchService:
    """Search, suggest, browse and look up recipes.

    Example:
        ```python
        service = RecipeSearchService(client, settings=settings.search)
        result = await service.search("chicken curry")
        if result.status == SearchStatus.RESULTS:
            ...
        ```

    The service keeps no per-search state, so overlapping searches each
    merge and rank only their own calls.
    """

    def __init__(
        self,
        client: MealDbClient,
        settings: SearchSettings | None = None,
        catalog: KeywordCatalog | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            client: Recipe gateway client.
            settings: Suggestion limit, keyword file and random-pick odds.
            catalog: Keyword allowlists; loaded from ``settings`` when None.
            rng: Random source for the random-recipe operation.
        """
        self._client = client
        self._suggestion_limit = (
            settings.suggestion_limit if settings else SUGGESTION_LIMIT
        )
        self._preferred_probability = (
            settings.random_preferred_probability
            if settings
            else RANDOM_PREFERRED_PROBABILITY
        )
        self._catalog = catalog or load_keyword_catalog(
            settings.keywords_file if settings else None
        )
        self._rng = rng or random.Random()

    @property
    def catalog(self) -> KeywordCatalog:
        return self._catalog

    # =========================================================================
    # Search
    # =========================================================================

    async def search(
        self,
        query: str | None,
        diet: DietType | str | None = None,
    ) -> SearchResponse:
        """Run a free-text search.

        Args:
            query: Raw search string.
            diet: Optional diet restriction applied to the merged results.

        Returns:
            A response whose status is RESULTS, SUGGESTIONS, EMPTY or ERROR.
            Gateway failures never raise; they end in ERROR when every call
            failed.

        Raises:
            InvalidQueryError: If the query is blank. No call is made.
            ValueError: If ``diet`` is not a known diet. No call is made.
        """
        plan = plan_query(query)
        diet = DietType(diet) if diet else DietType.ALL
        calls = plan_calls(plan)

        logger.info(
            "Searching recipes",
            query=plan.original_query,
            terms=list(plan.terms),
            calls=len(calls),
            diet=str(diet),
        )

        try:
            outcomes = await self._dispatch(calls)

            if not any(outcome.succeeded for outcome in outcomes):
                logger.error(
                    "Every gateway call failed",
                    query=plan.original_query,
                    calls=len(calls),
                )
                return self._finish(
                    SearchResponse(
                        status=SearchStatus.ERROR,
                        query=plan.original_query,
                        is_multiword=plan.is_multiword,
                    )
                )

            ranked = merge_results(outcomes, plan, self._catalog)
            ranked = filter_by_diet(ranked, diet, self._catalog)

            if ranked:
                preferred_ids = await self._preferred_ids()
                ranked = prioritize(ranked, preferred_ids, self._catalog)
                return self._finish(
                    SearchResponse(
                        status=SearchStatus.RESULTS,
                        query=plan.original_query,
                        recipes=ranked,
                        total_count=len(ranked),
                        special_cuisine_count=self._count_cuisine(ranked),
                        is_multiword=plan.is_multiword,
                    )
                )

            suggestions = await self.get_suggestions()
            if suggestions:
                return self._finish(
                    SearchResponse(
                        status=SearchStatus.SUGGESTIONS,
                        query=plan.original_query,
                        suggestions=suggestions,
                        total_count=len(suggestions),
                        special_cuisine_count=self._count_cuisine(suggestions),
                        is_multiword=plan.is_multiword,
                    )
                )

            return self._finish(
                SearchResponse(
                    status=SearchStatus.EMPTY,
                    query=plan.original_query,
                    is_multiword=plan.is_multiword,
                    hints=list(SEARCH_HINTS),
                )
            )

        except Exception:
            logger.exception("Search failed", query=plan.original_query)
            return self._finish(
                SearchResponse(
                    status=SearchStatus.ERROR,
                    query=plan.original_query,
                    is_multiword=plan.is_multiword,
                )
            )

    async def get_suggestions(self) -> list[RecipeRecord]:
        """Suggest preferred-cuisine dishes, popular ones first.

        Returns an empty list when the preferred-cuisine set is unavailable.
        """
        try:
            records = await self._client.preferred_cuisine()
        except GatewayCallFailedError as e:
            logger.warning(
                "Preferred cuisine unavailable for suggestions",
                area=self._client.preferred_area,
                error=str(e),
            )
            return []
        return suggest(records, self._catalog, self._suggestion_limit)

    async def _dispatch(self, calls: list[PlannedCall]) -> list[CallOutcome]:
        """Issue every planned call at once and wait for all to settle."""
        return list(await asyncio.gather(*[self._settle(call) for call in calls]))

    async def _settle(self, call: PlannedCall) -> CallOutcome:
        if call.kind == CallKind.INGREDIENT:
            request = self._client.search_by_ingredient(call.value)
        else:
            request = self._client.search_by_name(call.value)

        try:
            records = await request
        except GatewayCallFailedError as e:
            logger.warning(
                "Gateway call failed",
                kind=call.kind.value,
                tier=call.tier.value,
                value=call.value,
                error=str(e),
            )
            return CallOutcome.err(call, str(e))

        return CallOutcome.ok(call, records)

    async def _preferred_ids(self) -> set[str]:
        try:
            records = await self._client.preferred_cuisine()
        except GatewayCallFailedError as e:
            logger.warning(
                "Preferred cuisine unavailable for prioritization",
                area=self._client.preferred_area,
                error=str(e),
            )
            return set()
        return {record.id for record in records}

    def _count_cuisine(self, records: list[RecipeRecord]) -> int:
        return sum(
            1 for record in records if self._catalog.has_cuisine_keyword(record.name)
        )

    @staticmethod
    def _finish(response: SearchResponse) -> SearchResponse:
        search_outcomes.labels(status=str(response.status)).inc()
        logger.info(
            "Search completed",
            query=response.query,
            status=str(response.status),
            total=response.total_count,
        )
        return response

    # =========================================================================
    # Details and random
    # =========================================================================

    async def get_recipe_details(self, recipe_id: str) -> RecipeRecord | None:
        """Fetch one recipe's full record.

        Returns:
            The record, or None when the gateway has no recipe with this id.

        Raises:
            DetailsFetchFailedError: If the lookup call fails.
        """
        try:
            return await self._client.lookup_by_id(recipe_id)
        except GatewayCallFailedError as e:
            logger.warning(
                "Recipe details unavailable",
                recipe_id=recipe_id,
                error=str(e),
            )
            raise DetailsFetchFailedError(recipe_id, e.reason) from e

    async def random_recipe(
        self, prefer_cuisine: bool = True
    ) -> tuple[RecipeRecord, bool]:
        """Pick a random recipe, usually from the preferred cuisine.

        With ``prefer_cuisine`` set, a preferred-cuisine dish is chosen with
        the configured probability; otherwise, or when that set is empty or
        unavailable, the gateway's random endpoint is used.

        Returns:
            The recipe and whether it came from the preferred cuisine.

        Raises:
            RandomRecipeUnavailableError: If the random endpoint fails or
                returns nothing.
        """
        if prefer_cuisine and self._rng.random() < self._preferred_probability:
            picked = await self._random_preferred()
            if picked is not None:
                return picked, True

        try:
            record = await self._client.random_recipe()
        except GatewayCallFailedError as e:
            logger.warning("Random recipe unavailable", error=str(e))
            msg = "Could not fetch a random recipe"
            raise RandomRecipeUnavailableError(msg) from e

        if record is None:
            msg = "Gateway returned no random recipe"
            raise RandomRecipeUnavailableError(msg)
        return record, False

    async def _random_preferred(self) -> RecipeRecord | None:
        try:
            records = await self._client.preferred_cuisine()
        except GatewayCallFailedError as e:
            logger.warning(
                "Preferred cuisine unavailable for random pick",
                error=str(e),
            )
            return None
        if not records:
            return None

        summary = self._rng.choice(records)
        # Area listings carry only id, name and thumbnail
        try:
            full = await self._client.lookup_by_id(summary.id)
        except GatewayCallFailedError as e:
            logger.debug(
                "Using summary record for random pick",
                recipe_id=summary.id,
                error=str(e),
            )
            return summary
        return full or summary

    # =========================================================================
    # Browse and listings
    # =========================================================================

    async def browse(
        self,
        cuisine: str | None = None,
        category: str | None = None,
        diet: DietType | str | None = None,
    ) -> list[RecipeRecord]:
        """List recipes by cuisine and/or category, then apply a diet filter.

        With both filters the category results are intersected with the
        cuisine results, keeping cuisine order. With neither, the preferred
        cuisine is listed. A filter call that fails contributes nothing.

        Raises:
            ValueError: If ``diet`` is not a known diet. No call is made.
        """
        diet = DietType(diet) if diet else DietType.ALL
        cuisine = (cuisine or "").strip() or None
        category = (category or "").strip() or None

        if cuisine is None and category is None:
            preferred = await self._safe(
                self._client.preferred_cuisine(),
                "filter_by_area",
                self._client.preferred_area,
            )
            return filter_by_diet(preferred, diet, self._catalog)

        pending: list[Awaitable[list[RecipeRecord]]] = []
        if cuisine is not None:
            pending.append(
                self._safe(
                    self._client.filter_by_area(cuisine), "filter_by_area", cuisine
                )
            )
        if category is not None:
            pending.append(
                self._safe(
                    self._client.filter_by_category(category),
                    "filter_by_category",
                    category,
                )
            )
        results = await asyncio.gather(*pending)

        if cuisine is not None and category is not None:
            records = intersect_by_id(results[0], results[1])
        else:
            records = results[0]

        logger.debug(
            "Browse completed",
            cuisine=cuisine,
            category=category,
            count=len(records),
        )
        return filter_by_diet(records, diet, self._catalog)

    async def list_categories(self) -> list[str]:
        """All category names.

        Raises:
            GatewayCallFailedError: If the listing call fails.
        """
        return await self._client.list_categories()

    async def list_areas(self) -> list[str]:
        """All area/cuisine names.

        Raises:
            GatewayCallFailedError: If the listing call fails.
        """
        return await self._client.list_areas()

    @staticmethod
    async def _safe(
        request: Awaitable[list[RecipeRecord]], endpoint: str, value: str
    ) -> list[RecipeRecord]:
        try:
            return await request
        except GatewayCallFailedError as e:
            logger.warning(
                "Filter call failed",
                endpoint=endpoint,
                value=value,
                error=str(e),
            )
            return []
