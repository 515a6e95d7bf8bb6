"""Heuristic relevance scoring of one record against a search plan."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_finder.services.search.constants import (
    AUTHENTIC_DISH_BONUS,
    CUISINE_BASE_BONUS,
    CUISINE_MULTI_KEYWORD_BONUS,
    FULL_QUERY_IN_NAME_SCORE,
    NAME_PREFIX_SCORE,
    REGIONAL_TERM_BONUS,
    TERM_IN_AREA_SCORE,
    TERM_IN_CATEGORY_SCORE,
    TERM_IN_NAME_SCORE,
)
from recipe_finder.services.search.keywords import count_matches


if TYPE_CHECKING:
    from recipe_finder.schemas.recipe import RecipeRecord
    from recipe_finder.services.search.keywords import KeywordCatalog
    from recipe_finder.services.search.planner import SearchPlan


def relevance_score(
    record: RecipeRecord,
    plan: SearchPlan,
    catalog: KeywordCatalog,
) -> float:
    """Unweighted relevance of a record to a plan.

    All tests are case-insensitive substring tests on the record's name,
    area and category. Every component is additive and non-negative.
    """
    name = record.name.lower()
    area = (record.area or "").lower()
    category = (record.category or "").lower()
    score = 0.0

    if plan.normalized_query in name:
        score += FULL_QUERY_IN_NAME_SCORE

    for term in plan.terms:
        if term in name:
            score += TERM_IN_NAME_SCORE
        if term in area:
            score += TERM_IN_AREA_SCORE
        if term in category:
            score += TERM_IN_CATEGORY_SCORE

    if name.startswith(plan.normalized_query) or any(
        name.startswith(term) for term in plan.terms
    ):
        score += NAME_PREFIX_SCORE

    score += cuisine_bonus(name, catalog)
    score += regional_bonus(name, area, catalog)
    return score


def cuisine_bonus(name: str, catalog: KeywordCatalog) -> float:
    """Bonus for cuisine keywords in a lower-cased name.

    Authentic dish names only count when at least one cuisine keyword does.
    """
    matches = count_matches(name, catalog.cuisine)
    if matches == 0:
        return 0.0

    bonus = CUISINE_BASE_BONUS
    if matches > 1:
        bonus += matches * CUISINE_MULTI_KEYWORD_BONUS
    bonus += count_matches(name, catalog.authentic) * AUTHENTIC_DISH_BONUS
    return bonus


def regional_bonus(name: str, area: str, catalog: KeywordCatalog) -> float:
    """Bonus for regional names found in a lower-cased name or area."""
    matches = sum(1 for term in catalog.regional if term in name or term in area)
    return matches * REGIONAL_TERM_BONUS
