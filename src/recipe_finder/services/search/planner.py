"""Query planning.

Turns a raw search string into a ``SearchPlan`` and the ordered list of
gateway calls a search dispatches. Planning is pure: no I/O, no randomness.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from recipe_finder.services.search.constants import (
    FULL_QUERY_WEIGHT,
    MIN_TERM_LENGTH,
    ORIGINAL_QUERY_WEIGHT,
    TERM_WEIGHT,
)
from recipe_finder.services.search.exceptions import InvalidQueryError


class CallKind(StrEnum):
    """Which gateway search a planned call uses."""

    INGREDIENT = "ingredient"
    NAME = "name"


class CallTier(StrEnum):
    """Origin of a planned call's search value."""

    FULL_QUERY = "full_query"
    ORIGINAL_QUERY = "original_query"
    TERM = "term"

    @property
    def weight(self) -> float:
        """Multiplier applied to relevance scores of this tier's results."""
        return TIER_WEIGHTS[self]


TIER_WEIGHTS: Final[dict[CallTier, float]] = {
    CallTier.FULL_QUERY: FULL_QUERY_WEIGHT,
    CallTier.ORIGINAL_QUERY: ORIGINAL_QUERY_WEIGHT,
    CallTier.TERM: TERM_WEIGHT,
}


@dataclass(frozen=True, slots=True)
class SearchPlan:
    """Normalized form of one search string.

    Attributes:
        original_query: Trimmed input with its case preserved.
        normalized_query: Trimmed, lower-cased input.
        terms: Lower-cased whitespace-separated tokens, empties removed.
    """

    original_query: str
    normalized_query: str
    terms: tuple[str, ...]

    @property
    def is_multiword(self) -> bool:
        return len(self.terms) > 1


@dataclass(frozen=True, slots=True)
class PlannedCall:
    """One gateway search to dispatch for a plan."""

    kind: CallKind
    tier: CallTier
    value: str

    @property
    def weight(self) -> float:
        return self.tier.weight


def plan_query(raw_query: str | None) -> SearchPlan:
    """Normalize and tokenize a raw search string.

    Raises:
        InvalidQueryError: If the query is None or blank after trimming.
    """
    original = (raw_query or "").strip()
    if not original:
        raise InvalidQueryError(raw_query)

    normalized = original.lower()
    return SearchPlan(
        original_query=original,
        normalized_query=normalized,
        terms=tuple(normalized.split()),
    )


def plan_calls(plan: SearchPlan) -> list[PlannedCall]:
    """List the gateway calls for a plan, in merge order.

    Ingredient and name searches on the normalized query come first, then
    the same pair on the original query when it differs, then a pair for
    every term longer than two characters when the query has several terms.
    """
    calls = _call_pair(CallTier.FULL_QUERY, plan.normalized_query)

    if plan.original_query != plan.normalized_query:
        calls.extend(_call_pair(CallTier.ORIGINAL_QUERY, plan.original_query))

    if plan.is_multiword:
        for term in plan.terms:
            if len(term) > MIN_TERM_LENGTH:
                calls.extend(_call_pair(CallTier.TERM, term))

    return calls


def _call_pair(tier: CallTier, value: str) -> list[PlannedCall]:
    return [
        PlannedCall(kind=CallKind.INGREDIENT, tier=tier, value=value),
        PlannedCall(kind=CallKind.NAME, tier=tier, value=value),
    ]
