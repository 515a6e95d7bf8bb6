"""Suggestion fallback for searches without a direct match."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_finder.services.search.constants import SUGGESTION_LIMIT


if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipe_finder.schemas.recipe import RecipeRecord
    from recipe_finder.services.search.keywords import KeywordCatalog


def suggest(
    records: Sequence[RecipeRecord],
    catalog: KeywordCatalog,
    limit: int = SUGGESTION_LIMIT,
) -> list[RecipeRecord]:
    """Pick up to ``limit`` preferred-cuisine records to suggest.

    Popular dishes come first; within each group records with more cuisine
    keywords in their name come first; remaining ties keep input order.
    """
    ordered = sorted(
        records,
        key=lambda record: (
            not catalog.is_popular(record.name),
            -catalog.cuisine_matches(record.name),
        ),
    )
    return ordered[:limit]
