"""Cuisine prioritization: stable three-band reordering of a ranking."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from recipe_finder.schemas.recipe import RecipeRecord


if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from recipe_finder.services.search.keywords import KeywordCatalog


RecordT = TypeVar("RecordT", bound=RecipeRecord)


def prioritize(
    records: Sequence[RecordT],
    preferred_ids: Collection[str],
    catalog: KeywordCatalog,
) -> list[RecordT]:
    """Reorder records into preferred-cuisine, keyword and remaining bands.

    Band A holds records whose id is in ``preferred_ids``; band B the rest
    whose name carries a cuisine keyword; band C everything else. Relative
    order inside each band is preserved; nothing is added or dropped.
    """
    preferred: list[RecordT] = []
    keyword: list[RecordT] = []
    rest: list[RecordT] = []

    for record in records:
        if record.id in preferred_ids:
            preferred.append(record)
        elif catalog.has_cuisine_keyword(record.name):
            keyword.append(record)
        else:
            rest.append(record)

    return preferred + keyword + rest
