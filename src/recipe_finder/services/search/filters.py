"""Diet and cross-filter helpers for result lists."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from recipe_finder.schemas.enums import DietType
from recipe_finder.schemas.recipe import RecipeRecord
from recipe_finder.services.search.keywords import contains_any


if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipe_finder.services.search.keywords import KeywordCatalog


RecordT = TypeVar("RecordT", bound=RecipeRecord)


def is_vegetarian(record: RecipeRecord, catalog: KeywordCatalog) -> bool:
    """True unless the name or instructions mention a meat keyword."""
    text = f"{record.name} {record.instructions or ''}".lower()
    return not contains_any(text, catalog.meat)


def filter_by_diet(
    records: Sequence[RecordT],
    diet: DietType | str | None,
    catalog: KeywordCatalog,
) -> list[RecordT]:
    """Keep the records matching a diet; ``all`` or None keeps everything."""
    diet = DietType(diet) if diet else DietType.ALL
    if diet == DietType.ALL:
        return list(records)
    want_vegetarian = diet == DietType.VEGETARIAN
    return [
        record
        for record in records
        if is_vegetarian(record, catalog) == want_vegetarian
    ]


def intersect_by_id(
    primary: Sequence[RecordT],
    secondary: Sequence[RecipeRecord],
) -> list[RecordT]:
    """Records of ``primary`` whose id also appears in ``secondary``.

    Order follows ``primary``.
    """
    wanted = {record.id for record in secondary}
    return [record for record in primary if record.id in wanted]
