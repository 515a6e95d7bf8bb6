"""Fan-in: merge the outcomes of a search's gateway calls into a ranking."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from recipe_finder.schemas.recipe import ScoredRecipe
from recipe_finder.services.search.scoring import relevance_score


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from recipe_finder.schemas.recipe import RecipeRecord
    from recipe_finder.services.search.keywords import KeywordCatalog
    from recipe_finder.services.search.planner import PlannedCall, SearchPlan


@dataclass(frozen=True, slots=True)
class CallOutcome:
    """Settled result of one planned call: records on success, a reason on failure."""

    call: PlannedCall
    records: tuple[RecipeRecord, ...] = ()
    error: str | None = None

    @classmethod
    def ok(cls, call: PlannedCall, records: Sequence[RecipeRecord]) -> CallOutcome:
        return cls(call=call, records=tuple(records))

    @classmethod
    def err(cls, call: PlannedCall, reason: str) -> CallOutcome:
        return cls(call=call, error=reason)

    @property
    def succeeded(self) -> bool:
        return self.error is None


def merge_results(
    outcomes: Iterable[CallOutcome],
    plan: SearchPlan,
    catalog: KeywordCatalog,
) -> list[ScoredRecipe]:
    """Merge call outcomes into a deduplicated list sorted by score.

    Outcomes are processed in the order given. The first occurrence of an id
    fixes the record's fields; a later occurrence only raises its score, and
    only when its weighted score is strictly greater. Failed outcomes add
    nothing. Equal scores keep first-insertion order.

    Args:
        outcomes: Settled outcomes in plan order.
        plan: The plan the calls were made for.
        catalog: Keyword allowlists used by scoring.

    Returns:
        Scored records, highest score first.
    """
    merged: dict[str, tuple[RecipeRecord, float]] = {}

    for outcome in outcomes:
        if not outcome.succeeded:
            continue
        weight = outcome.call.weight
        for record in outcome.records:
            score = relevance_score(record, plan, catalog) * weight
            existing = merged.get(record.id)
            if existing is None:
                merged[record.id] = (record, score)
            elif score > existing[1]:
                merged[record.id] = (existing[0], score)

    ranked = sorted(merged.values(), key=lambda item: item[1], reverse=True)
    return [ScoredRecipe.from_record(record, score) for record, score in ranked]
