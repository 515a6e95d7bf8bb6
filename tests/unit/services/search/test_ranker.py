"""Unit tests for merging and ranking call outcomes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipe_finder.schemas.recipe import ScoredRecipe
from recipe_finder.services.search.planner import (
    CallKind,
    CallTier,
    PlannedCall,
    plan_query,
)
from recipe_finder.services.search.ranker import CallOutcome, merge_results
from tests.factories.recipe import RecipeRecordFactory


if TYPE_CHECKING:
    from recipe_finder.services.search.keywords import KeywordCatalog


pytestmark = pytest.mark.unit


def _call(tier: CallTier, value: str = "toast") -> PlannedCall:
    return PlannedCall(kind=CallKind.NAME, tier=tier, value=value)


class TestCallOutcome:
    """Tests for CallOutcome."""

    def test_ok(self) -> None:
        """Should hold the records of a successful call."""
        record = RecipeRecordFactory.build()
        outcome = CallOutcome.ok(_call(CallTier.TERM), [record])

        assert outcome.succeeded is True
        assert outcome.records == (record,)

    def test_err(self) -> None:
        """Should hold the reason of a failed call and no records."""
        outcome = CallOutcome.err(_call(CallTier.TERM), "HTTP 500")

        assert outcome.succeeded is False
        assert outcome.records == ()
        assert outcome.error == "HTTP 500"


class TestMergeResults:
    """Tests for merge_results."""

    def test_applies_call_weight(self, keyword_catalog: KeywordCatalog) -> None:
        """Should multiply the relevance score by the call's tier weight."""
        plan = plan_query("toast")
        record = RecipeRecordFactory.named("Plain Toast")

        ranked = merge_results(
            [CallOutcome.ok(_call(CallTier.FULL_QUERY), [record])],
            plan,
            keyword_catalog,
        )

        assert len(ranked) == 1
        assert isinstance(ranked[0], ScoredRecipe)
        assert ranked[0].relevance_score == 15.0 * 3.0

    def test_keeps_maximum_score(self, keyword_catalog: KeywordCatalog) -> None:
        """Should keep the highest weighted score across duplicate ids."""
        plan = plan_query("toast")
        record = RecipeRecordFactory.named("Plain Toast")

        ranked = merge_results(
            [
                CallOutcome.ok(_call(CallTier.TERM), [record]),
                CallOutcome.ok(_call(CallTier.FULL_QUERY), [record]),
                CallOutcome.ok(_call(CallTier.ORIGINAL_QUERY), [record]),
            ],
            plan,
            keyword_catalog,
        )

        assert len(ranked) == 1
        assert ranked[0].relevance_score == 45.0

    def test_first_occurrence_fixes_fields(
        self, keyword_catalog: KeywordCatalog
    ) -> None:
        """Should keep the first record's fields when a later copy scores higher."""
        plan = plan_query("toast")
        summary = RecipeRecordFactory.named("Plain Toast", id="52999")
        full = RecipeRecordFactory.named(
            "Plain Toast", id="52999", category="Breakfast", area="British"
        )

        ranked = merge_results(
            [
                CallOutcome.ok(_call(CallTier.TERM), [summary]),
                CallOutcome.ok(_call(CallTier.FULL_QUERY), [full]),
            ],
            plan,
            keyword_catalog,
        )

        assert ranked[0].category is None
        assert ranked[0].relevance_score == 45.0

    def test_ignores_failed_outcomes(self, keyword_catalog: KeywordCatalog) -> None:
        """Should contribute nothing for failed calls."""
        plan = plan_query("toast")
        record = RecipeRecordFactory.named("Plain Toast")

        ranked = merge_results(
            [
                CallOutcome.err(_call(CallTier.FULL_QUERY), "timeout"),
                CallOutcome.ok(_call(CallTier.TERM), [record]),
            ],
            plan,
            keyword_catalog,
        )

        assert [r.id for r in ranked] == [record.id]
        assert ranked[0].relevance_score == 15.0

    def test_sorts_by_score_descending(self, keyword_catalog: KeywordCatalog) -> None:
        """Should order records from highest to lowest score."""
        plan = plan_query("chicken curry")
        soup = RecipeRecordFactory.named("Chicken Soup")
        curry = RecipeRecordFactory.named("Chicken Curry")

        ranked = merge_results(
            [CallOutcome.ok(_call(CallTier.TERM, "chicken"), [soup, curry])],
            plan,
            keyword_catalog,
        )

        assert [r.name for r in ranked] == ["Chicken Curry", "Chicken Soup"]
        assert ranked[0].relevance_score > ranked[1].relevance_score

    def test_ties_keep_insertion_order(self, keyword_catalog: KeywordCatalog) -> None:
        """Should keep first-seen order between equal scores."""
        plan = plan_query("lemon")
        first = RecipeRecordFactory.named("Plain Toast")
        second = RecipeRecordFactory.named("Plain Rice")

        ranked = merge_results(
            [
                CallOutcome.ok(_call(CallTier.TERM), [first]),
                CallOutcome.ok(_call(CallTier.FULL_QUERY), [second]),
            ],
            plan,
            keyword_catalog,
        )

        assert [r.id for r in ranked] == [first.id, second.id]
        assert all(r.relevance_score == 0.0 for r in ranked)

    def test_no_outcomes(self, keyword_catalog: KeywordCatalog) -> None:
        """Should return an empty list when nothing was found."""
        assert merge_results([], plan_query("toast"), keyword_catalog) == []
