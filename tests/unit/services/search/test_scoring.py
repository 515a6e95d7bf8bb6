"""Unit tests for relevance scoring."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipe_finder.services.search.planner import plan_query
from recipe_finder.services.search.scoring import (
    cuisine_bonus,
    regional_bonus,
    relevance_score,
)
from tests.factories.recipe import RecipeRecordFactory


if TYPE_CHECKING:
    from recipe_finder.services.search.keywords import KeywordCatalog


pytestmark = pytest.mark.unit


class TestRelevanceScore:
    """Tests for relevance_score."""

    def test_full_query_and_term(self, keyword_catalog: KeywordCatalog) -> None:
        """Should add full-query and term scores for a mid-name match."""
        record = RecipeRecordFactory.named("Plain Toast")

        score = relevance_score(record, plan_query("toast"), keyword_catalog)

        # 10 full query + 5 term in name, the name does not start with "toast"
        assert score == 15.0

    def test_prefix_bonus(self, keyword_catalog: KeywordCatalog) -> None:
        """Should add the prefix bonus when the name starts with the query."""
        record = RecipeRecordFactory.named("Toast Sandwich")

        score = relevance_score(record, plan_query("toast"), keyword_catalog)

        # 10 full query + 5 term in name + 3 prefix
        assert score == 18.0

    def test_no_match_scores_zero(self, keyword_catalog: KeywordCatalog) -> None:
        """Should score a record unrelated to the query as zero."""
        record = RecipeRecordFactory.named("Plain Toast")

        assert relevance_score(record, plan_query("lemon"), keyword_catalog) == 0.0

    def test_area_and_category_terms(self, keyword_catalog: KeywordCatalog) -> None:
        """Should add two points each for a term found in area and category."""
        record = RecipeRecordFactory.named(
            "Plain Toast", area="British", category="Breakfast"
        )

        score = relevance_score(
            record, plan_query("british breakfast"), keyword_catalog
        )

        assert score == 4.0

    def test_is_case_insensitive(self, keyword_catalog: KeywordCatalog) -> None:
        """Should match regardless of case in query and record."""
        lower = relevance_score(
            RecipeRecordFactory.named("plain toast"),
            plan_query("TOAST"),
            keyword_catalog,
        )
        upper = relevance_score(
            RecipeRecordFactory.named("PLAIN TOAST"),
            plan_query("toast"),
            keyword_catalog,
        )
        # 10 full query + 5 term in name, no prefix match
        assert lower == upper == 15.0

    def test_cuisine_dish_outranks_plain_dish(
        self, keyword_catalog: KeywordCatalog
    ) -> None:
        """Should score a curry above a soup for 'chicken curry'."""
        plan = plan_query("chicken curry")
        curry = RecipeRecordFactory.named("Chicken Curry")
        soup = RecipeRecordFactory.named("Chicken Soup")

        curry_score = relevance_score(curry, plan, keyword_catalog)
        soup_score = relevance_score(soup, plan, keyword_catalog)

        # 10 + 5 + 5 + 3 prefix + 2 cuisine + 2 authentic
        assert curry_score == 27.0
        # 5 + 3 prefix
        assert soup_score == 8.0

    def test_is_never_negative(self, keyword_catalog: KeywordCatalog) -> None:
        """Should never produce a negative score."""
        record = RecipeRecordFactory.named("Zzz")
        assert relevance_score(record, plan_query("abc def"), keyword_catalog) >= 0


class TestCuisineBonus:
    """Tests for cuisine_bonus."""

    def test_no_keyword(self, keyword_catalog: KeywordCatalog) -> None:
        """Should be zero without any cuisine keyword."""
        assert cuisine_bonus("plain toast", keyword_catalog) == 0.0

    def test_single_keyword(self, keyword_catalog: KeywordCatalog) -> None:
        """Should give the base bonus for one non-authentic keyword."""
        assert cuisine_bonus("beef pasta", keyword_catalog) == 2.0

    def test_multiple_keywords_and_authentic(
        self, keyword_catalog: KeywordCatalog
    ) -> None:
        """Should add per-keyword and authentic-dish bonuses."""
        # 3 cuisine matches: 2 + 3 * 1.5; 3 authentic matches: 3 * 2
        assert cuisine_bonus("paneer tikka masala", keyword_catalog) == 12.5

    def test_authentic_requires_cuisine_keyword(
        self, keyword_catalog: KeywordCatalog
    ) -> None:
        """Should ignore authentic names when no cuisine keyword matched."""
        assert "makhani" in keyword_catalog.authentic
        assert cuisine_bonus("makhani sauce", keyword_catalog) == 0.0


class TestRegionalBonus:
    """Tests for regional_bonus."""

    def test_matches_name(self, keyword_catalog: KeywordCatalog) -> None:
        """Should add the regional bonus for a regional name."""
        assert regional_bonus("goan fish", "", keyword_catalog) == 1.5

    def test_matches_area(self, keyword_catalog: KeywordCatalog) -> None:
        """Should also look for regional names in the area."""
        assert regional_bonus("plain toast", "punjabi", keyword_catalog) == 1.5

    def test_counts_each_term_once(self, keyword_catalog: KeywordCatalog) -> None:
        """Should count a term once even when found in name and area."""
        assert regional_bonus("goan fish", "goan", keyword_catalog) == 1.5
