"""Recipe search-and-ranking pipeline.

This package plans the gateway calls for a query, merges and ranks their
results, promotes the preferred cuisine and falls back to suggestions
when nothing matches.
"""

from recipe_finder.services.search.exceptions import (
    DetailsFetchFailedError,
    InvalidQueryError,
    RandomRecipeUnavailableError,
    SearchError,
)
from recipe_finder.services.search.keywords import (
    KeywordCatalog,
    load_keyword_catalog,
)
from recipe_finder.services.search.planner import (
    CallKind,
    CallTier,
    PlannedCall,
    SearchPlan,
    plan_calls,
    plan_query,
)
from recipe_finder.services.search.prioritizer import prioritize
from recipe_finder.services.search.ranker import CallOutcome, merge_results
from recipe_finder.services.search.service import RecipeSearchService
from recipe_finder.services.search.suggestions import suggest


__all__ = [
    "CallKind",
    "CallOutcome",
    "CallTier",
    "DetailsFetchFailedError",
    "InvalidQueryError",
    "KeywordCatalog",
    "PlannedCall",
    "RandomRecipeUnavailableError",
    "RecipeSearchService",
    "SearchError",
    "SearchPlan",
    "load_keyword_catalog",
    "merge_results",
    "plan_calls",
    "plan_query",
    "prioritize",
    "suggest",
]
