"""Constants for the recipe search pipeline.

Contains:
- Per-tier weights applied to relevance scores
- Scoring increments
- Planner and suggestion limits
"""

from __future__ import annotations

from typing import Final


# =============================================================================
# Call Tier Weights
# =============================================================================

FULL_QUERY_WEIGHT: Final[float] = 3.0
ORIGINAL_QUERY_WEIGHT: Final[float] = 2.5
TERM_WEIGHT: Final[float] = 1.0


# =============================================================================
# Relevance Scoring
# =============================================================================

FULL_QUERY_IN_NAME_SCORE: Final[float] = 10.0
TERM_IN_NAME_SCORE: Final[float] = 5.0
TERM_IN_AREA_SCORE: Final[float] = 2.0
TERM_IN_CATEGORY_SCORE: Final[float] = 2.0
NAME_PREFIX_SCORE: Final[float] = 3.0
CUISINE_BASE_BONUS: Final[float] = 2.0
CUISINE_MULTI_KEYWORD_BONUS: Final[float] = 1.5
AUTHENTIC_DISH_BONUS: Final[float] = 2.0
REGIONAL_TERM_BONUS: Final[float] = 1.5


# =============================================================================
# Limits
# =============================================================================

# Per-term calls are skipped for terms this short or shorter
MIN_TERM_LENGTH: Final[int] = 2
SUGGESTION_LIMIT: Final[int] = 12
RANDOM_PREFERRED_PROBABILITY: Final[float] = 0.7
