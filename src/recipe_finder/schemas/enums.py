"""Enumerations shared by the search service and the API layer."""

from __future__ import annotations

from enum import StrEnum


class SearchStatus(StrEnum):
    """Outcome of one search.

    - RESULTS: ranked matches for the query
    - SUGGESTIONS: no match; preferred-cuisine suggestions instead
    - EMPTY: no match and no suggestions available
    - ERROR: every gateway call failed or the pipeline broke
    """

    RESULTS = "results"
    SUGGESTIONS = "suggestions"
    EMPTY = "empty"
    ERROR = "error"


class DietType(StrEnum):
    """Diet restriction applied to result lists."""

    ALL = "all"
    VEGETARIAN = "vegetarian"
    NON_VEGETARIAN = "non-vegetarian"


class HealthStatus(StrEnum):
    """Health check status values."""

    HEALTHY = "healthy"


class ReadinessStatus(StrEnum):
    """Readiness probe status values."""

    READY = "ready"
    NOT_READY = "not_ready"
