"""Exceptions for the recipe search service.

Only ``InvalidQueryError`` and ``DetailsFetchFailedError`` reach callers;
a failed search is reported through the result status instead.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base exception for recipe search service errors."""


class InvalidQueryError(SearchError, ValueError):
    """Raised when a query is empty or blank after trimming.

    Raised before any gateway call is attempted.
    """

    def __init__(self, query: str | None) -> None:
        self.query = query
        super().__init__("Search query must not be blank")


class DetailsFetchFailedError(SearchError):
    """Raised when a recipe's full details cannot be fetched."""

    def __init__(self, recipe_id: str, reason: str | None = None) -> None:
        self.recipe_id = recipe_id
        self.reason = reason
        message = f"Details unavailable for recipe {recipe_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class RandomRecipeUnavailableError(SearchError):
    """Raised when no random recipe could be obtained from the gateway."""
