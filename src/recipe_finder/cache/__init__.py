"""In-memory caching for gateway responses."""

from recipe_finder.cache.memory import CacheEntry, ResponseCache


__all__ = [
    "CacheEntry",
    "ResponseCache",
]
