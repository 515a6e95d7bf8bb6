"""In-memory response cache with a fixed time-to-live.

Entries are keyed by request signature (endpoint, parameter) and hold the
raw decoded gateway response. There is no size bound; an entry found stale
on lookup is evicted, and ``put`` always overwrites with a fresh timestamp.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from recipe_finder.observability.logging import get_logger
from recipe_finder.observability.metrics import cache_lookups


if TYPE_CHECKING:
    from collections.abc import Callable, Hashable


logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A cached response and the clock reading at insertion."""

    value: Any
    inserted_at: float

    def is_fresh(self, now: float, ttl_seconds: float) -> bool:
        """Return True while the entry is younger than the TTL."""
        return now - self.inserted_at < ttl_seconds


class ResponseCache:
    """Process-local TTL cache for gateway responses.

    Example:
        ```python
        cache = ResponseCache(ttl_seconds=300)
        cache.put(("filter_by_ingredient", "chicken"), payload)
        cache.get(("filter_by_ingredient", "chicken"))  # payload
        ```

    Writes are whole-entry replacements keyed by a deterministic signature,
    so interleaved puts from concurrent searches are safe.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: Age at which an entry becomes a miss.
            clock: Monotonic time source in seconds, injectable for tests.
        """
        if ttl_seconds <= 0:
            msg = f"ttl_seconds must be positive, got {ttl_seconds}"
            raise ValueError(msg)
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[Hashable, CacheEntry] = {}

    @property
    def ttl_seconds(self) -> float:
        """Configured time-to-live in seconds."""
        return self._ttl_seconds

    def get(self, key: Hashable) -> Any | None:
        """Return the cached value for ``key``, or None on a miss."""
        entry = self._entries.get(key)
        if entry is None:
            cache_lookups.labels(result="miss").inc()
            return None

        if not entry.is_fresh(self._clock(), self._ttl_seconds):
            self._entries.pop(key, None)
            cache_lookups.labels(result="stale").inc()
            logger.debug("Evicted stale cache entry", key=str(key))
            return None

        cache_lookups.labels(result="hit").inc()
        return entry.value

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous entry."""
        self._entries[key] = CacheEntry(value=value, inserted_at=self._clock())

    def clear(self) -> None:
        """Drop every entry."""
        count = len(self._entries)
        self._entries.clear()
        logger.info("Response cache cleared", entries=count)

    def __len__(self) -> int:
        return len(self._entries)
