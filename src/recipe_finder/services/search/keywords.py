"""Static keyword allowlists for scoring, banding and filtering.

The lists live in ``keywords.yaml`` beside this module and are loaded once
into an immutable ``KeywordCatalog``. A different file can be supplied via
``search.keywords_file``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Final

import yaml

from recipe_finder.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Iterable


logger = get_logger(__name__)

DEFAULT_KEYWORDS_FILE: Final[Path] = Path(__file__).with_name("keywords.yaml")

KEYWORD_SECTIONS: Final[tuple[str, ...]] = (
    "cuisine",
    "authentic",
    "regional",
    "popular",
    "meat",
)


def count_matches(text: str, keywords: Iterable[str]) -> int:
    """Count keywords that occur as substrings of ``text`` (already lower-cased)."""
    return sum(1 for keyword in keywords if keyword in text)


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """True if any keyword occurs as a substring of ``text``."""
    return any(keyword in text for keyword in keywords)


@dataclass(frozen=True, slots=True)
class KeywordCatalog:
    """Immutable, lower-cased keyword sets."""

    cuisine: frozenset[str]
    authentic: frozenset[str]
    regional: frozenset[str]
    popular: frozenset[str]
    meat: frozenset[str]

    @classmethod
    def from_mapping(cls, data: dict[str, object]) -> KeywordCatalog:
        """Build a catalog from the parsed YAML document.

        Raises:
            ValueError: If a section is missing or is not a list of strings.
        """
        sections: dict[str, frozenset[str]] = {}
        for name in KEYWORD_SECTIONS:
            values = data.get(name)
            if not isinstance(values, list) or not all(
                isinstance(value, str) for value in values
            ):
                msg = f"Keyword section '{name}' must be a list of strings"
                raise ValueError(msg)
            sections[name] = frozenset(
                value.strip().lower() for value in values if value.strip()
            )
        return cls(**sections)

    def cuisine_matches(self, name: str) -> int:
        """Number of cuisine keywords found in a recipe name."""
        return count_matches(name.lower(), self.cuisine)

    def has_cuisine_keyword(self, name: str) -> bool:
        """True if a recipe name carries at least one cuisine keyword."""
        return contains_any(name.lower(), self.cuisine)

    def is_popular(self, name: str) -> bool:
        """True if a recipe name contains a popular dish."""
        return contains_any(name.lower(), self.popular)


@lru_cache
def load_keyword_catalog(path: str | None = None) -> KeywordCatalog:
    """Load and cache the keyword catalog.

    Args:
        path: YAML file to read; the packaged allowlist when None.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is malformed.
    """
    source = Path(path) if path else DEFAULT_KEYWORDS_FILE
    with source.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        msg = f"Keyword file {source} must contain a mapping"
        raise ValueError(msg)

    catalog = KeywordCatalog.from_mapping(data)
    logger.debug(
        "Loaded keyword catalog",
        source=str(source),
        cuisine=len(catalog.cuisine),
        popular=len(catalog.popular),
    )
    return catalog
