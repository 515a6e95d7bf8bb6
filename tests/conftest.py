"""Shared test fixtures and configuration for the Recipe Finder tests.

Runs every test against the ``test`` configuration profile and provides
the keyword catalog fixture used across modules.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest


# Must be set before any Settings object reads the YAML profile
os.environ["APP_ENV"] = "test"

from recipe_finder.core.config import get_settings  # noqa: E402
from recipe_finder.services.search.keywords import (  # noqa: E402
    KeywordCatalog,
    load_keyword_catalog,
)


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None]:
    """Reload settings for every test so env overrides do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def keyword_catalog() -> KeywordCatalog:
    """The packaged keyword allowlists."""
    return load_keyword_catalog()
