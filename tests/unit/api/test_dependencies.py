"""Unit tests for API dependencies."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from recipe_finder.api.dependencies import (
    get_app_settings,
    get_response_cache,
    get_search_service,
)
from recipe_finder.core.config import get_settings
from tests.factories.settings import build_settings


pytestmark = pytest.mark.unit


def _request(**state: object) -> MagicMock:
    request = MagicMock()
    request.app.state = MagicMock(spec=[])
    for key, value in state.items():
        setattr(request.app.state, key, value)
    return request


class TestGetSearchService:
    """Tests for get_search_service."""

    async def test_returns_service(self) -> None:
        """Should return the service stored on app state."""
        service = MagicMock()
        assert await get_search_service(_request(search_service=service)) is service

    async def test_missing_service(self) -> None:
        """Should raise 503 before startup or after shutdown."""
        with pytest.raises(HTTPException) as exc_info:
            await get_search_service(_request(search_service=None))

        assert exc_info.value.status_code == 503

    async def test_missing_attribute(self) -> None:
        """Should raise 503 when the state was never populated."""
        with pytest.raises(HTTPException):
            await get_search_service(_request())


class TestGetResponseCache:
    """Tests for get_response_cache."""

    async def test_returns_cache_or_none(self) -> None:
        """Should return the cache, or None when caching is disabled."""
        cache = MagicMock()
        assert await get_response_cache(_request(response_cache=cache)) is cache
        assert await get_response_cache(_request()) is None


class TestGetAppSettings:
    """Tests for get_app_settings."""

    async def test_prefers_app_settings(self) -> None:
        """Should return the settings the app was created with."""
        settings = build_settings()
        assert await get_app_settings(_request(settings=settings)) is settings

    async def test_falls_back_to_global(self) -> None:
        """Should fall back to the cached global settings."""
        assert await get_app_settings(_request()) is get_settings()
