"""Unit tests for application entry point.

Tests cover:
- Application instance creation
- uvicorn launch arguments
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi import FastAPI

from tests.factories.settings import build_settings


pytestmark = pytest.mark.unit


class TestApplicationInstance:
    """Tests for main application instance."""

    def test_app_is_fastapi_instance(self) -> None:
        """Test that app is a FastAPI instance."""
        from recipe_finder.main import app

        assert isinstance(app, FastAPI)

    def test_app_has_title_and_version(self) -> None:
        """Test that app carries the configured name and version."""
        from recipe_finder.main import app

        assert app.title
        assert app.version


class TestRun:
    """Tests for the console entry point."""

    def test_runs_uvicorn_with_server_settings(self) -> None:
        """Should serve the module app on the configured host and port."""
        from recipe_finder.main import run

        settings = build_settings()

        with (
            patch("recipe_finder.core.config.get_settings", return_value=settings),
            patch("uvicorn.run") as mock_run,
        ):
            run()

        mock_run.assert_called_once_with(
            "recipe_finder.main:app",
            host=settings.server.host,
            port=settings.server.port,
            reload=False,
            log_level="warning",
        )
