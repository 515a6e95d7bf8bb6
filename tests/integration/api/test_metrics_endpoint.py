"""Integration tests for the Prometheus metrics endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.factories.settings import build_settings


if TYPE_CHECKING:
    from httpx import AsyncClient

    from recipe_finder.core.config import Settings


pytestmark = pytest.mark.integration


class TestMetricsEndpoint:
    """Tests for GET /metrics with metrics enabled."""

    @pytest.fixture
    def test_settings(self) -> Settings:
        return build_settings(metrics_enabled=True)

    async def test_prometheus_format(self, client: AsyncClient, prefix: str) -> None:
        """Should expose metrics in the Prometheus text format."""
        response = await client.get(f"{prefix}/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]
        assert "# HELP" in response.text
        assert "# TYPE" in response.text

    async def test_search_metrics(self, client: AsyncClient, prefix: str) -> None:
        """Should count searches and gateway calls."""
        await client.get(f"{prefix}/search", params={"q": "dal"})

        response = await client.get(f"{prefix}/metrics")

        assert 'recipe_finder_search_outcomes_total{status="empty"}' in response.text
        assert "recipe_finder_gateway_requests_total" in response.text
        assert "recipe_finder_gateway_request_duration_seconds" in response.text
        assert "recipe_finder_response_cache_lookups_total" in response.text

    async def test_http_metrics(self, client: AsyncClient, prefix: str) -> None:
        """Should record HTTP request metrics."""
        await client.get(f"{prefix}/search", params={"q": "dal"})

        response = await client.get(f"{prefix}/metrics")

        assert "recipe_finder_http_" in response.text
        assert "http_requests_total" in response.text


class TestMetricsDisabled:
    """Tests for the metrics endpoint with metrics disabled."""

    async def test_not_exposed(self, client: AsyncClient, prefix: str) -> None:
        """Should not mount the endpoint when metrics are disabled."""
        response = await client.get(f"{prefix}/metrics")

        assert response.status_code == 404
