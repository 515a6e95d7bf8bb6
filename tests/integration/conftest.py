"""Integration test fixtures.

Builds the full application with test settings and runs its lifespan, so
requests travel through middleware, routing, the search service and the
real gateway client. The recipe gateway itself is replaced by a respx
router.
"""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
import respx
from httpx import ASGITransport, AsyncClient
from prometheus_client import REGISTRY

from recipe_finder.factory import create_app
from tests.factories.settings import TEST_BASE_URL, TEST_PREFIX, build_settings
from tests.fixtures.gateway import GatewayStub


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

    from fastapi import FastAPI

    from recipe_finder.core.config import Settings


pytestmark = pytest.mark.integration


@pytest.fixture
def prefix() -> str:
    """API v1 prefix used by the test settings."""
    return TEST_PREFIX


@pytest.fixture
def test_settings() -> Settings:
    """Create isolated test settings."""
    return build_settings()


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create FastAPI app with test settings."""
    return create_app(test_settings)


@pytest.fixture
def gateway() -> Generator[GatewayStub]:
    """Mock the recipe gateway."""
    stub = GatewayStub()
    with respx.mock(base_url=TEST_BASE_URL, assert_all_called=False) as router:
        stub.route = router.route().mock(side_effect=stub)
        yield stub


@pytest.fixture
async def client(
    app: FastAPI,
    gateway: GatewayStub,
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing with the lifespan running."""
    with patch("recipe_finder.core.events.lifespan.setup_logging"):
        async with app.router.lifespan_context(app):
            async with AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://test",
            ) as ac:
                yield ac


@pytest.fixture(autouse=True)
def reset_prometheus_registry() -> Generator[None]:
    """Reset Prometheus registry between tests.

    This prevents 'Duplicated timeseries' errors when creating
    multiple app instances in tests.
    """
    collectors_before = set(REGISTRY._names_to_collectors.keys())

    yield

    collectors_to_remove = []
    for name, collector in list(REGISTRY._names_to_collectors.items()):
        if name not in collectors_before:
            collectors_to_remove.append(collector)

    for collector in collectors_to_remove:
        with contextlib.suppress(Exception):
            REGISTRY.unregister(collector)
