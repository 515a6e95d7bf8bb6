"""Health, readiness and service-info schemas."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from recipe_finder.schemas.base import APIResponse
from recipe_finder.schemas.enums import HealthStatus, ReadinessStatus


class HealthResponse(APIResponse):
    """Liveness probe response."""

    status: HealthStatus = Field(..., description="Health status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")


class ReadinessResponse(APIResponse):
    """Readiness probe response with per-dependency status."""

    status: ReadinessStatus = Field(..., description="Readiness status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    version: str
    environment: str
    dependencies: dict[str, str] = Field(
        default_factory=dict,
        description="Status of each service component",
    )
    cache_entries: int | None = Field(
        default=None,
        description="Entries in the response cache; null when caching is disabled",
    )


class RootResponse(APIResponse):
    """Basic service information returned by the root endpoint."""

    service: str = Field(..., examples=["Recipe Finder Service"])
    version: str = Field(..., examples=["2.0.0"])
    status: str = Field(..., examples=["operational"])
    docs: str = Field(..., examples=["/api/v1/recipe-finder/docs"])
    health: str = Field(..., examples=["/api/v1/recipe-finder/health"])
