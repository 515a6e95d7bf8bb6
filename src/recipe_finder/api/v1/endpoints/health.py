"""Health check and service information endpoints.

Provides liveness and readiness probes and the service root.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from recipe_finder.api.dependencies import get_app_settings, get_response_cache
from recipe_finder.cache.memory import ResponseCache  # noqa: TC001
from recipe_finder.core.config import Settings  # noqa: TC001
from recipe_finder.schemas.enums import HealthStatus, ReadinessStatus
from recipe_finder.schemas.health import (
    HealthResponse,
    ReadinessResponse,
    RootResponse,
)


router = APIRouter(tags=["Health"])


@router.get(
    "/",
    response_model=RootResponse,
    summary="Root endpoint",
    description="Basic service information and links.",
)
async def root(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> RootResponse:
    """Return basic service information for service discovery."""
    return RootResponse(
        service=settings.app.name,
        version=settings.app.version,
        status="operational",
        docs=f"{settings.api.v1_prefix}/docs"
        if settings.is_non_production
        else "disabled",
        health=f"{settings.api.v1_prefix}/health",
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Basic health check to verify the service is running.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Check if the service is alive. Does not touch the gateway."""
    return HealthResponse(
        status=HealthStatus.HEALTHY,
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Reports whether the search service and its cache are set up.",
)
async def readiness_check(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
    cache: Annotated[ResponseCache | None, Depends(get_response_cache)],
) -> ReadinessResponse:
    """Check if the service is ready to handle requests."""
    service_ready = getattr(request.app.state, "search_service", None) is not None
    dependencies = {
        "search_service": "healthy" if service_ready else "unavailable",
        "response_cache": "healthy" if cache is not None else "disabled",
    }

    return ReadinessResponse(
        status=ReadinessStatus.READY if service_ready else ReadinessStatus.NOT_READY,
        version=settings.app.version,
        environment=settings.APP_ENV,
        dependencies=dependencies,
        cache_entries=len(cache) if cache is not None else None,
    )
