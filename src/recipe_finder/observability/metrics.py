"""Prometheus metrics instrumentation.

This module provides:
- FastAPI automatic request metrics
- Gateway, cache and search counters used by the search pipeline
- Metrics endpoint configuration
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_client import Counter, Histogram
from prometheus_fastapi_instrumentator import Instrumentator, metrics

from recipe_finder.core.config import get_settings
from recipe_finder.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from recipe_finder.core.config import Settings

logger = get_logger(__name__)

METRIC_NAMESPACE = "recipe_finder"

gateway_requests = Counter(
    "gateway_requests_total",
    "Recipe gateway requests by endpoint and outcome",
    ["endpoint", "outcome"],
    namespace=METRIC_NAMESPACE,
)

gateway_latency = Histogram(
    "gateway_request_duration_seconds",
    "Time spent waiting on the recipe gateway",
    ["endpoint"],
    namespace=METRIC_NAMESPACE,
)

cache_lookups = Counter(
    "response_cache_lookups_total",
    "Response cache lookups by result",
    ["result"],
    namespace=METRIC_NAMESPACE,
)

search_outcomes = Counter(
    "search_outcomes_total",
    "Completed searches by result status",
    ["status"],
    namespace=METRIC_NAMESPACE,
)


def setup_metrics(app: FastAPI, settings: Settings | None = None) -> Instrumentator:
    """Configure Prometheus metrics instrumentation.

    Sets up automatic HTTP request metrics collection including
    request count and duration by handler, method and status.

    Args:
        app: The FastAPI application instance.
        settings: Settings to read; the cached global settings when None.

    Returns:
        Configured Instrumentator instance.
    """
    if settings is None:
        settings = get_settings()

    if not settings.observability.metrics.enabled:
        logger.info("Metrics collection disabled")
        return Instrumentator()

    prefix = settings.api.v1_prefix

    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=[
            f"{prefix}/health",
            f"{prefix}/ready",
            f"{prefix}/metrics",
        ],
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True,
    )

    instrumentator.add(
        metrics.default(
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem="http",
            should_only_respect_2xx_for_highr=False,
        )
    )

    instrumentator.instrument(app)

    metrics_endpoint = f"{prefix}/metrics"
    instrumentator.expose(
        app,
        endpoint=metrics_endpoint,
        include_in_schema=True,
        tags=["Monitoring"],
    )

    logger.info("Prometheus metrics configured", endpoint=metrics_endpoint)

    return instrumentator


__all__ = [
    "cache_lookups",
    "gateway_latency",
    "gateway_requests",
    "search_outcomes",
    "setup_metrics",
]
