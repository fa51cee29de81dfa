"""Prometheus metrics instrumentation for the HTTP layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_fastapi_instrumentator import Instrumentator, metrics

from recipeshare.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from recipeshare.core.config import Settings

logger = get_logger(__name__)

METRIC_NAMESPACE = "recipeshare"
METRIC_SUBSYSTEM = "http"


def setup_metrics(app: FastAPI, settings: Settings) -> Instrumentator | None:
    """Instrument the app and expose ``{prefix}/metrics``.

    Collects request counts and latency by handler, method and status, plus
    request/response sizes and an in-progress gauge. Health probes and the
    metrics endpoint itself are excluded.

    Returns:
        The configured Instrumentator, or None when metrics are disabled.
    """
    if not settings.observability.metrics.enabled:
        logger.info("Metrics collection disabled")
        return None

    prefix = settings.api.prefix
    metrics_endpoint = f"{prefix}/metrics"

    instrumentator = Instrumentator(
        should_group_status_codes=False,
        should_ignore_untemplated=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=[
            f"{prefix}/health",
            f"{prefix}/ready",
            metrics_endpoint,
        ],
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True,
    )

    instrumentator.add(
        metrics.default(
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem=METRIC_SUBSYSTEM,
        )
    )
    for size_metric in (metrics.request_size, metrics.response_size):
        instrumentator.add(
            size_metric(
                should_include_handler=True,
                should_include_method=True,
                should_include_status=True,
                metric_namespace=METRIC_NAMESPACE,
                metric_subsystem=METRIC_SUBSYSTEM,
            )
        )

    instrumentator.instrument(app)
    instrumentator.expose(
        app,
        endpoint=metrics_endpoint,
        include_in_schema=True,
        tags=["Monitoring"],
    )

    logger.info("Prometheus metrics configured", endpoint=metrics_endpoint)
    return instrumentator


__all__ = ["setup_metrics"]
