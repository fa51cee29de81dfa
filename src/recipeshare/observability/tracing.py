"""OpenTelemetry distributed tracing configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from recipeshare.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from recipeshare.core.config import Settings

logger = get_logger(__name__)

EXCLUDED_URLS = "health,ready,metrics,docs,redoc,openapi.json"


def setup_tracing(app: FastAPI, settings: Settings) -> bool:
    """Install a tracer provider and instrument the FastAPI app.

    Spans go to the OTLP collector when ``otlp_endpoint`` is set, to the
    console in development, and nowhere otherwise.

    Returns:
        True if tracing was configured.
    """
    if not settings.observability.tracing.enabled:
        logger.info("Tracing disabled")
        return False

    resource = Resource.create(
        {
            "service.name": settings.app.name.lower().replace(" ", "-"),
            "service.version": settings.app.version,
            "deployment.environment": settings.APP_ENV,
        }
    )
    provider = TracerProvider(resource=resource)

    endpoint = settings.observability.tracing.otlp_endpoint
    if endpoint:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
        )
        logger.info("OTLP trace exporter configured", endpoint=endpoint)
    elif settings.is_development:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        logger.info("Console trace exporter configured")

    trace.set_tracer_provider(provider)
    FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)

    logger.info("OpenTelemetry tracing configured")
    return True


def shutdown_tracing() -> None:
    """Flush pending spans and shut the tracer provider down."""
    provider = trace.get_tracer_provider()
    if isinstance(provider, TracerProvider):
        provider.shutdown()
        logger.info("Tracing shutdown complete")


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Annotate the current span, if one is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)


__all__ = [
    "add_span_attributes",
    "setup_tracing",
    "shutdown_tracing",
]
