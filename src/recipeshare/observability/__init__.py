"""Observability components: logging, metrics, and tracing."""

from recipeshare.observability.logging import (
    bind_context,
    bound_context,
    clear_context,
    get_context,
    get_logger,
    logger,
    setup_logging,
    unbind_context,
)
from recipeshare.observability.metrics import setup_metrics
from recipeshare.observability.tracing import (
    add_span_attributes,
    setup_tracing,
    shutdown_tracing,
)


__all__ = [
    "add_span_attributes",
    "bind_context",
    "bound_context",
    "clear_context",
    "get_context",
    "get_logger",
    "logger",
    "setup_logging",
    "setup_metrics",
    "setup_tracing",
    "shutdown_tracing",
    "unbind_context",
]
