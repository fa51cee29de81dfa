"""Application factory for creating FastAPI instances.

This module provides the create_app factory function that:
- Configures the FastAPI application from settings
- Sets up the middleware stack in the correct order
- Registers exception handlers
- Mounts API routers
- Wires metrics and tracing
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from recipeshare.api.router import router as api_router
from recipeshare.core.config import Settings, get_settings
from recipeshare.core.events import lifespan
from recipeshare.core.exceptions import setup_exception_handlers
from recipeshare.core.middleware.logging import LoggingMiddleware
from recipeshare.core.middleware.request_id import RequestIDMiddleware
from recipeshare.observability.metrics import setup_metrics
from recipeshare.observability.tracing import setup_tracing


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    docs_enabled = not settings.is_production
    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description="RecipeShare - CRUD API for recipes",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        debug=settings.app.debug,
    )

    # The lifespan and the health endpoints read settings from here
    app.state.settings = settings
    app.state.recipe_service = None

    setup_exception_handlers(app)
    _setup_middleware(app, settings)
    app.include_router(api_router, prefix=settings.api.prefix)

    # After routes are mounted
    setup_tracing(app, settings)
    setup_metrics(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    The last middleware added is the outermost. From the request side:
    1. RequestIDMiddleware (fresh logging context + request id)
    2. LoggingMiddleware (access log and X-Process-Time)
    3. GZipMiddleware
    4. CORSMiddleware
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["Location", "X-Request-ID", "X-Process-Time"],
        )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    prefix = settings.api.prefix
    app.add_middleware(
        LoggingMiddleware,
        exclude_paths={f"{prefix}/health", f"{prefix}/ready", f"{prefix}/metrics"},
        slow_threshold=settings.logging.slow_request_threshold,
    )

    app.add_middleware(RequestIDMiddleware)
