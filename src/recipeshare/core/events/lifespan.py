"""Application lifespan event handlers.

Startup configures logging and builds the recipe service on top of the
configured storage backend. Shutdown releases the database pool and
flushes traces.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from recipeshare.core.config import Settings, StorageBackend, get_settings
from recipeshare.database.connection import close_database_pool, init_database_pool
from recipeshare.database.repositories import (
    InMemoryRecipeRepository,
    PostgresRecipeRepository,
)
from recipeshare.observability.logging import get_logger, setup_logging
from recipeshare.observability.tracing import shutdown_tracing
from recipeshare.services.recipes import RecipeService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from recipeshare.database.repositories import RecipeRepository

logger = get_logger(__name__)


async def _build_repository(settings: Settings) -> RecipeRepository:
    """Create the repository selected by ``storage.backend``."""
    if settings.storage.backend == StorageBackend.POSTGRES:
        pool = await init_database_pool(settings)
        repository = PostgresRecipeRepository(
            pool=pool, schema=settings.database.db_schema
        )
        try:
            await repository.ensure_schema()
        except Exception:
            await close_database_pool()
            raise
        return repository

    return InMemoryRecipeRepository()


async def _startup(app: FastAPI, settings: Settings) -> None:
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
        log_file=settings.logging.file,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        storage_backend=settings.storage.backend.value,
    )

    try:
        repository = await _build_repository(settings)
    except Exception:
        logger.exception("Failed to initialize recipe storage")
        raise  # Nothing works without storage

    app.state.recipe_service = RecipeService(repository)
    logger.info(
        "Application startup complete",
        storage_backend=repository.backend_name,
    )


async def _shutdown(app: FastAPI, settings: Settings) -> None:
    logger.info("Shutting down application")

    app.state.recipe_service = None
    if settings.storage.backend == StorageBackend.POSTGRES:
        await close_database_pool()

    if settings.observability.tracing.enabled:
        shutdown_tracing()

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Run startup, hand control to the app, then run shutdown.

    Uses the settings stored on ``app.state`` by the application factory,
    falling back to the cached global settings.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    try:
        yield
    finally:
        await _shutdown(app, settings)
