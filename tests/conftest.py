"""Shared test fixtures for the RecipeShare service tests.

Provides settings tuned for tests, sample recipes and requests, and a
loguru sink that collects records so tests can assert on log output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from loguru import logger

from recipeshare.core.config import Settings, StorageBackend
from recipeshare.core.config.settings import (
    ApiSettings,
    AppSettings,
    LoggingSettings,
    MetricsSettings,
    ObservabilitySettings,
    StorageSettings,
    TracingSettings,
)
from recipeshare.observability.logging import clear_context
from recipeshare.schemas.recipe import RecipeRequest
from recipeshare.services.recipes import Recipe, RecipeType


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an in-memory app with metrics and tracing off."""
    return Settings(
        APP_ENV="test",
        app=AppSettings(name="recipeshare-test", version="0.0.1-test"),
        api=ApiSettings(prefix="/api", cors_origins=[]),
        logging=LoggingSettings(level="DEBUG", format="json"),
        observability=ObservabilitySettings(
            tracing=TracingSettings(enabled=False),
            metrics=MetricsSettings(enabled=False),
        ),
        storage=StorageSettings(backend=StorageBackend.MEMORY),
    )


@pytest.fixture
def sample_recipe() -> Recipe:
    """A stored recipe."""
    return Recipe(
        id=1,
        title="Soup",
        type=RecipeType.MAIN,
        description="Warm tomato soup",
        ingredients="Tomatoes, stock, salt",
        instructions="Simmer for 20 minutes",
        servings=4,
    )


@pytest.fixture
def sample_request() -> RecipeRequest:
    """A create request matching ``sample_recipe``."""
    return RecipeRequest(
        title="Soup",
        type="MAIN",
        description="Warm tomato soup",
        ingredients="Tomatoes, stock, salt",
        instructions="Simmer for 20 minutes",
        servings=4,
    )


@pytest.fixture
def log_records() -> Generator[list[dict[str, Any]]]:
    """Collect loguru records emitted while the test runs."""
    records: list[dict[str, Any]] = []
    handler_id = logger.add(
        lambda message: records.append(message.record),
        level="DEBUG",
        format="{message}",
    )
    yield records
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_log_context() -> Generator[None]:
    """Start and finish every test with an empty logging context."""
    clear_context()
    yield
    clear_context()
