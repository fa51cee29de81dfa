"""Integration test fixtures.

Builds the full application through the factory and drives it over HTTP
with an in-process transport. The application lifespan runs for every
client, so each test starts with a fresh in-memory recipe store.
"""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from prometheus_client import REGISTRY

from recipeshare.factory import create_app


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

    from fastapi import FastAPI

    from recipeshare.core.config import Settings


pytestmark = pytest.mark.integration


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create FastAPI app with test settings."""
    return create_app(test_settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing, with startup and shutdown run."""
    async with (
        app.router.lifespan_context(app),
        AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac,
    ):
        yield ac


@pytest.fixture(autouse=True)
def reset_prometheus_registry() -> Generator[None]:
    """Unregister collectors created by apps built during the test.

    Each metrics-enabled app registers its own collectors in the global
    registry, and a second registration under the same name fails.
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
