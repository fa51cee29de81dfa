"""PostgreSQL connection pool management.

The pool is created by the application lifespan when the ``postgres``
storage backend is selected and closed again on shutdown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import asyncpg

from recipeshare.observability.logging import get_logger


if TYPE_CHECKING:
    from asyncpg import Pool

    from recipeshare.core.config import Settings

logger = get_logger(__name__)

# Global connection pool
_pool: Pool | None = None


async def init_database_pool(settings: Settings) -> Pool:
    """Create the connection pool and verify it with a round trip.

    Raises:
        asyncpg.PostgresError: If the database rejects the test query.
    """
    global _pool  # noqa: PLW0603

    logger.info(
        "Initializing database connection pool",
        url=settings.database_url,
        schema=settings.database.db_schema,
    )

    _pool = await asyncpg.create_pool(
        host=settings.database.host,
        port=settings.database.port,
        database=settings.database.name,
        user=settings.database.user,
        password=settings.DATABASE_PASSWORD or None,
        min_size=settings.database.min_pool_size,
        max_size=settings.database.max_pool_size,
        command_timeout=settings.database.command_timeout,
        ssl=settings.database.ssl or None,
    )

    try:
        async with _pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except asyncpg.PostgresError:
        logger.exception("Failed to connect to database")
        await close_database_pool()
        raise

    logger.info("Database connection established")
    return _pool


async def close_database_pool() -> None:
    """Close the connection pool if one is open."""
    global _pool  # noqa: PLW0603

    if _pool is not None:
        await _pool.close()
        _pool = None
        logger.info("Database connection pool closed")


def get_database_pool() -> Pool:
    """Return the open connection pool.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _pool is None:
        msg = "Database pool not initialized. Call init_database_pool() first."
        raise RuntimeError(msg)
    return _pool
