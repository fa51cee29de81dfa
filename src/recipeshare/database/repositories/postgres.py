"""PostgreSQL recipe repository.

Uses raw asyncpg queries against a single ``recipes`` table. The table
lives in the schema named by ``database.db_schema`` and is created on
startup when missing.
"""

from __future__ import annotations

import re
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import asyncpg

from recipeshare.database.connection import get_database_pool
from recipeshare.observability.logging import get_logger
from recipeshare.services.recipes.exceptions import RecipeStorageError
from recipeshare.services.recipes.models import Recipe, RecipeType


if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from asyncpg import Connection, Pool, Record

    from recipeshare.services.recipes.models import RecipePatch

logger = get_logger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

_COLUMNS = "id, title, type, description, ingredients, instructions, servings"


class PostgresRecipeRepository:
    """Recipe repository backed by PostgreSQL."""

    backend_name = "postgres"

    def __init__(self, pool: Pool | None = None, schema: str = "public") -> None:
        """Initialize repository.

        Args:
            pool: asyncpg connection pool. If None, uses the global pool.
            schema: Schema holding the recipes table.

        Raises:
            ValueError: If ``schema`` is not a plain SQL identifier.
        """
        if not _IDENTIFIER.match(schema):
            msg = f"Invalid schema name: {schema!r}"
            raise ValueError(msg)
        self._pool = pool
        self._schema = schema
        self._table = f"{schema}.recipes"

    @property
    def pool(self) -> Pool:
        """Get the database connection pool."""
        if self._pool is not None:
            return self._pool
        return get_database_pool()

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[Connection]:
        """Acquire a connection, translating driver errors."""
        try:
            async with self.pool.acquire() as conn:
                yield conn
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error("Recipe storage failure", error=str(e))
            msg = f"Recipe storage failure: {e}"
            raise RecipeStorageError(msg) from e

    async def ensure_schema(self) -> None:
        """Create the schema and recipes table if they do not exist."""
        async with self._connection() as conn:
            await conn.execute(f"CREATE SCHEMA IF NOT EXISTS {self._schema}")
            await conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {self._table} (
                    id BIGSERIAL PRIMARY KEY,
                    title TEXT NOT NULL,
                    type TEXT NOT NULL,
                    description TEXT,
                    ingredients TEXT,
                    instructions TEXT,
                    servings INTEGER CHECK (servings >= 1),
                    created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
                    updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
                )
                """
            )
        logger.info("Recipes table ready", table=self._table)

    async def add(self, recipe: Recipe) -> Recipe:
        query = f"""
            INSERT INTO {self._table}
                (title, type, description, ingredients, instructions, servings)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {_COLUMNS}
        """
        async with self._connection() as conn:
            row = await conn.fetchrow(query, *self._values(recipe))
        return self._row_to_recipe(row)

    async def get_all(self) -> list[Recipe]:
        query = f"SELECT {_COLUMNS} FROM {self._table} ORDER BY id"
        async with self._connection() as conn:
            rows = await conn.fetch(query)
        return [self._row_to_recipe(row) for row in rows]

    async def get_by_id(self, recipe_id: int) -> Recipe | None:
        query = f"SELECT {_COLUMNS} FROM {self._table} WHERE id = $1"
        async with self._connection() as conn:
            row = await conn.fetchrow(query, recipe_id)
        return self._row_to_recipe(row) if row is not None else None

    async def delete(self, recipe_id: int) -> bool:
        query = f"DELETE FROM {self._table} WHERE id = $1 RETURNING id"
        async with self._connection() as conn:
            deleted = await conn.fetchval(query, recipe_id)
        return deleted is not None

    async def replace(self, recipe_id: int, recipe: Recipe) -> Recipe | None:
        query = f"""
            UPDATE {self._table}
            SET title = $2,
                type = $3,
                description = $4,
                ingredients = $5,
                instructions = $6,
                servings = $7,
                updated_at = now()
            WHERE id = $1
            RETURNING {_COLUMNS}
        """
        async with self._connection() as conn:
            row = await conn.fetchrow(query, recipe_id, *self._values(recipe))
        return self._row_to_recipe(row) if row is not None else None

    async def merge(self, recipe_id: int, patch: RecipePatch) -> Recipe | None:
        # NULL parameters keep the stored column value
        query = f"""
            UPDATE {self._table}
            SET title = COALESCE($2, title),
                type = COALESCE($3, type),
                description = COALESCE($4, description),
                ingredients = COALESCE($5, ingredients),
                instructions = COALESCE($6, instructions),
                servings = COALESCE($7, servings),
                updated_at = now()
            WHERE id = $1
            RETURNING {_COLUMNS}
        """
        async with self._connection() as conn:
            row = await conn.fetchrow(query, recipe_id, *self._values(patch))
        return self._row_to_recipe(row) if row is not None else None

    async def ping(self) -> bool:
        try:
            async with self._connection() as conn:
                await conn.fetchval("SELECT 1")
        except (RecipeStorageError, RuntimeError):
            return False
        return True

    @staticmethod
    def _values(recipe: Recipe | RecipePatch) -> tuple[object, ...]:
        return (
            recipe.title,
            recipe.type.value if recipe.type is not None else None,
            recipe.description,
            recipe.ingredients,
            recipe.instructions,
            recipe.servings,
        )

    @staticmethod
    def _row_to_recipe(row: Record) -> Recipe:
        return Recipe(
            id=row["id"],
            title=row["title"],
            type=RecipeType(row["type"]),
            description=row["description"],
            ingredients=row["ingredients"],
            instructions=row["instructions"],
            servings=row["servings"],
        )
