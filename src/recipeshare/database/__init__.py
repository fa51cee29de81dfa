"""Persistence layer.

This module provides:
- asyncpg connection pool management
- Recipe repositories (in-memory and PostgreSQL)
"""

from recipeshare.database.connection import (
    close_database_pool,
    get_database_pool,
    init_database_pool,
)
from recipeshare.database.repositories import (
    InMemoryRecipeRepository,
    PostgresRecipeRepository,
    RecipeRepository,
)


__all__ = [
    "InMemoryRecipeRepository",
    "PostgresRecipeRepository",
    "RecipeRepository",
    "close_database_pool",
    "get_database_pool",
    "init_database_pool",
]
