"""Recipe repositories."""

from recipeshare.database.repositories.memory import InMemoryRecipeRepository
from recipeshare.database.repositories.postgres import PostgresRecipeRepository
from recipeshare.database.repositories.protocol import RecipeRepository


__all__ = [
    "InMemoryRecipeRepository",
    "PostgresRecipeRepository",
    "RecipeRepository",
]
