"""Recipe domain: models, factory, and service."""

from recipeshare.services.recipes.exceptions import (
    RecipeError,
    RecipeStorageError,
    RecipeValidationError,
)
from recipeshare.services.recipes.factory import RecipeFactory
from recipeshare.services.recipes.models import Recipe, RecipePatch, RecipeType
from recipeshare.services.recipes.service import RecipeService


__all__ = [
    "Recipe",
    "RecipeError",
    "RecipeFactory",
    "RecipePatch",
    "RecipeService",
    "RecipeStorageError",
    "RecipeType",
    "RecipeValidationError",
]
