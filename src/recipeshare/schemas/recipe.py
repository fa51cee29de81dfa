"""Recipe request and response schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from recipeshare.schemas.base import APIRequest, APIResponse


if TYPE_CHECKING:
    from recipeshare.services.recipes.models import Recipe


class RecipeRequest(APIRequest):
    """Body of POST, PUT and PATCH on the recipes collection.

    Nothing is required here: the same shape serves full and partial
    writes, and the recipe factory decides what a valid request is.
    """

    title: str | None = Field(default=None, description="Recipe title")
    type: str | None = Field(
        default=None,
        description="Recipe type, e.g. MAIN or DESSERT",
        examples=["MAIN"],
    )
    description: str | None = Field(default=None, description="Short description")
    ingredients: str | None = Field(default=None, description="Ingredient list")
    instructions: str | None = Field(default=None, description="Preparation steps")
    servings: int | None = Field(default=None, description="Number of servings")


class RecipeResponse(APIResponse):
    """A stored recipe as returned to clients."""

    id: int = Field(description="Identifier assigned by the service")
    title: str
    type: str
    description: str | None = None
    ingredients: str | None = None
    instructions: str | None = None
    servings: int | None = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> RecipeResponse:
        """Build the response body for a persisted recipe."""
        return cls.model_validate(recipe.model_dump(mode="json"))
