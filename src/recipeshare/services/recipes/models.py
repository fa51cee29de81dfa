"""Recipe domain models.

``Recipe`` is the value persisted by the repositories. ``RecipePatch`` is
the sparse value used for partial updates, where ``None`` means "leave the
stored value alone".
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class RecipeType(StrEnum):
    """Kinds of recipe the service knows about."""

    BASIC = "BASIC"
    MAIN = "MAIN"
    APPETIZER = "APPETIZER"
    DESSERT = "DESSERT"
    VEGETARIAN = "VEGETARIAN"


class Recipe(BaseModel):
    """A recipe as stored.

    ``id`` is None until a repository assigns one on insert.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    title: str
    type: RecipeType = RecipeType.BASIC
    description: str | None = None
    ingredients: str | None = None
    instructions: str | None = None
    servings: int | None = Field(default=None, ge=1)


class RecipePatch(BaseModel):
    """Fields to overwrite on an existing recipe."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    type: RecipeType | None = None
    description: str | None = None
    ingredients: str | None = None
    instructions: str | None = None
    servings: int | None = Field(default=None, ge=1)

    def changes(self) -> dict[str, object]:
        """Return only the fields that carry a value."""
        return self.model_dump(exclude_none=True)

    def apply_to(self, recipe: Recipe) -> Recipe:
        """Return a copy of ``recipe`` with this patch's values applied."""
        return recipe.model_copy(update=self.changes())
