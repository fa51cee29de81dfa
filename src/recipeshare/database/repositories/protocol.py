"""Recipe repository protocol.

Both storage backends implement this interface, so the service layer can
be wired to either one from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from recipeshare.services.recipes.models import Recipe, RecipePatch


@runtime_checkable
class RecipeRepository(Protocol):
    """Persistence operations for recipes.

    Absence is reported through the return value (``None`` or ``False``),
    never by raising. Backend failures raise ``RecipeStorageError``.
    """

    @property
    def backend_name(self) -> str:
        """Short backend name for logs and readiness checks."""
        ...

    async def add(self, recipe: Recipe) -> Recipe:
        """Insert a recipe and return it with its new id.

        Any id already on ``recipe`` is ignored.
        """
        ...

    async def get_all(self) -> list[Recipe]:
        """Return every recipe in ascending id order."""
        ...

    async def get_by_id(self, recipe_id: int) -> Recipe | None:
        """Return the recipe with ``recipe_id``, or None."""
        ...

    async def delete(self, recipe_id: int) -> bool:
        """Delete a recipe. Returns False if it did not exist."""
        ...

    async def replace(self, recipe_id: int, recipe: Recipe) -> Recipe | None:
        """Overwrite every field except the id. None if not found."""
        ...

    async def merge(self, recipe_id: int, patch: RecipePatch) -> Recipe | None:
        """Overwrite only the fields set on ``patch``. None if not found."""
        ...

    async def ping(self) -> bool:
        """Return True if the backend can serve requests."""
        ...
