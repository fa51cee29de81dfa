"""Recipe service.

Business-level CRUD over a RecipeRepository. The HTTP layer talks only to
this service; which backend sits underneath is decided at startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipeshare.observability.logging import get_logger


if TYPE_CHECKING:
    from recipeshare.database.repositories.protocol import RecipeRepository
    from recipeshare.services.recipes.models import Recipe, RecipePatch

logger = get_logger(__name__)


class RecipeService:
    """CRUD operations on recipes.

    Lookups for an unknown id return None (or False for delete) instead of
    raising. Storage failures surface as RecipeStorageError.
    """

    def __init__(self, repository: RecipeRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> RecipeRepository:
        return self._repository

    async def add_recipe(self, recipe: Recipe) -> Recipe:
        """Persist a new recipe and return it with its assigned id."""
        saved = await self._repository.add(recipe.model_copy(update={"id": None}))
        logger.debug("Recipe added", recipe_id=saved.id)
        return saved

    async def get_all_recipes(self) -> list[Recipe]:
        """Return all recipes ordered by id."""
        return await self._repository.get_all()

    async def get_recipe_by_id(self, recipe_id: int) -> Recipe | None:
        return await self._repository.get_by_id(recipe_id)

    async def delete_recipe(self, recipe_id: int) -> bool:
        """Delete a recipe. Returns False if there was nothing to delete."""
        deleted = await self._repository.delete(recipe_id)
        if deleted:
            logger.debug("Recipe deleted", recipe_id=recipe_id)
        return deleted

    async def update_recipe(self, recipe_id: int, recipe: Recipe) -> Recipe | None:
        """Replace every field of an existing recipe except its id."""
        updated = await self._repository.replace(recipe_id, recipe)
        if updated is not None:
            logger.debug("Recipe replaced", recipe_id=recipe_id)
        return updated

    async def patch_recipe(self, recipe_id: int, patch: RecipePatch) -> Recipe | None:
        """Overwrite the fields set on ``patch``; keep the rest."""
        if not patch.changes():
            # Nothing to write, but the caller still needs the current state
            return await self._repository.get_by_id(recipe_id)

        patched = await self._repository.merge(recipe_id, patch)
        if patched is not None:
            logger.debug(
                "Recipe patched",
                recipe_id=recipe_id,
                fields=sorted(patch.changes()),
            )
        return patched

    async def is_healthy(self) -> bool:
        """Check that the backing repository can serve requests."""
        return await self._repository.ping()
