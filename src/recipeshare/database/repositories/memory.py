"""In-process recipe repository.

Keeps recipes in a dict keyed by id. Ids come from a counter that starts
at 1 and never reuses a value, even after deletes. Iteration follows
insertion order, which is also ascending id order.
"""

from __future__ import annotations

import asyncio
import itertools
from typing import TYPE_CHECKING

from recipeshare.observability.logging import get_logger


if TYPE_CHECKING:
    from recipeshare.services.recipes.models import Recipe, RecipePatch

logger = get_logger(__name__)


class InMemoryRecipeRepository:
    """Recipe repository backed by a dictionary."""

    backend_name = "memory"

    def __init__(self) -> None:
        self._recipes: dict[int, Recipe] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def add(self, recipe: Recipe) -> Recipe:
        async with self._lock:
            stored = recipe.model_copy(update={"id": next(self._ids)})
            self._recipes[stored.id] = stored
        logger.debug("Stored recipe", recipe_id=stored.id)
        return stored

    async def get_all(self) -> list[Recipe]:
        return list(self._recipes.values())

    async def get_by_id(self, recipe_id: int) -> Recipe | None:
        return self._recipes.get(recipe_id)

    async def delete(self, recipe_id: int) -> bool:
        async with self._lock:
            return self._recipes.pop(recipe_id, None) is not None

    async def replace(self, recipe_id: int, recipe: Recipe) -> Recipe | None:
        async with self._lock:
            if recipe_id not in self._recipes:
                return None
            stored = recipe.model_copy(update={"id": recipe_id})
            self._recipes[recipe_id] = stored
            return stored

    async def merge(self, recipe_id: int, patch: RecipePatch) -> Recipe | None:
        async with self._lock:
            current = self._recipes.get(recipe_id)
            if current is None:
                return None
            stored = patch.apply_to(current)
            self._recipes[recipe_id] = stored
            return stored

    async def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._recipes)
