"""Unit tests for RecipeService.

Tests cover:
- Delegation to the repository for each CRUD operation
- Id handling on insert
- Not-found results
- Empty patches
- Health checks
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from recipeshare.services.recipes import (
    Recipe,
    RecipePatch,
    RecipeService,
    RecipeStorageError,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def mock_repository() -> AsyncMock:
    """Create a mock recipe repository."""
    repository = AsyncMock()
    repository.backend_name = "mock"
    return repository


@pytest.fixture
def service(mock_repository: AsyncMock) -> RecipeService:
    """Create a RecipeService over the mock repository."""
    return RecipeService(mock_repository)


class TestAddRecipe:
    """Tests for RecipeService.add_recipe."""

    @pytest.mark.asyncio
    async def test_returns_saved_recipe(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
        sample_recipe: Recipe,
    ) -> None:
        """Should return what the repository stored."""
        mock_repository.add.return_value = sample_recipe

        result = await service.add_recipe(Recipe(title="Soup"))

        assert result is sample_recipe

    @pytest.mark.asyncio
    async def test_clears_client_supplied_id(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
        sample_recipe: Recipe,
    ) -> None:
        """Should never pass an id through to the repository."""
        mock_repository.add.return_value = sample_recipe

        await service.add_recipe(Recipe(id=99, title="Soup"))

        stored = mock_repository.add.await_args.args[0]
        assert stored.id is None

    @pytest.mark.asyncio
    async def test_propagates_storage_errors(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
    ) -> None:
        """Should let storage failures reach the caller."""
        mock_repository.add.side_effect = RecipeStorageError("down")

        with pytest.raises(RecipeStorageError):
            await service.add_recipe(Recipe(title="Soup"))


class TestReadRecipes:
    """Tests for the read operations."""

    @pytest.mark.asyncio
    async def test_get_all_recipes(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
        sample_recipe: Recipe,
    ) -> None:
        """Should return the repository listing."""
        mock_repository.get_all.return_value = [sample_recipe]

        assert await service.get_all_recipes() == [sample_recipe]

    @pytest.mark.asyncio
    async def test_get_recipe_by_id(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
        sample_recipe: Recipe,
    ) -> None:
        """Should look the recipe up by id."""
        mock_repository.get_by_id.return_value = sample_recipe

        result = await service.get_recipe_by_id(1)

        assert result is sample_recipe
        mock_repository.get_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_get_recipe_by_id_missing(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
    ) -> None:
        """Should return None for an unknown id."""
        mock_repository.get_by_id.return_value = None

        assert await service.get_recipe_by_id(42) is None


class TestDeleteRecipe:
    """Tests for RecipeService.delete_recipe."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("deleted", [True, False])
    async def test_reports_repository_result(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
        deleted: bool,
    ) -> None:
        """Should return whether anything was deleted."""
        mock_repository.delete.return_value = deleted

        assert await service.delete_recipe(3) is deleted
        mock_repository.delete.assert_awaited_once_with(3)


class TestUpdateRecipe:
    """Tests for RecipeService.update_recipe."""

    @pytest.mark.asyncio
    async def test_replaces_recipe(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
        sample_recipe: Recipe,
    ) -> None:
        """Should hand the full recipe to the repository."""
        replacement = Recipe(title="Stew")
        mock_repository.replace.return_value = sample_recipe

        result = await service.update_recipe(1, replacement)

        assert result is sample_recipe
        mock_repository.replace.assert_awaited_once_with(1, replacement)

    @pytest.mark.asyncio
    async def test_missing_recipe(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
    ) -> None:
        """Should return None when there is nothing to replace."""
        mock_repository.replace.return_value = None

        assert await service.update_recipe(7, Recipe(title="Stew")) is None


class TestPatchRecipe:
    """Tests for RecipeService.patch_recipe."""

    @pytest.mark.asyncio
    async def test_merges_patch(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
        sample_recipe: Recipe,
    ) -> None:
        """Should merge a non-empty patch."""
        patch = RecipePatch(servings=2)
        mock_repository.merge.return_value = sample_recipe

        result = await service.patch_recipe(1, patch)

        assert result is sample_recipe
        mock_repository.merge.assert_awaited_once_with(1, patch)

    @pytest.mark.asyncio
    async def test_empty_patch_returns_current_state(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
        sample_recipe: Recipe,
    ) -> None:
        """Should skip the write and return the stored recipe."""
        mock_repository.get_by_id.return_value = sample_recipe

        result = await service.patch_recipe(1, RecipePatch())

        assert result is sample_recipe
        mock_repository.merge.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_patch_on_missing_recipe(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
    ) -> None:
        """Should return None when the recipe does not exist."""
        mock_repository.get_by_id.return_value = None

        assert await service.patch_recipe(5, RecipePatch()) is None


class TestIsHealthy:
    """Tests for RecipeService.is_healthy."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("healthy", [True, False])
    async def test_reports_repository_ping(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
        healthy: bool,
    ) -> None:
        """Should reflect the repository ping."""
        mock_repository.ping.return_value = healthy

        assert await service.is_healthy() is healthy

    def test_exposes_repository(
        self,
        service: RecipeService,
        mock_repository: AsyncMock,
    ) -> None:
        """Should expose the repository it was built with."""
        assert service.repository is mock_repository
