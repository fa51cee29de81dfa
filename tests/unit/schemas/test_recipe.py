"""Unit tests for recipe request and response schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recipeshare.schemas.recipe import RecipeRequest, RecipeResponse
from recipeshare.services.recipes import Recipe


pytestmark = pytest.mark.unit


class TestRecipeRequest:
    """Tests for RecipeRequest."""

    def test_all_fields_optional(self) -> None:
        """Should accept an empty body."""
        request = RecipeRequest.model_validate({})

        assert request.title is None
        assert request.type is None

    def test_ignores_unknown_fields(self) -> None:
        """Should drop fields it does not know, including id."""
        request = RecipeRequest.model_validate({"id": 5, "title": "Soup", "extra": 1})

        assert request.title == "Soup"
        assert not hasattr(request, "id")

    def test_rejects_non_integer_servings(self) -> None:
        """Should reject servings that are not numbers."""
        with pytest.raises(ValidationError):
            RecipeRequest.model_validate({"servings": "many"})


class TestRecipeResponse:
    """Tests for RecipeResponse."""

    def test_from_recipe(self, sample_recipe: Recipe) -> None:
        """Should copy every field and render the type as a string."""
        response = RecipeResponse.from_recipe(sample_recipe)

        assert response.model_dump() == {
            "id": 1,
            "title": "Soup",
            "type": "MAIN",
            "description": "Warm tomato soup",
            "ingredients": "Tomatoes, stock, salt",
            "instructions": "Simmer for 20 minutes",
            "servings": 4,
        }
