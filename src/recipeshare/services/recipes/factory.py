"""Build recipe domain values from API requests.

Full writes (POST, PUT) need a complete recipe; partial writes (PATCH)
need only the fields the client sent. Both paths apply the same
per-field rules:

- text fields are stripped of surrounding whitespace
- ``title`` must not be blank
- ``type`` must name a RecipeType, case-insensitively
- ``servings`` must be at least 1
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipeshare.services.recipes.exceptions import RecipeValidationError
from recipeshare.services.recipes.models import Recipe, RecipePatch, RecipeType


if TYPE_CHECKING:
    from recipeshare.schemas.recipe import RecipeRequest


_TEXT_FIELDS = ("description", "ingredients", "instructions")


class RecipeFactory:
    """Turns RecipeRequest payloads into Recipe and RecipePatch values."""

    default_type = RecipeType.BASIC

    @classmethod
    def from_request(cls, request: RecipeRequest) -> Recipe:
        """Build a complete recipe for create or full update.

        Raises:
            RecipeValidationError: If the title is missing or blank, the type
                is unknown, or servings is below 1.
        """
        if request.title is None:
            raise RecipeValidationError("title", "is required")

        return Recipe(
            title=cls._parse_title(request.title),
            type=(
                cls._parse_type(request.type)
                if request.type is not None
                else cls.default_type
            ),
            servings=cls._parse_servings(request.servings),
            **cls._parse_text_fields(request),
        )

    @classmethod
    def patch_from_request(cls, request: RecipeRequest) -> RecipePatch:
        """Build a partial recipe holding only the fields that were sent.

        Raises:
            RecipeValidationError: If a supplied field breaks a field rule.
        """
        return RecipePatch(
            title=cls._parse_title(request.title) if request.title is not None else None,
            type=cls._parse_type(request.type) if request.type is not None else None,
            servings=cls._parse_servings(request.servings),
            **cls._parse_text_fields(request),
        )

    @staticmethod
    def _parse_title(title: str) -> str:
        title = title.strip()
        if not title:
            raise RecipeValidationError("title", "must not be blank")
        return title

    @staticmethod
    def _parse_type(value: str) -> RecipeType:
        try:
            return RecipeType(value.strip().upper())
        except ValueError:
            allowed = ", ".join(t.value for t in RecipeType)
            msg = f"unknown recipe type '{value}', expected one of: {allowed}"
            raise RecipeValidationError("type", msg) from None

    @staticmethod
    def _parse_servings(servings: int | None) -> int | None:
        if servings is not None and servings < 1:
            raise RecipeValidationError("servings", "must be at least 1")
        return servings

    @staticmethod
    def _parse_text_fields(request: RecipeRequest) -> dict[str, str | None]:
        fields: dict[str, str | None] = {}
        for name in _TEXT_FIELDS:
            value = getattr(request, name)
            fields[name] = value.strip() if value is not None else None
        return fields
