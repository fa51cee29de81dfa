"""Recipe domain exceptions.

The recipe endpoints catch every exception at the handler boundary and
answer 500, so these types exist for logging and for callers outside the
HTTP layer that want to tell validation problems from storage faults.
"""

from __future__ import annotations


class RecipeError(Exception):
    """Base exception for recipe operations."""


class RecipeValidationError(RecipeError):
    """Raised by the factory when a request cannot become a recipe."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class RecipeStorageError(RecipeError):
    """Raised when the persistence backend fails."""
