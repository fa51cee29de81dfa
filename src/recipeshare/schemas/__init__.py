"""API request and response schemas."""

from recipeshare.schemas.base import APIRequest, APIResponse
from recipeshare.schemas.recipe import RecipeRequest, RecipeResponse


__all__ = [
    "APIRequest",
    "APIResponse",
    "RecipeRequest",
    "RecipeResponse",
]
