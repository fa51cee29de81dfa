"""FastAPI dependencies for service access.

Services are created during application startup and stored in
``app.state``; these dependencies hand them to route handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

from recipeshare.core.exceptions import ServiceUnavailableError


if TYPE_CHECKING:
    from recipeshare.services.recipes import RecipeService


async def get_recipe_service(request: Request) -> RecipeService:
    """Get the recipe service from app state.

    Raises:
        ServiceUnavailableError: 503 if the service is not initialized.
    """
    service: RecipeService | None = getattr(request.app.state, "recipe_service", None)
    if service is None:
        raise ServiceUnavailableError("Recipe service not available")
    return service
