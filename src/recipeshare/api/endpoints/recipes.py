"""Recipe CRUD endpoints.

Provides:
- POST /recipes for creating a recipe
- GET /recipes for listing every recipe
- GET /recipes/{id} for fetching one recipe
- DELETE /recipes/{id} for deleting a recipe
- PUT /recipes/{id} for replacing a recipe
- PATCH /recipes/{id} for partially updating a recipe

Every handler catches failures from the recipe factory and service, logs
them with their traceback, and answers 500 with an empty body. Not-found
answers are 404 with an empty body. Write handlers bind the request title
to the logging context as ``recipe_name`` for the duration of the call.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status

from recipeshare.api.dependencies import get_recipe_service
from recipeshare.observability.logging import bound_context, get_logger
from recipeshare.observability.tracing import add_span_attributes
from recipeshare.schemas.recipe import RecipeRequest, RecipeResponse
from recipeshare.services.recipes import RecipeFactory, RecipeService  # noqa: TC001


logger = get_logger(__name__)

router = APIRouter(tags=["Recipes"])

RecipeId = Annotated[int, Path(alias="id", description="Recipe identifier")]
Service = Annotated[RecipeService, Depends(get_recipe_service)]

_NOT_FOUND = {404: {"description": "Recipe not found"}}
_FAILED = {500: {"description": "Recipe could not be processed"}}


def _empty(status_code: int) -> Response:
    return Response(status_code=status_code)


@router.post(
    "/recipes",
    response_model=RecipeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a recipe",
    responses=_FAILED,
)
async def add_recipe(
    recipe_request: RecipeRequest,
    service: Service,
    request: Request,
    response: Response,
) -> RecipeResponse | Response:
    """Create a recipe and point the Location header at it."""
    with bound_context(recipe_name=recipe_request.title):
        logger.info("Received request: POST {path}", path=request.url.path)
        logger.debug(
            "Create request body: name={name}, type={type}",
            name=recipe_request.title,
            type=recipe_request.type,
        )

        try:
            saved = await service.add_recipe(RecipeFactory.from_request(recipe_request))
        except Exception as e:
            logger.exception("Error occurred while adding recipe: {error}", error=str(e))
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

        response.headers["Location"] = f"{request.url.path.rstrip('/')}/{saved.id}"
        logger.info("Successfully created recipe with id={recipe_id}", recipe_id=saved.id)
        return RecipeResponse.from_recipe(saved)


@router.get(
    "/recipes",
    response_model=list[RecipeResponse],
    summary="List recipes",
    responses=_FAILED,
)
async def get_all_recipes(
    service: Service,
    request: Request,
) -> list[RecipeResponse] | Response:
    """Return every recipe, ordered by id."""
    logger.info("Received request: GET {path}", path=request.url.path)

    try:
        recipes = await service.get_all_recipes()
    except Exception as e:
        logger.exception(
            "Error occurred while retrieving all recipes: {error}", error=str(e)
        )
        return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info("Successfully retrieved {count} recipes", count=len(recipes))
    return [RecipeResponse.from_recipe(recipe) for recipe in recipes]


@router.get(
    "/recipes/{id}",
    response_model=RecipeResponse,
    summary="Get a recipe",
    responses={**_NOT_FOUND, **_FAILED},
)
async def get_recipe_by_id(
    recipe_id: RecipeId,
    service: Service,
    request: Request,
) -> RecipeResponse | Response:
    """Return one recipe, or 404 if it does not exist."""
    logger.info("Received request: GET {path}", path=request.url.path)
    add_span_attributes(recipe_id=recipe_id)

    try:
        recipe = await service.get_recipe_by_id(recipe_id)
    except Exception as e:
        logger.exception(
            "Error occurred while retrieving recipe with id={recipe_id}: {error}",
            recipe_id=recipe_id,
            error=str(e),
        )
        return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

    if recipe is None:
        logger.warning("Recipe not found with id={recipe_id}", recipe_id=recipe_id)
        return _empty(status.HTTP_404_NOT_FOUND)

    logger.info("Successfully found recipe with id={recipe_id}", recipe_id=recipe_id)
    return RecipeResponse.from_recipe(recipe)


@router.delete(
    "/recipes/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a recipe",
    responses={**_NOT_FOUND, **_FAILED},
)
async def delete_recipe(
    recipe_id: RecipeId,
    service: Service,
    request: Request,
) -> Response:
    """Delete a recipe. 204 if deleted, 404 if it did not exist."""
    logger.info("Received request: DELETE {path}", path=request.url.path)
    add_span_attributes(recipe_id=recipe_id)

    try:
        deleted = await service.delete_recipe(recipe_id)
    except Exception as e:
        logger.exception(
            "Error occurred while deleting recipe with id={recipe_id}: {error}",
            recipe_id=recipe_id,
            error=str(e),
        )
        return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

    if not deleted:
        logger.warning(
            "Attempted to delete non-existing recipe with id={recipe_id}",
            recipe_id=recipe_id,
        )
        return _empty(status.HTTP_404_NOT_FOUND)

    logger.info("Successfully deleted recipe with id={recipe_id}", recipe_id=recipe_id)
    return _empty(status.HTTP_204_NO_CONTENT)


@router.put(
    "/recipes/{id}",
    response_model=RecipeResponse,
    summary="Replace a recipe",
    responses={**_NOT_FOUND, **_FAILED},
)
async def update_recipe(
    recipe_id: RecipeId,
    recipe_request: RecipeRequest,
    service: Service,
    request: Request,
) -> RecipeResponse | Response:
    """Replace every field of a recipe except its id."""
    with bound_context(recipe_name=recipe_request.title):
        logger.info("Received request: PUT {path}", path=request.url.path)
        logger.debug(
            "Update request body: name={name}, type={type}",
            name=recipe_request.title,
            type=recipe_request.type,
        )
        add_span_attributes(recipe_id=recipe_id)

        try:
            updated = await service.update_recipe(
                recipe_id, RecipeFactory.from_request(recipe_request)
            )
        except Exception as e:
            logger.exception(
                "Error occurred while updating recipe with id={recipe_id}: {error}",
                recipe_id=recipe_id,
                error=str(e),
            )
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

        if updated is None:
            logger.warning(
                "Cannot update; recipe not found with id={recipe_id}",
                recipe_id=recipe_id,
            )
            return _empty(status.HTTP_404_NOT_FOUND)

        logger.info("Successfully updated recipe with id={recipe_id}", recipe_id=recipe_id)
        return RecipeResponse.from_recipe(updated)


@router.patch(
    "/recipes/{id}",
    response_model=RecipeResponse,
    summary="Partially update a recipe",
    responses={**_NOT_FOUND, **_FAILED},
)
async def patch_recipe(
    recipe_id: RecipeId,
    recipe_request: RecipeRequest,
    service: Service,
    request: Request,
) -> RecipeResponse | Response:
    """Overwrite only the fields present in the request body."""
    with bound_context(recipe_name=recipe_request.title):
        logger.info("Received request: PATCH {path}", path=request.url.path)
        logger.debug(
            "Patch request body: name={name}, type={type}",
            name=recipe_request.title,
            type=recipe_request.type,
        )
        add_span_attributes(recipe_id=recipe_id)

        try:
            patched = await service.patch_recipe(
                recipe_id, RecipeFactory.patch_from_request(recipe_request)
            )
        except Exception as e:
            logger.exception(
                "Error occurred while patching recipe with id={recipe_id}: {error}",
                recipe_id=recipe_id,
                error=str(e),
            )
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

        if patched is None:
            logger.warning(
                "Cannot patch; recipe not found with id={recipe_id}",
                recipe_id=recipe_id,
            )
            return _empty(status.HTTP_404_NOT_FOUND)

        logger.info("Successfully patched recipe with id={recipe_id}", recipe_id=recipe_id)
        return RecipeResponse.from_recipe(patched)
