# recipe_keeper/app/routers/recipes.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from recipe_keeper.app.deps import CurrentUser, get_current_user, get_recipe_service
from recipe_keeper.app.domain.errors import (
    MissingSourceIdError,
    RecipeNotFoundError,
    RecipeStoreError,
    RecipeValidationError,
)
from recipe_keeper.app.domain.search import parse_ingredient_query
from recipe_keeper.app.schemas.recipes import (
    RecipeCreate,
    RecipeErrorResponse,
    RecipeResponse,
    SaveFromUserRequest,
)
from recipe_keeper.app.services.recipe_service import RecipeService

log = logging.getLogger("recipes")
router = APIRouter(prefix="/recipes", tags=["recipes"])


def _store_unavailable(exc: RecipeStoreError) -> HTTPException:
    log.error("Recipe store failure: %s", exc)
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))


@router.post(
    "",
    response_model=RecipeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": RecipeErrorResponse}},
)
async def create_recipe(
    payload: RecipeCreate,
    user: CurrentUser = Depends(get_current_user),
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    try:
        recipe = service.create_recipe(payload.to_draft(), user.id)
    except RecipeValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(exc), "errors": exc.errors},
        )
    except RecipeStoreError as exc:
        raise _store_unavailable(exc)
    return RecipeResponse.from_domain(recipe)


@router.get("", response_model=list[RecipeResponse])
async def list_recipes(
    user: CurrentUser = Depends(get_current_user),
    service: RecipeService = Depends(get_recipe_service),
) -> list[RecipeResponse]:
    try:
        recipes = service.list_recipes(user.id)
    except RecipeStoreError as exc:
        raise _store_unavailable(exc)
    return [RecipeResponse.from_domain(recipe) for recipe in recipes]


@router.post(
    "/save-from-user",
    response_model=RecipeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": RecipeErrorResponse},
        404: {"model": RecipeErrorResponse},
    },
)
async def save_from_user(
    payload: SaveFromUserRequest,
    user: CurrentUser = Depends(get_current_user),
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeResponse:
    try:
        if payload.sourceRecipe is not None:
            recipe = service.save_from_user(payload.sourceRecipe.to_domain(), user.id)
        elif payload.sourceRecipeId:
            recipe = service.save_from_store(payload.sourceRecipeId, user.id)
        else:
            raise MissingSourceIdError()
    except MissingSourceIdError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"message": str(exc)})
    except RecipeNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail={"message": str(exc)})
    except RecipeStoreError as exc:
        raise _store_unavailable(exc)
    return RecipeResponse.from_domain(recipe)


@router.get("/search", response_model=list[RecipeResponse])
async def search_recipes(
    ingredients: Optional[str] = Query(default=None, description="garlic,tomato"),
    mode: Optional[str] = Query(default=None, description="any | all"),
    user: CurrentUser = Depends(get_current_user),
    service: RecipeService = Depends(get_recipe_service),
) -> list[RecipeResponse]:
    try:
        results = service.search(user.id, parse_ingredient_query(ingredients), mode)
    except RecipeStoreError as exc:
        raise _store_unavailable(exc)
    return [RecipeResponse.from_domain(recipe) for recipe in results]
