# recipe_keeper/app/services/recipe_service.py
"""
Recipe service.
Connects the draft validator, the copy operation and the ingredient matcher
to a recipe store.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from recipe_keeper.app.domain.errors import RecipeNotFoundError, RecipeValidationError
from recipe_keeper.app.domain.models import Invalid, MatchMode, Recipe, RecipeDraft
from recipe_keeper.app.domain.recipes import copy_recipe_from_source, validate_and_build_recipe
from recipe_keeper.app.domain.search import normalize_match_mode, search_recipes_by_ingredients
from recipe_keeper.app.infra.db.base import RecipeStore
from recipe_keeper.services.clock import Clock, utc_now_iso
from recipe_keeper.services.ids import IdFactory, make_id

logger = logging.getLogger(__name__)


class RecipeService:
    """
    Service for managing a user's recipe collection.

    Responsibilities:
    - Validate drafts and store the resulting recipes
    - Copy recipes from other users
    - List and search the recipes a user owns
    """

    def __init__(
        self,
        store: RecipeStore,
        *,
        id_factory: IdFactory = make_id,
        clock: Clock = utc_now_iso,
    ):
        self._store = store
        self._id_factory = id_factory
        self._clock = clock

    def create_recipe(self, draft: RecipeDraft, owner_id: str) -> Recipe:
        """
        Validate a draft and store it for `owner_id`.

        Raises:
            RecipeValidationError: If any field is invalid; nothing is stored
        """
        result = validate_and_build_recipe(
            draft,
            owner_id,
            id_factory=self._id_factory,
            clock=self._clock,
        )
        if isinstance(result, Invalid):
            logger.info("Rejected recipe draft: owner=%s, fields=%s", owner_id, sorted(result.errors))
            raise RecipeValidationError(result.errors)

        recipe = self._store.append(result.recipe)
        logger.info("Created recipe: id=%s, owner=%s", recipe.id, owner_id)
        return recipe

    def list_recipes(self, owner_id: str) -> list[Recipe]:
        return self._store.list_by_owner(owner_id)

    def save_from_user(self, source: Recipe, owner_id: str) -> Recipe:
        """
        Copy `source` into the collection of `owner_id`.

        Raises:
            MissingSourceIdError: If the source has no id
        """
        copy = copy_recipe_from_source(
            source,
            owner_id,
            id_factory=self._id_factory,
            clock=self._clock,
        )
        stored = self._store.append(copy)
        logger.info(
            "Saved recipe from user: id=%s, source=%s, owner=%s",
            stored.id,
            source.id,
            owner_id,
        )
        return stored

    def save_from_store(self, source_recipe_id: str, owner_id: str) -> Recipe:
        """
        Copy a recipe already in the store, looked up by id.

        Raises:
            RecipeNotFoundError: If no recipe has that id
        """
        source = self._store.get(source_recipe_id)
        if source is None:
            raise RecipeNotFoundError(source_recipe_id)
        return self.save_from_user(source, owner_id)

    def search(
        self,
        owner_id: str,
        query: Optional[Iterable[str]],
        mode: Optional[str | MatchMode] = MatchMode.ANY,
    ) -> list[Recipe]:
        match_mode = normalize_match_mode(mode)
        terms = list(query or [])
        results = search_recipes_by_ingredients(self._store.list_by_owner(owner_id), terms, match_mode)
        logger.info(
            "Ingredient search: owner=%s, terms=%d, mode=%s, matches=%d",
            owner_id,
            len(terms),
            match_mode.value,
            len(results),
        )
        return results
