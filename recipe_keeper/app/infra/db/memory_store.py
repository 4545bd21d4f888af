from __future__ import annotations

import logging
import threading
from typing import Optional

from recipe_keeper.app.domain.models import Recipe
from recipe_keeper.app.infra.db.base import RecipeStore

logger = logging.getLogger(__name__)


class InMemoryRecipeStore(RecipeStore):
    """Arena of recipes keyed by id with a per-owner index. Lives as long as the process."""

    def __init__(self, recipes: Optional[list[Recipe]] = None) -> None:
        self._lock = threading.Lock()
        self._by_id: dict[str, Recipe] = {}
        self._by_owner: dict[str, list[str]] = {}
        for recipe in recipes or []:
            self.append(recipe)

    def append(self, recipe: Recipe) -> Recipe:
        with self._lock:
            if recipe.id in self._by_id:
                raise ValueError(f"Duplicate recipe id: {recipe.id}")
            self._by_id[recipe.id] = recipe
            self._by_owner.setdefault(recipe.owner_id, []).append(recipe.id)
        logger.debug("Stored recipe: id=%s, owner=%s", recipe.id, recipe.owner_id)
        return recipe

    def list_by_owner(self, owner_id: str) -> list[Recipe]:
        with self._lock:
            return [self._by_id[recipe_id] for recipe_id in self._by_owner.get(owner_id, [])]

    def get(self, recipe_id: str) -> Optional[Recipe]:
        with self._lock:
            return self._by_id.get(recipe_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)
