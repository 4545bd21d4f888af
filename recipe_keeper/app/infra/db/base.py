# recipe_keeper/app/infra/db/base.py
"""
Abstract base class for recipe storage.
This interface allows easy swapping between different storage backends.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from recipe_keeper.app.domain.models import Recipe


class RecipeStore(ABC):
    """
    Abstract interface for recipe persistence.

    Implementations:
    - InMemoryRecipeStore: process-local, used for tests and local runs
    - SupabaseRecipeStore: Postgres-backed through Supabase
    """

    @abstractmethod
    def append(self, recipe: Recipe) -> Recipe:
        """
        Store a fully built recipe.

        Readers must see either the store before the append or after it,
        never a partially written record.

        Args:
            recipe: The recipe to store

        Returns:
            The stored recipe
        """
        pass

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> list[Recipe]:
        """
        List the recipes owned by a user, oldest first.

        Args:
            owner_id: The owner

        Returns:
            List of recipes
        """
        pass

    @abstractmethod
    def get(self, recipe_id: str) -> Optional[Recipe]:
        """
        Get a recipe by its id, regardless of owner.

        Args:
            recipe_id: The recipe id

        Returns:
            The recipe, or None if not found
        """
        pass
