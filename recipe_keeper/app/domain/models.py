# recipe_keeper/app/domain/models.py
"""
Domain models for the recipe keeper.
These are pure data structures with no infrastructure dependencies.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Optional, Union


class SourceType(str, Enum):
    """Where a stored recipe came from."""
    OWN = "own"
    SAVED = "saved"


class MatchMode(str, Enum):
    """Ingredient search policy."""
    ANY = "any"
    ALL = "all"


@dataclass(frozen=True)
class Ingredient:
    """
    A normalized ingredient line.

    `name` is the lowercase search key, `display_name` keeps the original case
    for presentation.
    """
    id: str
    name: str
    display_name: str
    amount: Optional[float] = None
    unit: Optional[str] = None


@dataclass(frozen=True)
class Recipe:
    """
    A stored recipe. Only built by the draft validator or by copying
    another user's recipe.
    """
    id: str
    title: str
    owner_id: str
    source_type: SourceType
    ingredients: list[Ingredient]
    instructions: list[str]
    created_at: str
    updated_at: str
    source_recipe_id: Optional[str] = None
    photo_urls: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)

    @property
    def ingredient_names(self) -> set[str]:
        return {ingredient.name for ingredient in self.ingredients}

    @property
    def is_saved(self) -> bool:
        return self.source_type == SourceType.SAVED


@dataclass
class RecipeDraft:
    """Unvalidated recipe input as supplied by a caller."""
    title: Optional[str] = None
    ingredient_strings: Optional[list[str]] = None
    instructions: Optional[list[str]] = None
    photo_urls: Optional[list[str]] = None
    tags: Optional[list[str]] = None


@dataclass(frozen=True)
class Valid:
    recipe: Recipe
    ok: Literal[True] = True


@dataclass(frozen=True)
class Invalid:
    errors: dict[str, str]
    ok: Literal[False] = False


ValidationResult = Union[Valid, Invalid]
