# recipe_keeper/app/domain/recipes.py
"""
Draft validation and recipe construction.

Both entry points are pure given the injected id factory and clock: they never
touch a store and never log.
"""
from __future__ import annotations

import dataclasses
from typing import Iterable, Optional

from recipe_keeper.app.domain.errors import MissingSourceIdError
from recipe_keeper.app.domain.models import (
    Ingredient,
    Invalid,
    Recipe,
    RecipeDraft,
    SourceType,
    Valid,
    ValidationResult,
)
from recipe_keeper.services.clock import Clock, utc_now_iso
from recipe_keeper.services.ids import IdFactory, make_id

MIN_TITLE_LENGTH = 3

TITLE_ERROR = "Title must be at least 3 characters long."
INGREDIENTS_ERROR = "At least one ingredient is required."
INSTRUCTIONS_ERROR = "At least one instruction step is required."


def _clean_lines(values: Optional[Iterable[str]]) -> list[str]:
    if not values:
        return []
    cleaned: list[str] = []
    for value in values:
        if not isinstance(value, str):
            continue
        text = value.strip()
        if text:
            cleaned.append(text)
    return cleaned


def normalize_ingredient(raw: str, *, id_factory: IdFactory = make_id) -> Ingredient:
    """Turn a free-form ingredient string into an Ingredient."""
    trimmed = raw.strip()
    return Ingredient(
        id=id_factory(),
        name=trimmed.lower(),
        display_name=trimmed,
        amount=None,
        unit=None,
    )


def validate_and_build_recipe(
    draft: RecipeDraft,
    owner_id: str,
    *,
    id_factory: IdFactory = make_id,
    clock: Clock = utc_now_iso,
) -> ValidationResult:
    """
    Validate a draft and build a recipe owned by `owner_id`.

    Every rule is checked so the caller gets all field errors at once.

    Returns:
        Valid(recipe) when the draft passes, Invalid(errors) otherwise.
    """
    if not owner_id:
        raise ValueError("owner_id is required")

    errors: dict[str, str] = {}

    title = draft.title.strip() if isinstance(draft.title, str) else ""
    if len(title) < MIN_TITLE_LENGTH:
        errors["title"] = TITLE_ERROR

    ingredient_lines = _clean_lines(draft.ingredient_strings)
    if not ingredient_lines:
        errors["ingredients"] = INGREDIENTS_ERROR

    instructions = _clean_lines(draft.instructions)
    if not instructions:
        errors["instructions"] = INSTRUCTIONS_ERROR

    if errors:
        return Invalid(errors=errors)

    now = clock()
    recipe = Recipe(
        id=id_factory(),
        title=title,
        owner_id=owner_id,
        source_type=SourceType.OWN,
        source_recipe_id=None,
        ingredients=[normalize_ingredient(line, id_factory=id_factory) for line in ingredient_lines],
        instructions=instructions,
        photo_urls=list(draft.photo_urls or []),
        tags=_clean_lines(draft.tags),
        created_at=now,
        updated_at=now,
    )
    return Valid(recipe=recipe)


def copy_recipe_from_source(
    source: Recipe,
    owner_id: str,
    *,
    id_factory: IdFactory = make_id,
    clock: Clock = utc_now_iso,
) -> Recipe:
    """
    Copy another user's recipe into `owner_id`'s collection.

    The source content is trusted as-is; only identity, ownership, provenance
    and timestamps are replaced.

    Raises:
        MissingSourceIdError: If the source has no id
    """
    if not owner_id:
        raise ValueError("owner_id is required")
    if not getattr(source, "id", None):
        raise MissingSourceIdError()

    now = clock()
    return dataclasses.replace(
        source,
        id=id_factory(),
        owner_id=owner_id,
        source_type=SourceType.SAVED,
        source_recipe_id=source.id,
        created_at=now,
        updated_at=now,
    )
