from __future__ import annotations

import logging
from typing import Any, Optional

from supabase import Client, create_client

from recipe_keeper.app.domain.errors import RecipeStoreConfigurationError, RecipeStoreError
from recipe_keeper.app.domain.models import Ingredient, Recipe, SourceType
from recipe_keeper.app.infra.db.base import RecipeStore

logger = logging.getLogger(__name__)

DEFAULT_TABLE_NAME = "recipes"


def _safe_str(value: object) -> str | None:
    return str(value) if value else None


def _safe_float(value: object) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def _str_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def _ingredient_to_row(ingredient: Ingredient) -> dict[str, Any]:
    return {
        "id": ingredient.id,
        "name": ingredient.name,
        "display_name": ingredient.display_name,
        "amount": ingredient.amount,
        "unit": ingredient.unit,
    }


def _row_to_ingredient(row: dict[str, Any]) -> Ingredient:
    display_name = str(row.get("display_name") or row.get("name") or "")
    return Ingredient(
        id=str(row.get("id") or ""),
        name=str(row.get("name") or display_name.strip().lower()),
        display_name=display_name,
        amount=_safe_float(row.get("amount")),
        unit=_safe_str(row.get("unit")),
    )


def recipe_to_row(recipe: Recipe) -> dict[str, Any]:
    return {
        "id": recipe.id,
        "owner_id": recipe.owner_id,
        "title": recipe.title,
        "source_type": recipe.source_type.value,
        "source_recipe_id": recipe.source_recipe_id,
        "ingredients": [_ingredient_to_row(item) for item in recipe.ingredients],
        "instructions": list(recipe.instructions),
        "photo_urls": list(recipe.photo_urls),
        "tags": list(recipe.tags),
        "created_at": recipe.created_at,
        "updated_at": recipe.updated_at,
    }


def row_to_recipe(row: dict[str, Any]) -> Recipe:
    raw_ingredients = row.get("ingredients") or []
    return Recipe(
        id=str(row["id"]),
        title=str(row.get("title") or ""),
        owner_id=str(row["owner_id"]),
        source_type=SourceType(str(row.get("source_type") or SourceType.OWN.value)),
        source_recipe_id=_safe_str(row.get("source_recipe_id")),
        ingredients=[_row_to_ingredient(item) for item in raw_ingredients if isinstance(item, dict)],
        instructions=_str_list(row.get("instructions")),
        photo_urls=_str_list(row.get("photo_urls")),
        tags=_str_list(row.get("tags")),
        created_at=str(row.get("created_at") or ""),
        updated_at=str(row.get("updated_at") or ""),
    )


def _create_supabase_client(url: Optional[str], key: Optional[str]) -> Client:
    missing: list[str] = []
    if not url:
        missing.append("SUPABASE_URL is required")
    if not key:
        missing.append("SUPABASE_SERVICE_ROLE_KEY is required")
    if missing:
        raise RecipeStoreConfigurationError(missing)
    return create_client(str(url), str(key))


class SupabaseRecipeStore(RecipeStore):
    def __init__(
        self,
        client: Client | None = None,
        *,
        url: Optional[str] = None,
        key: Optional[str] = None,
        table_name: str = DEFAULT_TABLE_NAME,
    ):
        self._client = client or _create_supabase_client(url, key)
        self.table_name = table_name
        logger.info("SupabaseRecipeStore initialized: table=%s", table_name)

    def append(self, recipe: Recipe) -> Recipe:
        try:
            result = self._client.table(self.table_name).insert(recipe_to_row(recipe)).execute()
        except (ConnectionError, TimeoutError) as error:
            logger.error("Network error storing recipe: %s", error)
            raise RecipeStoreError("append", str(error)) from error

        if not result.data:
            raise RecipeStoreError("append", "insert returned no rows")
        return row_to_recipe(result.data[0])

    def list_by_owner(self, owner_id: str) -> list[Recipe]:
        try:
            result = (
                self._client.table(self.table_name)
                .select("*")
                .eq("owner_id", owner_id)
                .order("created_at")
                .execute()
            )
        except (ConnectionError, TimeoutError) as error:
            logger.error("Network error listing recipes for owner: %s", error)
            raise RecipeStoreError("list_by_owner", str(error)) from error

        return [row_to_recipe(row) for row in (result.data or [])]

    def get(self, recipe_id: str) -> Optional[Recipe]:
        try:
            result = (
                self._client.table(self.table_name)
                .select("*")
                .eq("id", recipe_id)
                .limit(1)
                .execute()
            )
        except (ConnectionError, TimeoutError) as error:
            logger.error("Network error getting recipe: %s", error)
            raise RecipeStoreError("get", str(error)) from error

        rows = result.data or []
        return row_to_recipe(rows[0]) if rows else None
