# recipe_keeper/app/deps.py (mantém o singleton do store, mas expõe como dependência)

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Request
from pydantic import BaseModel

from recipe_keeper.app.config import settings
from recipe_keeper.app.infra.db.base import RecipeStore
from recipe_keeper.app.infra.db.memory_store import InMemoryRecipeStore
from recipe_keeper.app.infra.db.supabase_recipes_repo import SupabaseRecipeStore
from recipe_keeper.app.services.recipe_service import RecipeService

logger = logging.getLogger(__name__)

_store: RecipeStore | None = None


def build_recipe_store() -> RecipeStore:
    if settings.RECIPE_STORE_BACKEND == "supabase":
        return SupabaseRecipeStore(
            url=str(settings.SUPABASE_URL) if settings.SUPABASE_URL else None,
            key=settings.SUPABASE_SERVICE_ROLE_KEY,
            table_name=settings.SUPABASE_RECIPES_TABLE,
        )
    return InMemoryRecipeStore()


def get_recipe_store() -> RecipeStore:
    global _store
    if _store is None:
        _store = build_recipe_store()
        logger.info("Recipe store backend: %s", settings.RECIPE_STORE_BACKEND)
    return _store


def get_recipe_service(store: RecipeStore = Depends(get_recipe_store)) -> RecipeService:
    return RecipeService(store)


class CurrentUser(BaseModel):
    id: str


def resolve_owner_id(
    header_value: Optional[str],
    query_value: Optional[str],
    default: str,
) -> str:
    """Header first, then query string, then the configured fallback."""
    for candidate in (header_value, query_value):
        if candidate and candidate.strip():
            return candidate.strip()
    return default


async def get_current_user(request: Request) -> CurrentUser:
    """
    Lê o usuário de `x-user-id` (header) ou `ownerId` (query string).
    Sem identidade, usa DEFAULT_OWNER_ID da configuração.
    """
    owner_id = resolve_owner_id(
        request.headers.get(settings.OWNER_HEADER),
        request.query_params.get("ownerId"),
        settings.DEFAULT_OWNER_ID,
    )
    return CurrentUser(id=owner_id)
