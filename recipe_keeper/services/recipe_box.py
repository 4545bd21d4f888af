# recipe_keeper/services/recipe_box.py
"""
Estado de sessão da "Recipe Box": guarda as receitas do usuário atual,
converte os campos do formulário em rascunhos e renderiza cartões em texto.
Usa o mesmo RecipeService da API.
"""
from __future__ import annotations

from typing import Iterable, Optional

from recipe_keeper.app.domain.models import (
    Ingredient,
    MatchMode,
    Recipe,
    RecipeDraft,
    SourceType,
)
from recipe_keeper.app.domain.search import parse_ingredient_query
from recipe_keeper.app.infra.db.base import RecipeStore
from recipe_keeper.app.infra.db.memory_store import InMemoryRecipeStore
from recipe_keeper.app.services.recipe_service import RecipeService
from recipe_keeper.services.clock import utc_now_iso

_SAMPLE_CREATED_AT = utc_now_iso()

# Receita de outro usuário, usada na demo de "salvar receita".
SAMPLE_OTHER_USER_RECIPE = Recipe(
    id="other-1",
    title="Tomato Pasta",
    owner_id="user-999",
    source_type=SourceType.OWN,
    source_recipe_id=None,
    ingredients=[
        Ingredient(id="ing-1", name="pasta", display_name="Pasta"),
        Ingredient(id="ing-2", name="tomato", display_name="Tomato"),
        Ingredient(id="ing-3", name="garlic", display_name="Garlic"),
    ],
    instructions=[
        "Boil pasta until al dente.",
        "Cook tomatoes and garlic in a pan.",
        "Mix pasta with the sauce.",
    ],
    photo_urls=["https://example.com/photos/tomato-garlic-pasta.jpg"],
    tags=["italian", "quick"],
    created_at=_SAMPLE_CREATED_AT,
    updated_at=_SAMPLE_CREATED_AT,
)


def split_instruction_text(text: Optional[str]) -> list[str]:
    """Um passo por linha."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def draft_from_form(
    title: str,
    ingredient_text: str,
    instruction_text: str,
    photo_url: str = "",
) -> RecipeDraft:
    photo = photo_url.strip()
    return RecipeDraft(
        title=title,
        ingredient_strings=parse_ingredient_query(ingredient_text),
        instructions=split_instruction_text(instruction_text),
        photo_urls=[photo] if photo else [],
        tags=[],
    )


def source_label(recipe: Recipe) -> str:
    return "Saved from another user" if recipe.is_saved else "Your recipe"


def render_recipe(recipe: Recipe) -> str:
    lines = [f"{recipe.title} [{source_label(recipe)}]"]
    lines.append("Ingredients: " + ", ".join(item.display_name for item in recipe.ingredients))
    if recipe.photo_urls:
        lines.append(f"Photo: {recipe.photo_urls[0]}")
    if recipe.instructions:
        lines.append("Instructions:")
        lines.extend(f"  {index}. {step}" for index, step in enumerate(recipe.instructions, start=1))
    if recipe.tags:
        lines.append("Tags: " + ", ".join(recipe.tags))
    return "\n".join(lines)


def render_recipe_list(recipes: list[Recipe]) -> str:
    header = f"Your Recipes ({len(recipes)})"
    if not recipes:
        return header + "\nNo recipes yet. Add one above or save the external one."
    return header + "\n\n" + "\n\n".join(render_recipe(recipe) for recipe in recipes)


class RecipeBox:
    """Coleção de receitas do usuário atual durante uma sessão."""

    def __init__(
        self,
        current_user_id: str,
        *,
        store: Optional[RecipeStore] = None,
        service: Optional[RecipeService] = None,
    ) -> None:
        if not current_user_id:
            raise ValueError("current_user_id is required")
        self.current_user_id = current_user_id
        self._service = service or RecipeService(store or InMemoryRecipeStore())

    @property
    def recipes(self) -> list[Recipe]:
        return self._service.list_recipes(self.current_user_id)

    def add_recipe(self, draft: RecipeDraft) -> Recipe:
        """Raises RecipeValidationError with every invalid field."""
        return self._service.create_recipe(draft, self.current_user_id)

    def add_recipe_from_form(
        self,
        title: str,
        ingredient_text: str,
        instruction_text: str,
        photo_url: str = "",
    ) -> Recipe:
        return self.add_recipe(draft_from_form(title, ingredient_text, instruction_text, photo_url))

    def save_recipe_from_user(self, source: Recipe) -> Recipe:
        return self._service.save_from_user(source, self.current_user_id)

    def has_saved(self, source_recipe_id: str) -> bool:
        return any(recipe.source_recipe_id == source_recipe_id for recipe in self.recipes)

    def find_by_ingredients(
        self,
        ingredient_names: Iterable[str],
        mode: str | MatchMode = MatchMode.ANY,
    ) -> list[Recipe]:
        return self._service.search(self.current_user_id, ingredient_names, mode)

    def search_text(self, search_text: str, mode: str | MatchMode = MatchMode.ANY) -> list[Recipe]:
        return self.find_by_ingredients(parse_ingredient_query(search_text), mode)
