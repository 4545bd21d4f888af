from __future__ import annotations

import pytest

from recipe_keeper.app.domain.errors import RecipeValidationError
from recipe_keeper.app.domain.models import RecipeDraft, SourceType
from recipe_keeper.app.infra.db.memory_store import InMemoryRecipeStore
from recipe_keeper.services.recipe_box import (
    SAMPLE_OTHER_USER_RECIPE,
    RecipeBox,
    draft_from_form,
    render_recipe,
    render_recipe_list,
    split_instruction_text,
)


class TestFormParsing:
    def test_draft_from_form(self) -> None:
        draft = draft_from_form(
            "Garlic Chicken",
            "chicken, garlic, , salt",
            "Marinate the chicken.\n\n  Bake for 30 minutes.  \n",
            " https://example.com/dish.jpg ",
        )

        assert draft.title == "Garlic Chicken"
        assert draft.ingredient_strings == ["chicken", "garlic", "salt"]
        assert draft.instructions == ["Marinate the chicken.", "Bake for 30 minutes."]
        assert draft.photo_urls == ["https://example.com/dish.jpg"]
        assert draft.tags == []

    def test_blank_photo_is_omitted(self) -> None:
        assert draft_from_form("Soup", "leek", "Simmer.").photo_urls == []

    def test_split_instruction_text_handles_windows_newlines(self) -> None:
        assert split_instruction_text("one\r\ntwo\r\n") == ["one", "two"]


class TestRecipeBox:
    def test_requires_user(self) -> None:
        with pytest.raises(ValueError):
            RecipeBox("")

    def test_add_recipe(self) -> None:
        box = RecipeBox("user-123")

        recipe = box.add_recipe_from_form("Garlic Chicken", "Chicken, Garlic", "Bake.")

        assert box.recipes == [recipe]
        assert recipe.owner_id == "user-123"

    def test_add_invalid_recipe_raises_with_all_errors(self) -> None:
        box = RecipeBox("user-123")

        with pytest.raises(RecipeValidationError) as exc_info:
            box.add_recipe(RecipeDraft(title="Hi"))

        assert set(exc_info.value.errors) == {"title", "ingredients", "instructions"}
        assert box.recipes == []

    def test_save_sample_recipe(self) -> None:
        box = RecipeBox("user-123")

        copy = box.save_recipe_from_user(SAMPLE_OTHER_USER_RECIPE)

        assert copy.owner_id == "user-123"
        assert copy.source_type == SourceType.SAVED
        assert copy.source_recipe_id == "other-1"
        assert box.has_saved("other-1") is True

    def test_only_own_recipes_are_visible_in_a_shared_store(self) -> None:
        store = InMemoryRecipeStore()
        alice = RecipeBox("alice", store=store)
        bob = RecipeBox("bob", store=store)
        alice.add_recipe_from_form("Garlic Rice", "rice, garlic", "Cook.")

        assert bob.recipes == []
        assert bob.search_text("garlic") == []
        assert len(alice.search_text("GARLIC")) == 1

    def test_find_by_ingredients_modes(self) -> None:
        box = RecipeBox("user-123")
        box.save_recipe_from_user(SAMPLE_OTHER_USER_RECIPE)
        box.add_recipe_from_form("Garlic Bread", "Bread, Garlic", "Toast.")

        assert [r.title for r in box.find_by_ingredients(["garlic", "tomato"])] == [
            "Tomato Pasta",
            "Garlic Bread",
        ]
        assert [r.title for r in box.find_by_ingredients(["garlic", "tomato"], "all")] == [
            "Tomato Pasta",
        ]
        assert box.search_text(" , ") == []


class TestRendering:
    def test_render_saved_recipe(self) -> None:
        box = RecipeBox("user-123")
        copy = box.save_recipe_from_user(SAMPLE_OTHER_USER_RECIPE)

        text = render_recipe(copy)

        assert text.splitlines()[0] == "Tomato Pasta [Saved from another user]"
        assert "Ingredients: Pasta, Tomato, Garlic" in text
        assert "  1. Boil pasta until al dente." in text
        assert "Photo: " in text

    def test_render_own_recipe(self) -> None:
        box = RecipeBox("user-123")
        recipe = box.add_recipe_from_form("Garlic Bread", "Bread, Garlic", "Toast.")

        assert "[Your recipe]" in render_recipe(recipe)
        assert "Photo:" not in render_recipe(recipe)

    def test_render_empty_list(self) -> None:
        text = render_recipe_list([])

        assert text.startswith("Your Recipes (0)")
        assert "No recipes yet" in text
