from __future__ import annotations

import threading
from types import SimpleNamespace
from typing import Any

import pytest

from recipe_keeper.app.domain.errors import RecipeStoreConfigurationError, RecipeStoreError
from recipe_keeper.app.domain.models import Ingredient, Recipe, SourceType
from recipe_keeper.app.infra.db.memory_store import InMemoryRecipeStore
from recipe_keeper.app.infra.db.supabase_recipes_repo import (
    SupabaseRecipeStore,
    recipe_to_row,
    row_to_recipe,
)


def make_recipe(recipe_id: str, owner_id: str = "u1", **overrides) -> Recipe:
    values = dict(
        id=recipe_id,
        title=f"Recipe {recipe_id}",
        owner_id=owner_id,
        source_type=SourceType.OWN,
        ingredients=[Ingredient(id=f"{recipe_id}-i", name="garlic", display_name="Garlic")],
        instructions=["Cook."],
        created_at="2024-01-15T10:00:00.000Z",
        updated_at="2024-01-15T10:00:00.000Z",
    )
    values.update(overrides)
    return Recipe(**values)


class TestInMemoryRecipeStore:
    def test_list_by_owner_keeps_insertion_order(self) -> None:
        store = InMemoryRecipeStore()
        store.append(make_recipe("a", "u1"))
        store.append(make_recipe("b", "u2"))
        store.append(make_recipe("c", "u1"))

        assert [recipe.id for recipe in store.list_by_owner("u1")] == ["a", "c"]
        assert [recipe.id for recipe in store.list_by_owner("u2")] == ["b"]
        assert store.list_by_owner("nobody") == []

    def test_get_by_id_across_owners(self) -> None:
        store = InMemoryRecipeStore([make_recipe("a", "u1"), make_recipe("b", "u2")])

        assert store.get("b").owner_id == "u2"
        assert store.get("missing") is None
        assert len(store) == 2

    def test_duplicate_id_is_rejected(self) -> None:
        store = InMemoryRecipeStore([make_recipe("a")])

        with pytest.raises(ValueError):
            store.append(make_recipe("a", "u2"))

        assert store.list_by_owner("u2") == []

    def test_listing_returns_a_snapshot(self) -> None:
        store = InMemoryRecipeStore([make_recipe("a")])
        snapshot = store.list_by_owner("u1")

        store.append(make_recipe("b"))

        assert [recipe.id for recipe in snapshot] == ["a"]

    def test_concurrent_appends(self) -> None:
        store = InMemoryRecipeStore()

        def worker(prefix: str) -> None:
            for index in range(200):
                store.append(make_recipe(f"{prefix}-{index}", "shared"))

        threads = [threading.Thread(target=worker, args=(f"t{n}",)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store.list_by_owner("shared")) == 800


class FakeQuery:
    def __init__(self, client: "FakeSupabaseClient", table: str) -> None:
        self._client = client
        self._table = table
        self._filters: list[tuple[str, Any]] = []
        self._insert: dict[str, Any] | None = None
        self._limit: int | None = None

    def insert(self, row: dict[str, Any]) -> "FakeQuery":
        self._insert = row
        return self

    def select(self, _columns: str) -> "FakeQuery":
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append((column, value))
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeQuery":
        return self

    def limit(self, count: int) -> "FakeQuery":
        self._limit = count
        return self

    def execute(self) -> SimpleNamespace:
        if self._client.fail_with is not None:
            raise self._client.fail_with
        rows = self._client.tables.setdefault(self._table, [])
        if self._insert is not None:
            rows.append(self._insert)
            return SimpleNamespace(data=[self._insert])
        matched = [row for row in rows if all(row.get(col) == val for col, val in self._filters)]
        if self._limit is not None:
            matched = matched[: self._limit]
        return SimpleNamespace(data=matched)


class FakeSupabaseClient:
    def __init__(self) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.fail_with: Exception | None = None

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


class TestRecipeRows:
    def test_row_round_trip_keeps_fields(self) -> None:
        recipe = make_recipe(
            "r2",
            source_type=SourceType.SAVED,
            source_recipe_id="r1",
            photo_urls=["https://example.com/x.jpg"],
            tags=["quick"],
        )

        row = recipe_to_row(recipe)

        assert row["source_type"] == "saved"
        assert row["ingredients"][0]["display_name"] == "Garlic"
        assert row_to_recipe(row) == recipe

    def test_row_with_missing_optional_columns(self) -> None:
        recipe = row_to_recipe({"id": 7, "owner_id": "u1", "title": "Stew"})

        assert recipe.id == "7"
        assert recipe.source_type == SourceType.OWN
        assert recipe.ingredients == []
        assert recipe.tags == []


class TestSupabaseRecipeStore:
    def test_append_list_and_get(self) -> None:
        client = FakeSupabaseClient()
        store = SupabaseRecipeStore(client, table_name="recipes")

        store.append(make_recipe("a", "u1"))
        store.append(make_recipe("b", "u2"))

        assert [recipe.id for recipe in store.list_by_owner("u1")] == ["a"]
        assert store.get("b").owner_id == "u2"
        assert store.get("zzz") is None
        assert len(client.tables["recipes"]) == 2

    def test_network_errors_become_store_errors(self) -> None:
        client = FakeSupabaseClient()
        client.fail_with = ConnectionError("connection refused")
        store = SupabaseRecipeStore(client)

        with pytest.raises(RecipeStoreError) as exc_info:
            store.list_by_owner("u1")

        assert exc_info.value.operation == "list_by_owner"

    def test_missing_credentials(self) -> None:
        with pytest.raises(RecipeStoreConfigurationError) as exc_info:
            SupabaseRecipeStore(url=None, key=None)

        assert len(exc_info.value.errors) == 2
