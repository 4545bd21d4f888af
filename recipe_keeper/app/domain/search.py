# recipe_keeper/app/domain/search.py
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from recipe_keeper.app.domain.models import MatchMode, Recipe


def normalize_match_mode(value: Optional[str | MatchMode]) -> MatchMode:
    """Only the exact value "all" selects "all" mode; anything else searches in "any" mode."""
    if isinstance(value, MatchMode):
        return value
    if value == MatchMode.ALL.value:
        return MatchMode.ALL
    return MatchMode.ANY


def normalize_query(terms: Optional[Iterable[str]]) -> set[str]:
    if not terms:
        return set()
    return {
        term.strip().lower()
        for term in terms
        if isinstance(term, str) and term.strip()
    }


def parse_ingredient_query(text: Optional[str]) -> list[str]:
    """Split "garlic, tomato" into ["garlic", "tomato"]."""
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def search_recipes_by_ingredients(
    recipes: Sequence[Recipe],
    query: Optional[Iterable[str]],
    mode: Optional[str | MatchMode] = MatchMode.ANY,
) -> list[Recipe]:
    """
    Filter recipes by ingredient name, case-insensitively.

    "any" keeps recipes sharing at least one ingredient with the query, "all"
    keeps recipes containing every query term. An empty query matches nothing.
    Input order is preserved.
    """
    query_set = normalize_query(query)
    if not query_set:
        return []

    match_mode = normalize_match_mode(mode)
    results: list[Recipe] = []
    for recipe in recipes:
        match_count = len(query_set & recipe.ingredient_names)
        if match_mode == MatchMode.ALL:
            if match_count == len(query_set):
                results.append(recipe)
        elif match_count > 0:
            results.append(recipe)
    return results
