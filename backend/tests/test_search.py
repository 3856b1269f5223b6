from __future__ import annotations

from datetime import datetime, timezone

import pytest

from backend.recipes.models import (
    Difficulty,
    Recipe,
    RecipeMetadata,
    RecipeStatus,
    SearchFilters,
)
from backend.recipes.search import search_recipes

_CREATED = datetime(2024, 3, 1, tzinfo=timezone.utc)


def _recipe(
    recipe_id: str,
    name: str,
    ingredients: list[str],
    cuisine: str,
    prep: int,
    status: RecipeStatus = RecipeStatus.to_try,
    tags: list[str] | None = None,
) -> Recipe:
    return Recipe(
        id=recipe_id,
        name=name,
        ingredients=ingredients,
        instructions=["cook"],
        metadata=RecipeMetadata(
            cuisine_type=cuisine,
            preparation_time=prep,
            servings=2,
            difficulty=Difficulty.easy,
            tags=tags or [],
        ),
        status=status,
        created_at=_CREATED,
        updated_at=_CREATED,
    )


RECIPES = [
    _recipe("1", "Spaghetti Carbonara", ["spaghetti", "pancetta", "eggs"], "Italian", 30,
            RecipeStatus.favorite, ["pasta", "comfort-food"]),
    _recipe("2", "Chicken Teriyaki", ["chicken breasts", "soy sauce"], "Japanese", 25,
            RecipeStatus.made, ["asian"]),
    _recipe("3", "Margherita Pizza", ["dough", "tomato", "mozzarella"], "italian", 45,
            RecipeStatus.to_try, ["vegetarian"]),
    _recipe("4", "Tacos", ["beef", "tortilla", "cheese"], "Mexican", 20,
            RecipeStatus.to_try, ["quick"]),
]


def _ids(recipes: list[Recipe]) -> list[str]:
    return [r.id for r in recipes]


def test_no_filters_returns_everything_in_order():
    assert _ids(search_recipes(RECIPES, SearchFilters())) == ["1", "2", "3", "4"]
    assert _ids(search_recipes(RECIPES)) == ["1", "2", "3", "4"]


def test_empty_collection():
    assert search_recipes([], SearchFilters(query="anything")) == []


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("carbonara", ["1"]),  # name
        ("SOY", ["2"]),  # ingredient
        ("vegetarian", ["3"]),  # tag
        ("mexican", ["4"]),  # cuisine type
        ("ital", ["1", "3"]),  # cuisine substring
        ("zzz", []),
    ],
)
def test_query_matches_name_ingredient_tag_or_cuisine(query, expected):
    assert _ids(search_recipes(RECIPES, SearchFilters(query=query))) == expected


def test_query_is_case_insensitive():
    upper = search_recipes(RECIPES, SearchFilters(query="ITALIAN"))
    lower = search_recipes(RECIPES, SearchFilters(query="italian"))
    assert _ids(upper) == _ids(lower) == ["1", "3"]


def test_query_is_not_a_regex():
    assert search_recipes(RECIPES, SearchFilters(query=".*")) == []


def test_cuisine_type_is_exact_case_insensitive():
    assert _ids(search_recipes(RECIPES, SearchFilters(cuisine_type="ITALIAN"))) == ["1", "3"]
    assert search_recipes(RECIPES, SearchFilters(cuisine_type="ital")) == []


def test_status_filter():
    assert _ids(search_recipes(RECIPES, SearchFilters(status="to-try"))) == ["3", "4"]
    assert _ids(search_recipes(RECIPES, SearchFilters(status=RecipeStatus.made))) == ["2"]


def test_max_prep_time_is_inclusive():
    assert _ids(search_recipes(RECIPES, SearchFilters(max_prep_time=25))) == ["2", "4"]
    assert _ids(search_recipes(RECIPES, SearchFilters(max_prep_time=19))) == []


def test_criteria_combine_with_and():
    filters = SearchFilters(query="a", cuisine_type="italian", status="favorite", max_prep_time=30)
    assert _ids(search_recipes(RECIPES, filters)) == ["1"]


def test_adding_criteria_never_grows_the_result():
    steps = [
        SearchFilters(),
        SearchFilters(query="i"),
        SearchFilters(query="i", cuisine_type="italian"),
        SearchFilters(query="i", cuisine_type="italian", max_prep_time=40),
        SearchFilters(query="i", cuisine_type="italian", max_prep_time=40, status="made"),
    ]
    sizes = [len(search_recipes(RECIPES, f)) for f in steps]
    assert sizes == sorted(sizes, reverse=True)


def test_search_does_not_mutate_input():
    before = [r.model_copy(deep=True) for r in RECIPES]
    search_recipes(RECIPES, SearchFilters(query="chicken", max_prep_time=10))
    assert RECIPES == before
