from __future__ import annotations

import pytest

from backend.recipes.errors import RecipeNotFoundError, RecipeValidationError
from backend.recipes.forms import parse_form, split_delimited
from backend.recipes.models import Difficulty, RecipeForm, RecipeStatus
from backend.recipes.store import RecipeStore, sample_recipes


def _tacos_form(**overrides) -> RecipeForm:
    data = {
        "name": "Tacos",
        "ingredients": "beef, tortilla, cheese",
        "instructions": "cook beef\nassemble",
        "cuisine_type": "Mexican",
        "preparation_time": 20,
        "servings": 2,
        "difficulty": "Easy",
        "tags": "quick",
    }
    data.update(overrides)
    return RecipeForm(**data)


# ── Form conversion ──────────────────────────────────────────────────────


class TestFormConversion:
    def test_split_trims_and_drops_empty_entries(self):
        assert split_delimited(" beef ,, tortilla ,  ", ",") == ["beef", "tortilla"]

    def test_instructions_split_on_lines(self):
        fields = parse_form(_tacos_form(instructions="  cook beef \r\n\n assemble\n"))
        assert fields.instructions == ["cook beef", "assemble"]

    def test_tags_and_metadata(self):
        fields = parse_form(_tacos_form(tags="quick, , spicy", cuisine_type=" Mexican "))
        assert fields.metadata.tags == ["quick", "spicy"]
        assert fields.metadata.cuisine_type == "Mexican"
        assert fields.metadata.difficulty == Difficulty.easy

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("name", "Recipe name is required"),
            ("ingredients", "Ingredients are required"),
            ("instructions", "Instructions are required"),
        ],
    )
    def test_required_fields(self, field, message):
        with pytest.raises(RecipeValidationError, match=message):
            parse_form(_tacos_form(**{field: "   "}))

    def test_delimiters_only_counts_as_missing(self):
        with pytest.raises(RecipeValidationError, match="Ingredients are required"):
            parse_form(_tacos_form(ingredients=" , ,"))


# ── Create / read ────────────────────────────────────────────────────────


def test_create_parses_form_and_defaults_status():
    store = RecipeStore()
    recipe = store.create_recipe(_tacos_form())

    assert recipe.ingredients == ["beef", "tortilla", "cheese"]
    assert recipe.instructions == ["cook beef", "assemble"]
    assert recipe.status == RecipeStatus.to_try
    assert recipe.created_at == recipe.updated_at
    assert recipe.id
    assert len(store) == 1


def test_create_assigns_unique_ids():
    store = RecipeStore()
    ids = {store.create_recipe(_tacos_form()).id for _ in range(20)}
    assert len(ids) == 20


def test_create_validation_error_leaves_store_unchanged():
    store = RecipeStore()
    with pytest.raises(RecipeValidationError):
        store.create_recipe(_tacos_form(name=""))
    assert len(store) == 0


def test_list_preserves_insertion_order():
    store = RecipeStore()
    names = ["First", "Second", "Third"]
    for name in names:
        store.create_recipe(_tacos_form(name=name))
    assert [r.name for r in store.list_recipes()] == names


def test_list_returns_copies():
    store = RecipeStore()
    store.create_recipe(_tacos_form())

    listed = store.list_recipes()
    listed[0].name = "Changed"
    listed[0].ingredients.append("salsa")
    listed.clear()

    stored = store.list_recipes()
    assert len(stored) == 1
    assert stored[0].name == "Tacos"
    assert stored[0].ingredients == ["beef", "tortilla", "cheese"]


def test_get_recipe():
    store = RecipeStore()
    created = store.create_recipe(_tacos_form())
    assert store.get_recipe(created.id) == created


def test_get_missing_recipe():
    with pytest.raises(RecipeNotFoundError):
        RecipeStore().get_recipe("nope")


# ── Update ───────────────────────────────────────────────────────────────


def test_update_keeps_created_at_and_refreshes_updated_at():
    store = RecipeStore()
    created = store.create_recipe(_tacos_form())

    updated = store.update_recipe(created.id, _tacos_form(name="Fish Tacos", ingredients="cod, tortilla"))

    assert updated.id == created.id
    assert updated.name == "Fish Tacos"
    assert updated.ingredients == ["cod", "tortilla"]
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at
    assert store.get_recipe(created.id).name == "Fish Tacos"


def test_update_keeps_position():
    store = RecipeStore()
    first = store.create_recipe(_tacos_form(name="First"))
    store.create_recipe(_tacos_form(name="Second"))

    store.update_recipe(first.id, _tacos_form(name="First, revised"))

    assert [r.name for r in store.list_recipes()] == ["First, revised", "Second"]


def test_full_update_resets_status():
    store = RecipeStore()
    recipe = store.create_recipe(_tacos_form())
    store.update_status(recipe.id, RecipeStatus.favorite)

    updated = store.update_recipe(recipe.id, _tacos_form())

    assert updated.status == RecipeStatus.to_try


def test_update_missing_recipe():
    store = RecipeStore()
    with pytest.raises(RecipeNotFoundError):
        store.update_recipe("nope", _tacos_form())


def test_update_validation_error_leaves_recipe_unchanged():
    store = RecipeStore()
    recipe = store.create_recipe(_tacos_form())
    with pytest.raises(RecipeValidationError):
        store.update_recipe(recipe.id, _tacos_form(instructions=""))
    assert store.get_recipe(recipe.id) == recipe


def test_update_status_changes_only_status_and_updated_at():
    store = RecipeStore()
    recipe = store.create_recipe(_tacos_form())

    updated = store.update_status(recipe.id, "made")

    assert updated.status == RecipeStatus.made
    assert updated.updated_at >= recipe.updated_at
    assert updated.created_at == recipe.created_at
    assert updated.model_dump(exclude={"status", "updated_at"}) == recipe.model_dump(
        exclude={"status", "updated_at"}
    )


def test_status_transitions_are_unrestricted():
    store = RecipeStore()
    recipe = store.create_recipe(_tacos_form())
    for status in ["made", "favorite", "to-try", "favorite", "made"]:
        assert store.update_status(recipe.id, status).status.value == status


def test_update_status_missing_recipe():
    with pytest.raises(RecipeNotFoundError):
        RecipeStore().update_status("nope", RecipeStatus.made)


# ── Delete ───────────────────────────────────────────────────────────────


def test_delete_removes_recipe():
    store = RecipeStore()
    recipe = store.create_recipe(_tacos_form())
    store.delete_recipe(recipe.id)
    assert len(store) == 0
    with pytest.raises(RecipeNotFoundError):
        store.get_recipe(recipe.id)


def test_delete_missing_recipe_leaves_store_unchanged():
    store = RecipeStore.with_samples()
    before = store.list_recipes()

    with pytest.raises(RecipeNotFoundError):
        store.delete_recipe("nope")

    assert store.list_recipes() == before


def test_delete_twice_is_not_found():
    store = RecipeStore()
    recipe = store.create_recipe(_tacos_form())
    store.delete_recipe(recipe.id)
    with pytest.raises(RecipeNotFoundError):
        store.delete_recipe(recipe.id)


# ── Samples ──────────────────────────────────────────────────────────────


def test_with_samples_seeds_demo_recipes():
    store = RecipeStore.with_samples()
    names = [r.name for r in store.list_recipes()]
    assert names == ["Spaghetti Carbonara", "Chicken Teriyaki"]
    for recipe in store.list_recipes():
        assert recipe.updated_at >= recipe.created_at


def test_duplicate_ids_rejected():
    recipe = sample_recipes()[0]
    with pytest.raises(ValueError):
        RecipeStore([recipe, recipe])
