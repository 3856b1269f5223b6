from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable

from .errors import RecipeNotFoundError
from .forms import parse_form
from .models import (
    Difficulty,
    Recipe,
    RecipeForm,
    RecipeMetadata,
    RecipeStatus,
    SearchFilters,
)
from .search import search_recipes

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


class RecipeStore:
    """
    In-memory recipe collection kept in insertion order.

    Constructed once by the application factory and handed to the routes
    through a dependency. Every read returns copies, so callers only change
    stored recipes through the methods below.
    """

    def __init__(self, recipes: Iterable[Recipe] | None = None) -> None:
        self._recipes: list[Recipe] = []
        for recipe in recipes or []:
            if any(r.id == recipe.id for r in self._recipes):
                raise ValueError(f"Duplicate recipe id: {recipe.id}")
            self._recipes.append(recipe.model_copy(deep=True))

    @classmethod
    def with_samples(cls) -> RecipeStore:
        return cls(sample_recipes())

    def __len__(self) -> int:
        return len(self._recipes)

    def _index_of(self, recipe_id: str) -> int:
        for index, recipe in enumerate(self._recipes):
            if recipe.id == recipe_id:
                return index
        raise RecipeNotFoundError(recipe_id)

    # ── Reads ────────────────────────────────────────────────────────────

    def list_recipes(self) -> list[Recipe]:
        return [r.model_copy(deep=True) for r in self._recipes]

    def get_recipe(self, recipe_id: str) -> Recipe:
        """Return a single recipe or raise :class:`RecipeNotFoundError`."""
        return self._recipes[self._index_of(recipe_id)].model_copy(deep=True)

    def search(self, filters: SearchFilters | None = None) -> list[Recipe]:
        return search_recipes(self.list_recipes(), filters)

    # ── Mutations ────────────────────────────────────────────────────────

    def create_recipe(self, form: RecipeForm) -> Recipe:
        fields = parse_form(form)
        now = _now()
        recipe = Recipe(
            id=_new_id(),
            name=fields.name,
            ingredients=fields.ingredients,
            instructions=fields.instructions,
            metadata=fields.metadata,
            status=RecipeStatus.to_try,
            created_at=now,
            updated_at=now,
        )
        self._recipes.append(recipe)
        logger.info("Created recipe %s (%s)", recipe.id, recipe.name)
        return recipe.model_copy(deep=True)

    def update_recipe(self, recipe_id: str, form: RecipeForm) -> Recipe:
        """
        Replace every editable field of an existing recipe.

        ``created_at`` is kept, ``updated_at`` is refreshed and the status
        goes back to ``to-try``, the same as a freshly created recipe.
        """
        index = self._index_of(recipe_id)
        fields = parse_form(form)
        existing = self._recipes[index]
        recipe = Recipe(
            id=existing.id,
            name=fields.name,
            ingredients=fields.ingredients,
            instructions=fields.instructions,
            metadata=fields.metadata,
            status=RecipeStatus.to_try,
            created_at=existing.created_at,
            updated_at=max(_now(), existing.created_at),
        )
        self._recipes[index] = recipe
        logger.info("Updated recipe %s", recipe_id)
        return recipe.model_copy(deep=True)

    def update_status(self, recipe_id: str, status: RecipeStatus | str) -> Recipe:
        recipe = self._recipes[self._index_of(recipe_id)]
        recipe.status = RecipeStatus(status)
        recipe.updated_at = max(_now(), recipe.created_at)
        logger.info("Recipe %s marked %s", recipe_id, recipe.status.value)
        return recipe.model_copy(deep=True)

    def delete_recipe(self, recipe_id: str) -> None:
        del self._recipes[self._index_of(recipe_id)]
        logger.info("Deleted recipe %s", recipe_id)


def sample_recipes() -> list[Recipe]:
    """The two demo recipes a fresh collection starts with."""
    return [
        Recipe(
            id=_new_id(),
            name="Spaghetti Carbonara",
            ingredients=["400g spaghetti", "200g pancetta", "4 eggs", "100g parmesan", "black pepper"],
            instructions=[
                "Cook spaghetti in salted water until al dente",
                "Fry pancetta until crispy",
                "Beat eggs with parmesan and pepper",
                "Mix hot pasta with egg mixture off heat",
                "Add pancetta and serve immediately",
            ],
            metadata=RecipeMetadata(
                cuisine_type="Italian",
                preparation_time=30,
                servings=4,
                difficulty=Difficulty.medium,
                tags=["pasta", "quick", "comfort-food"],
            ),
            status=RecipeStatus.favorite,
            created_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
            updated_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
        ),
        Recipe(
            id=_new_id(),
            name="Chicken Teriyaki",
            ingredients=[
                "2 chicken breasts",
                "3 tbsp soy sauce",
                "2 tbsp honey",
                "1 tbsp rice vinegar",
                "ginger",
                "garlic",
            ],
            instructions=[
                "Cut chicken into bite-sized pieces",
                "Make teriyaki sauce with soy sauce, honey, vinegar",
                "Cook chicken in pan until golden",
                "Add sauce and simmer until glazed",
                "Serve with rice and vegetables",
            ],
            metadata=RecipeMetadata(
                cuisine_type="Japanese",
                preparation_time=25,
                servings=2,
                difficulty=Difficulty.easy,
                tags=["chicken", "asian", "healthy"],
            ),
            status=RecipeStatus.made,
            created_at=datetime(2024, 1, 10, tzinfo=timezone.utc),
            updated_at=datetime(2024, 1, 20, tzinfo=timezone.utc),
        ),
    ]
