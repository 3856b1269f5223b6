from __future__ import annotations


class RecipeValidationError(ValueError):
    """Required input is missing or malformed. Raised before any mutation."""


class RecipeNotFoundError(KeyError):
    """No recipe with the given id exists (never created or already deleted)."""

    def __init__(self, recipe_id: str) -> None:
        super().__init__(recipe_id)
        self.recipe_id = recipe_id

    def __str__(self) -> str:
        return "Recipe not found"
