from __future__ import annotations

from dataclasses import dataclass

from .errors import RecipeValidationError
from .models import RecipeForm, RecipeMetadata


@dataclass(frozen=True)
class RecipeFields:
    """Parsed, validated content of a recipe form."""

    name: str
    ingredients: list[str]
    instructions: list[str]
    metadata: RecipeMetadata


def split_delimited(text: str, separator: str) -> list[str]:
    """Split on ``separator``, trim every entry and drop the empty ones."""
    return [part.strip() for part in text.split(separator) if part.strip()]


def parse_form(form: RecipeForm) -> RecipeFields:
    """
    Validate a submitted recipe form and convert its delimited text fields.

    Ingredients and tags are comma-separated, instructions are one step per
    line. Raises :class:`RecipeValidationError` naming the first missing
    required field.
    """
    name = form.name.strip()
    if not name:
        raise RecipeValidationError("Recipe name is required")

    ingredients = split_delimited(form.ingredients, ",")
    if not ingredients:
        raise RecipeValidationError("Ingredients are required")

    instructions = split_delimited(form.instructions, "\n")
    if not instructions:
        raise RecipeValidationError("Instructions are required")

    metadata = RecipeMetadata(
        cuisine_type=form.cuisine_type.strip(),
        preparation_time=form.preparation_time,
        servings=form.servings,
        difficulty=form.difficulty,
        tags=split_delimited(form.tags, ","),
    )
    return RecipeFields(
        name=name,
        ingredients=ingredients,
        instructions=instructions,
        metadata=metadata,
    )
