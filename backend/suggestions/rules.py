from __future__ import annotations

from .models import SuggestedRecipe
from .templates import TEMPLATES

MIN_SUGGESTIONS = 2
MAX_SUGGESTIONS = 4
QUICK_MAX_MINUTES = 30

_MEAT_MARKERS = ("chicken", "meat", "fish")
_QUICK_MARKERS = ("quick", "30 min", "fast")


def _parse_ingredients(ingredients_text: str) -> list[str]:
    return [i.strip() for i in ingredients_text.lower().split(",")]


def _is_vegetarian(recipe: SuggestedRecipe) -> bool:
    if "vegetarian" in recipe.tags:
        return True
    return not any(
        marker in ingredient.lower()
        for ingredient in recipe.ingredients
        for marker in _MEAT_MARKERS
    )


def apply_preferences(
    candidates: list[SuggestedRecipe],
    preferences_text: str,
) -> list[SuggestedRecipe]:
    """Narrow candidates by each preference keyword found; never adds any back."""
    prefs = preferences_text.lower()
    filtered = list(candidates)

    if "vegetarian" in prefs:
        filtered = [c for c in filtered if _is_vegetarian(c)]

    if any(marker in prefs for marker in _QUICK_MARKERS):
        filtered = [c for c in filtered if c.preparation_time <= QUICK_MAX_MINUTES]

    if "easy" in prefs:
        filtered = [c for c in filtered if c.difficulty == "Easy"]

    return filtered


def generate_smart_suggestions(
    ingredients_text: str,
    preferences_text: str = "",
) -> list[SuggestedRecipe]:
    """
    Rule-based suggestions that need no external service.

    Every template whose trigger word appears in one of the comma-separated
    ingredients contributes its recipe. Preference keywords then narrow the
    list, and at most ``MAX_SUGGESTIONS`` are returned. When the preferences
    rule out every triggered template the result is empty.
    """
    ingredient_list = _parse_ingredients(ingredients_text)
    candidates = [
        template.recipe.model_copy(deep=True)
        for template in TEMPLATES
        if template.matches(ingredient_list)
    ]
    filtered = apply_preferences(candidates, preferences_text)
    return filtered[: min(MAX_SUGGESTIONS, max(MIN_SUGGESTIONS, len(filtered)))]
