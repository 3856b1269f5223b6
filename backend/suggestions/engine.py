from __future__ import annotations

import logging

from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import request_recipe_ideas
from ..recipes.errors import RecipeValidationError
from .models import SuggestionResponse, SuggestionSource
from .rules import generate_smart_suggestions

logger = logging.getLogger(__name__)

MIN_INGREDIENTS_LENGTH = 3

FALLBACK_NOTE = "LLM temporarily unavailable, using smart suggestions"
SMART_NOTE = "Using smart ingredient-based suggestions"


class InvalidSuggestionInput(RecipeValidationError):
    """The ingredients text is missing or too short to suggest from."""


def _validate_ingredients(ingredients_text: str | None) -> str:
    if not ingredients_text:
        raise InvalidSuggestionInput("Ingredients are required")
    if len(ingredients_text.strip()) < MIN_INGREDIENTS_LENGTH:
        raise InvalidSuggestionInput("Please provide at least a few ingredients")
    return ingredients_text


def generate_suggestions(
    ingredients_text: str | None,
    preferences_text: str | None = None,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> SuggestionResponse:
    """
    Suggest recipes for the available ingredients.

    The LLM is tried first when configured; any failure there is absorbed
    and the rule-based templates answer instead. ``source`` records which
    path produced the list.
    """
    ingredients_text = _validate_ingredients(ingredients_text)
    preferences_text = preferences_text or ""

    if config.is_configured:
        result = request_recipe_ideas(ingredients_text, preferences_text, config=config)
        if result.ok:
            return SuggestionResponse(data=result.recipes, source=SuggestionSource.llm)
        source, note = SuggestionSource.fallback, FALLBACK_NOTE
    else:
        source, note = SuggestionSource.smart_suggestions, SMART_NOTE

    suggestions = generate_smart_suggestions(ingredients_text, preferences_text)
    logger.info("Returning %d %s suggestions", len(suggestions), source.value)
    return SuggestionResponse(data=suggestions, source=source, note=note)
