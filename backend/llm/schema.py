from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Any

from ..suggestions.models import SuggestedRecipe

_TEXT_FIELDS = ("name", "description", "cuisineType", "difficulty")
_LIST_FIELDS = ("ingredients", "instructions", "tags")
_NUMBER_FIELDS = ("preparationTime", "servings")


@dataclass(frozen=True)
class ParsedSuggestions:
    """Outcome of checking an LLM response: ``ok`` with recipes, or a reason."""

    ok: bool
    recipes: list[SuggestedRecipe] = field(default_factory=list)
    reason: str | None = None

    @classmethod
    def failed(cls, reason: str) -> ParsedSuggestions:
        return cls(ok=False, reason=reason)


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_count(value: Any) -> bool:
    """A finite number that rounds to at least 1."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return math.isfinite(value) and round(value) >= 1


def check_candidate(item: Any) -> SuggestedRecipe | None:
    """Return the candidate as a :class:`SuggestedRecipe`, or ``None`` if any field is missing or mis-shaped."""
    if not isinstance(item, dict):
        return None
    if not all(_is_text(item.get(k)) for k in _TEXT_FIELDS):
        return None
    if not all(isinstance(item.get(k), list) for k in _LIST_FIELDS):
        return None
    if not all(_is_count(item.get(k)) for k in _NUMBER_FIELDS):
        return None

    return SuggestedRecipe(
        name=item["name"].strip(),
        description=item["description"].strip(),
        ingredients=[str(i) for i in item["ingredients"]],
        instructions=[str(s) for s in item["instructions"]],
        cuisine_type=item["cuisineType"].strip(),
        preparation_time=int(round(item["preparationTime"])),
        servings=int(round(item["servings"])),
        difficulty=item["difficulty"].strip(),
        tags=[str(t) for t in item["tags"]],
    )


def parse_suggestions(content: str) -> ParsedSuggestions:
    """
    Parse LLM output into suggested recipes.

    Accepts a JSON array of recipes or an object holding one under
    ``"recipes"``. Candidates failing :func:`check_candidate` are dropped;
    the result is only ``ok`` when at least one survives.
    """
    try:
        payload = json.loads(content)
    except (TypeError, ValueError):
        return ParsedSuggestions.failed("response is not valid JSON")

    if isinstance(payload, dict):
        payload = payload.get("recipes")
    if not isinstance(payload, list) or not payload:
        return ParsedSuggestions.failed("response holds no recipe array")

    recipes = [r for r in (check_candidate(item) for item in payload) if r is not None]
    if not recipes:
        return ParsedSuggestions.failed("no recipe matched the expected schema")

    return ParsedSuggestions(ok=True, recipes=recipes)
