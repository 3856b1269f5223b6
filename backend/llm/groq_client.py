from __future__ import annotations

import logging

from groq import Groq

from .config import DEFAULT_LLM_CONFIG, LLMConfig
from .schema import ParsedSuggestions, parse_suggestions

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional chef and recipe developer. "
    "Generate creative, practical recipes based on available ingredients. "
    "Always respond with valid JSON only, no additional text."
)

RECIPE_SCHEMA_EXAMPLE = """\
{
  "recipes": [
    {
      "name": "Recipe Name",
      "description": "Brief appetizing description (1-2 sentences)",
      "ingredients": ["specific ingredient 1 with amount", "ingredient 2 with amount"],
      "instructions": ["detailed step 1", "detailed step 2"],
      "cuisineType": "Italian|Mexican|Asian|Indian|Mediterranean|American|French|Other",
      "preparationTime": 30,
      "servings": 4,
      "difficulty": "Easy|Medium|Hard",
      "tags": ["relevant", "descriptive", "tags"]
    }
  ]
}"""


def _build_user_message(ingredients: str, preferences: str) -> str:
    lines = [f"Generate 3-4 recipe suggestions based on these available ingredients: {ingredients}"]
    if preferences:
        lines.append(f"\nAdditional preferences: {preferences}")

    lines.append("\nRequirements:")
    lines.append("- Use as many of the provided ingredients as possible")
    lines.append("- Create realistic, cookable recipes")
    lines.append("- Include prep time estimates")
    lines.append("- Make recipes accessible for home cooks")
    lines.append("- Vary the cuisine types and difficulty levels")

    lines.append("\nReturn ONLY a JSON object with this exact structure:")
    lines.append(RECIPE_SCHEMA_EXAMPLE)

    return "\n".join(lines)


def request_recipe_ideas(
    ingredients: str,
    preferences: str = "",
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> ParsedSuggestions:
    """
    Ask the Groq LLM for recipe ideas.

    Never raises: a disabled config, an API error or timeout, and output
    that fails the schema check all come back as a failed result.
    """
    if not config.is_configured:
        return ParsedSuggestions.failed("LLM is not configured")

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": _build_user_message(ingredients, preferences),
                },
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            response_format={"type": "json_object"},
        )
        content = response.choices[0].message.content or ""
        result = parse_suggestions(content)

    except Exception:
        logger.warning("Groq LLM call failed, falling back to smart suggestions", exc_info=True)
        return ParsedSuggestions.failed("LLM call failed")

    if not result.ok:
        logger.warning("Unusable Groq LLM response (%s), falling back to smart suggestions", result.reason)
    return result
