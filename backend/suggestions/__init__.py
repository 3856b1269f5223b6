"""
Recipe suggestion engine.

Responsibilities:
- Validate the available-ingredients request.
- Ask the Groq LLM for recipe ideas when it is configured.
- Fall back to ingredient-triggered recipe templates when the LLM is
  missing, fails, or returns nothing usable.
- Narrow template suggestions by free-text preferences (vegetarian, quick, easy).
"""
