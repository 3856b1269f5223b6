"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Build the recipe-idea prompt from available ingredients and preferences.
- Check the returned JSON against the suggested-recipe schema.
- Report failure instead of raising when the LLM is unavailable or returns
  invalid output, so callers can fall back to local suggestions.
"""
