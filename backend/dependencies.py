from __future__ import annotations

from fastapi import Request

from .llm.config import LLMConfig
from .recipes.store import RecipeStore


def get_store(request: Request) -> RecipeStore:
    """Return the recipe store the application was created with."""
    return request.app.state.recipe_store


def get_llm_config(request: Request) -> LLMConfig:
    return request.app.state.llm_config
