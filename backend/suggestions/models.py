from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from ..recipes.models import CamelModel, RecipeForm


class SuggestedRecipe(CamelModel):
    """A recipe idea. Not stored until submitted through recipe creation."""

    name: str
    description: str
    ingredients: list[str]
    instructions: list[str]
    cuisine_type: str
    preparation_time: int
    servings: int
    difficulty: str
    tags: list[str] = Field(default_factory=list)

    def to_form(self) -> RecipeForm:
        return RecipeForm(
            name=self.name,
            ingredients=", ".join(self.ingredients),
            instructions="\n".join(self.instructions),
            cuisine_type=self.cuisine_type,
            preparation_time=self.preparation_time,
            servings=self.servings,
            difficulty=self.difficulty.strip().capitalize(),
            tags=", ".join(self.tags),
        )


class SuggestionSource(str, Enum):
    llm = "openai"
    fallback = "fallback"
    smart_suggestions = "smart-suggestions"


class SuggestionRequest(BaseModel):
    ingredients: str | None = None
    preferences: str | None = None


class SuggestionResponse(BaseModel):
    success: bool = True
    data: list[SuggestedRecipe]
    source: SuggestionSource
    note: str | None = None


class SuggestionHealthResponse(CamelModel):
    success: bool = True
    message: str
    has_llm: bool
    timestamp: datetime
