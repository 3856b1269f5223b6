from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecipeStatus(str, Enum):
    favorite = "favorite"
    to_try = "to-try"
    made = "made"


class Difficulty(str, Enum):
    easy = "Easy"
    medium = "Medium"
    hard = "Hard"


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase JSON keys; both accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecipeMetadata(CamelModel):
    cuisine_type: str
    preparation_time: int = Field(..., gt=0, description="Minutes")
    servings: int = Field(..., gt=0)
    difficulty: Difficulty
    tags: list[str] = Field(default_factory=list)


class Recipe(CamelModel):
    id: str
    name: str = Field(..., min_length=1)
    ingredients: list[str]
    instructions: list[str]
    metadata: RecipeMetadata
    status: RecipeStatus = RecipeStatus.to_try
    created_at: datetime
    updated_at: datetime


class RecipeForm(CamelModel):
    name: str = ""
    ingredients: str = Field(default="", description="Comma-separated")
    instructions: str = Field(default="", description="One step per line")
    cuisine_type: str = ""
    preparation_time: int = Field(default=30, ge=1, le=500)
    servings: int = Field(default=4, ge=1, le=20)
    difficulty: Difficulty = Difficulty.easy
    tags: str = Field(default="", description="Comma-separated")


class RecipeUpdate(RecipeForm):
    status: RecipeStatus | None = None

    @property
    def is_status_only(self) -> bool:
        """A body carrying a status but no name only changes the status."""
        return self.status is not None and not self.name


class SearchFilters(CamelModel):
    query: str = ""
    cuisine_type: str | None = None
    status: RecipeStatus | None = None
    max_prep_time: int | None = Field(default=None, gt=0)


class RecipeResponse(BaseModel):
    success: bool = True
    data: Recipe


class RecipeListResponse(BaseModel):
    success: bool = True
    data: list[Recipe]


class DeletedRecipe(BaseModel):
    id: str


class DeleteResponse(BaseModel):
    success: bool = True
    data: DeletedRecipe


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
