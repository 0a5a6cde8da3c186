from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable model that reads and writes camelCase JSON keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class RecipeStyle(str, Enum):
    FUSION = "fusion"
    TRADITIONAL = "traditional"
    MODERN = "modern"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Recipe(CamelModel):
    title: str
    description: str
    ingredients: List[str]
    instructions: List[str]
    cuisine_type: str
    difficulty_level: Difficulty
    prep_time: int = Field(ge=0)
    cook_time: int = Field(ge=0)
    servings: int = Field(ge=1)
    tips: List[str] = Field(default_factory=list)
