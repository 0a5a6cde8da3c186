from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from culinarycompanion.features.recipes.domain.models import CamelModel, Recipe
from culinarycompanion.shared.config.settings import settings


class InputType(str, Enum):
    TEXT = "text"
    AUDIO = "audio"


class RecipeRequest(CamelModel):
    ingredients: str = Field(..., min_length=1, description="Please provide some ingredients")
    input_type: InputType = InputType.TEXT
    language: str = Field(default_factory=lambda: settings.DEFAULT_LANGUAGE)
    dietary_restrictions: Optional[List[str]] = None
    cuisine_style: Optional[str] = None

    @field_validator("ingredients")
    @classmethod
    def ingredients_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Please provide some ingredients")
        return v

    @field_validator("cuisine_style")
    @classmethod
    def blank_style_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class RecipeResponse(CamelModel):
    recipes: List[Recipe] = Field(..., min_length=3, max_length=3)
    language: str
    timestamp: str
    adaptation_note: str = ""


class RequestLogEntry(CamelModel):
    id: int
    input_text: str
    input_type: str
    response_data: str
    language: str
    created_at: str
    updated_at: str


class HistoryResponse(CamelModel):
    history: List[RequestLogEntry]
