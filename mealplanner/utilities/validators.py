"""
Input validation schemas using Pydantic for meal names, ingredients and plan rows.
"""
from pydantic import BaseModel, Field, ValidationError, field_validator
from typing import List, Literal

from mealplanner.utilities.constants import WRONG_FORMAT


def _letters_only(value: str) -> str:
    """Reject blank text and anything other than letters and whitespace."""
    if not value or not value.strip():
        raise ValueError(WRONG_FORMAT)
    if not all(ch.isalpha() or ch.isspace() for ch in value):
        raise ValueError(WRONG_FORMAT)
    return value


class MealNameInput(BaseModel):
    """Schema for a single free-text name (meal or ingredient)."""
    name: str

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _letters_only(v)


class MealInput(BaseModel):
    """Schema for a complete meal as entered by the user."""
    category: Literal['breakfast', 'lunch', 'dinner']
    name: str
    ingredients: List[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return _letters_only(v.strip())

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Every ingredient is trimmed and checked like a meal name."""
        return [_letters_only(ingredient.strip()) for ingredient in v]


class PlanEntryInput(BaseModel):
    """Schema for one planned day."""
    day: str = Field(..., pattern=r'^(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)$')
    breakfast: str = Field(..., min_length=1)
    lunch: str = Field(..., min_length=1)
    dinner: str = Field(..., min_length=1)


def check_format(value: str) -> bool:
    """True when ``value`` is a usable meal or ingredient name."""
    try:
        MealNameInput(name=value)
    except ValidationError:
        return False
    return True


def parse_ingredients(line: str) -> List[str]:
    """Split a comma separated ingredient line into trimmed tokens (empty tokens are kept)."""
    return [part.strip() for part in line.split(",")]
