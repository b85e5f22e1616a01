"""Meal domain entities: the (name, id) display pair and the ingredient lookup capability."""
from typing import List, Protocol


class MealInfo:
    """Name and generated id of a stored meal, used when listing a category."""

    def __init__(self, name: str, meal_id: int):
        self.name = name
        self.meal_id = meal_id

    def __eq__(self, other) -> bool:
        if not isinstance(other, MealInfo):
            return NotImplemented
        return self.name == other.name and self.meal_id == other.meal_id

    def __str__(self) -> str:
        return f"{self.name} (#{self.meal_id})"

    __repr__ = __str__


class IngredientLookup(Protocol):
    """Anything able to return the ingredients of a stored meal."""

    def ingredients_by_meal_id(self, meal_id: int) -> List[str]: ...
