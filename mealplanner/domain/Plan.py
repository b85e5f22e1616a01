"""Plan domain entities: one stored weekday row and the weekly schedule built by the planner."""
from typing import Dict, Iterator, Tuple

from mealplanner.utilities.constants import CATEGORIES, WEEK_DAYS


class PlanEntry:
    def __init__(self, day: str, breakfast: str, lunch: str, dinner: str):
        self.day = day
        self.breakfast = breakfast
        self.lunch = lunch
        self.dinner = dinner

    def meals(self) -> Tuple[str, str, str]:
        return self.breakfast, self.lunch, self.dinner

    def __eq__(self, other) -> bool:
        if not isinstance(other, PlanEntry):
            return NotImplemented
        return self.day == other.day and self.meals() == other.meals()

    def __str__(self) -> str:
        return f"{self.day}: {self.breakfast} / {self.lunch} / {self.dinner}"

    __repr__ = __str__


class Plan:
    """Weekly schedule: day name -> {category: meal name}."""

    def __init__(self):
        self.meals: Dict[str, Dict[str, str]] = {}

    def assign(self, day: str, category: str, meal_name: str):
        if day not in WEEK_DAYS:
            raise ValueError(f"Unknown day: {day}")
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category: {category}")
        self.meals.setdefault(day, {})[category] = meal_name

    def is_day_complete(self, day: str) -> bool:
        return all(c in self.meals.get(day, {}) for c in CATEGORIES)

    def entries(self) -> Iterator[PlanEntry]:
        """Yield one PlanEntry per fully planned day, Monday first."""
        for day in WEEK_DAYS:
            if self.is_day_complete(day):
                slots = self.meals[day]
                yield PlanEntry(day, slots["breakfast"], slots["lunch"], slots["dinner"])

    def __len__(self) -> int:
        return len(self.meals)
