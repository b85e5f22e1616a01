"""Line-oriented user interaction: prompts, reprompts and printing.

The reader and writer are injectable so the whole dialogue can be scripted
(tests pass a list iterator and collect the printed lines).
"""
from typing import Callable, List, Optional, Sequence

from mealplanner.domain.Meal import IngredientLookup, MealInfo
from mealplanner.domain.Plan import Plan
from mealplanner.utilities import constants as C
from mealplanner.utilities.validators import check_format, parse_ingredients


class Menu:
    def __init__(self, reader: Optional[Callable[[], str]] = None, writer: Optional[Callable[[str], None]] = None):
        self._read = reader if reader is not None else input
        self._write = writer if writer is not None else print

    def display_message(self, message: str = ""):
        self._write(message)

    def display_options(self):
        self._write(C.MENU_PROMPT)

    def get_command(self) -> str:
        return self._read().strip()

    def _check_format(self, value: str) -> bool:
        if check_format(value):
            return True
        self._write(C.WRONG_FORMAT)
        return False

    def _prompt_for_category(self, prompt: str) -> str:
        while True:
            self._write(prompt)
            category = self._read().strip()
            if category in C.CATEGORIES:
                return category
            self._write(C.WRONG_CATEGORY)

    def prompt_for_meal_category(self) -> str:
        return self._prompt_for_category(C.ADD_CATEGORY_PROMPT)

    def prompt_for_category_for_printing(self) -> str:
        return self._prompt_for_category(C.SHOW_CATEGORY_PROMPT)

    def prompt_for_meal_name(self) -> str:
        while True:
            self._write(C.MEAL_NAME_PROMPT)
            name = self._read().strip()
            if self._check_format(name):
                return name

    def prompt_for_ingredients(self) -> List[str]:
        while True:
            self._write(C.INGREDIENTS_PROMPT)
            ingredients = parse_ingredients(self._read())
            if all(check_format(i) for i in ingredients):
                return ingredients
            self._write(C.WRONG_FORMAT)

    def prompt_for_file_name(self) -> str:
        self._write(C.FILENAME_PROMPT)
        return self._read().strip()

    def get_meal_choice_for_day(self, day: str, category: str, options: Sequence[str]) -> str:
        """Show ``options`` and read lines until one matches an option exactly."""
        for option in options:
            self._write(option)
        self._write(f"Choose the {category} for {day} from the list above:")
        while True:
            choice = self._read()
            if choice in options:
                return choice
            self._write(C.MEAL_NOT_IN_LIST)

    def valid_day_planned_response(self, day: str):
        self._write(f"Yeah! We planned the meals for {day}.")

    def present_plan(self, plan: Plan):
        for entry in plan.entries():
            self._write(entry.day)
            self._write(f"Breakfast: {entry.breakfast}")
            self._write(f"Lunch: {entry.lunch}")
            self._write(f"Dinner: {entry.dinner}")
            self._write("")

    def display_meal_list(self, category: str, meals: Sequence[MealInfo], ingredients: IngredientLookup):
        self._write(f"Category: {category}")
        self._write("")
        for meal in meals:
            self._write(f"Name: {meal.name}")
            self._write("Ingredients:")
            for ingredient in ingredients.ingredients_by_meal_id(meal.meal_id):
                self._write(ingredient)
            self._write("")
