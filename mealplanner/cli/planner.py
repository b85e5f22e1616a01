"""Command loop and the four user-facing operations (add, show, plan, save)."""
import logging
from pathlib import Path
from typing import Optional

from mealplanner.cli.menu import Menu
from mealplanner.domain.Plan import Plan
from mealplanner.infra.Meal_Repository import MealRepository
from mealplanner.logic.shopping.list_builder import build_shopping_list, format_shopping_list
from mealplanner.utilities import constants as C
from mealplanner.utilities.validators import MealInput, PlanEntryInput

logger = logging.getLogger(__name__)


class MealPlanner:
    def __init__(self, repository: MealRepository, menu: Optional[Menu] = None, *,
                 legacy_shopping_format: bool = False):
        self.repository = repository
        self.menu = menu or Menu()
        self.legacy_shopping_format = legacy_shopping_format
        self._commands = {
            "add": self.add_meal,
            "show": self.show_meals,
            "plan": self.add_plan,
            "save": self.save_plan,
        }

    def wait_for_command(self):
        """Prompt for commands until ``exit`` (or end of input).

        Unknown commands are ignored and the menu is shown again.
        """
        while True:
            self.menu.display_options()
            try:
                command = self.menu.get_command()
                if command == "exit":
                    self.menu.display_message(C.BYE)
                    return
                action = self._commands.get(command)
                if action is None:
                    logger.debug(f"Ignoring unknown command {command!r}")
                    continue
                action()
            except EOFError:
                logger.info("Input closed; leaving the command loop")
                return

    def add_meal(self):
        category = self.menu.prompt_for_meal_category()
        name = self.menu.prompt_for_meal_name()
        ingredients = self.menu.prompt_for_ingredients()
        meal = MealInput(category=category, name=name, ingredients=ingredients)
        self.repository.insert_meal(meal.category, meal.name, meal.ingredients)
        self.menu.display_message(C.MEAL_ADDED)

    def show_meals(self):
        category = self.menu.prompt_for_category_for_printing()
        meals = self.repository.list_meals_with_ids(category)
        if not meals:
            self.menu.display_message(C.NO_MEALS_FOUND)
            return
        self.menu.display_meal_list(category, meals, self.repository)

    def add_plan(self) -> Optional[Plan]:
        """Ask for a breakfast, lunch and dinner for every weekday and store one row per day."""
        options = {category: self.repository.list_meal_names(category) for category in C.CATEGORIES}
        if not all(options.values()):
            self.menu.display_message(C.UNABLE_TO_PLAN)
            return None

        plan = Plan()
        for day in C.WEEK_DAYS:
            self.menu.display_message(day)
            for category in C.CATEGORIES:
                choice = self.menu.get_meal_choice_for_day(day, category, options[category])
                plan.assign(day, category, choice)
            self.menu.valid_day_planned_response(day)
        self.menu.present_plan(plan)

        for entry in plan.entries():
            row = PlanEntryInput(day=entry.day, breakfast=entry.breakfast, lunch=entry.lunch, dinner=entry.dinner)
            self.repository.insert_plan_entry(row.day, row.breakfast, row.lunch, row.dinner)
        logger.info(f"Stored plan for {len(plan)} days")
        return plan

    def save_plan(self) -> Optional[Path]:
        """Write the aggregated shopping list of every stored plan row to a user-chosen file."""
        plan_rows = self.repository.plan_entries()
        if not plan_rows:
            self.menu.display_message(C.UNABLE_TO_SAVE)
            return None

        shopping_list = build_shopping_list(plan_rows, self.repository)
        path = Path(self.menu.prompt_for_file_name())
        path.write_text(format_shopping_list(shopping_list, legacy=self.legacy_shopping_format), encoding="utf-8")
        logger.info(f"Saved shopping list with {len(shopping_list)} ingredients to {path}")
        self.menu.display_message(C.SAVED)
        return path
