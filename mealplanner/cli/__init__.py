"""Command-line surface: the interactive menu and the planner command loop."""
from mealplanner.cli.menu import Menu
from mealplanner.cli.planner import MealPlanner

__all__ = ["Menu", "MealPlanner"]
