"""Shopping list builder.

Turns the stored weekly plan rows into an ingredient -> quantity list:
every planned meal contributes each of its ingredients once per time the
meal appears in the plan.
"""
import logging
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from mealplanner.domain.Meal import IngredientLookup
from mealplanner.domain.ShoppingList import ShoppingList

logger = logging.getLogger(__name__)


class MealSource(IngredientLookup, Protocol):
    def meal_id_by_name(self, name: str) -> Optional[int]: ...


def flatten_plan(plan_rows: Iterable[Tuple[str, str, str]]) -> List[str]:
    """Breakfast, lunch and dinner names of every row, in row order."""
    return [meal for row in plan_rows for meal in row]


def count_meals(meal_names: Iterable[str]) -> Dict[str, int]:
    """Occurrences per meal name, keyed in order of first appearance."""
    counts: Dict[str, int] = {}
    for name in meal_names:
        counts[name] = counts.get(name, 0) + 1
    return counts


def build_shopping_list(plan_rows: Iterable[Tuple[str, str, str]], meals: MealSource) -> ShoppingList:
    """Aggregate the ingredients of all planned meals.

    Args:
        plan_rows: (breakfast, lunch, dinner) triples as stored.
        meals: lookup for meal ids and their ingredients (normally the MealRepository).

    Returns:
        ShoppingList whose quantities sum the occurrence counts of every meal
        using the ingredient. Planned names without a stored meal are skipped.
    """
    shopping_list = ShoppingList()
    for meal_name, count in count_meals(flatten_plan(plan_rows)).items():
        meal_id = meals.meal_id_by_name(meal_name)
        if meal_id is None:
            logger.warning(f"Planned meal {meal_name!r} is not stored anymore; skipping its ingredients")
            continue
        for ingredient in meals.ingredients_by_meal_id(meal_id):
            shopping_list.add_item(ingredient, count)
    logger.debug(f"Built shopping list with {len(shopping_list)} ingredients")
    return shopping_list


def format_shopping_list(shopping_list: ShoppingList, *, legacy: bool = False) -> str:
    """Render the file contents written by the save command."""
    return "".join(shopping_list.to_lines(legacy=legacy))


__all__ = ['MealSource', 'flatten_plan', 'count_meals', 'build_shopping_list', 'format_shopping_list']
