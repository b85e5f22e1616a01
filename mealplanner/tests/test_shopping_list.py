import unittest

import pytest

from mealplanner.domain.ShoppingList import ShoppingList
from mealplanner.infra.database import connect, initialize_schema
from mealplanner.infra.paths import IN_MEMORY
from mealplanner.infra.Meal_Repository import MealRepository
from mealplanner.logic.shopping.list_builder import (
    build_shopping_list, count_meals, flatten_plan, format_shopping_list
)


class TestShoppingList(unittest.TestCase):

    def test_add_item_accumulates(self):
        shopping_list = ShoppingList()
        shopping_list.add_item("Water", 2)
        shopping_list.add_item("Salt")
        shopping_list.add_item("Water", 2)
        self.assertEqual(shopping_list.get_items(), [("Water", 4), ("Salt", 1)])
        self.assertEqual(shopping_list.quantity("Water"), 4)
        self.assertEqual(shopping_list.quantity("Pepper"), 0)

    def test_rejects_non_positive_quantity(self):
        with self.assertRaises(ValueError):
            ShoppingList().add_item("Water", 0)

    def test_lines_end_with_newline(self):
        shopping_list = ShoppingList()
        shopping_list.add_item("Egg", 2)
        shopping_list.add_item("Salt")
        self.assertEqual(shopping_list.to_lines(), ["Egg x2\n", "Salt\n"])

    def test_legacy_lines_drop_newline_after_quantity(self):
        shopping_list = ShoppingList()
        shopping_list.add_item("Egg", 2)
        shopping_list.add_item("Salt")
        self.assertEqual(shopping_list.to_lines(legacy=True), ["Egg x2", "Salt\n"])


@pytest.fixture
def repo():
    connection = connect(IN_MEMORY)
    initialize_schema(connection)
    repository = MealRepository(connection)
    repository.insert_meal("breakfast", "Eggs", ["Egg"])
    repository.insert_meal("lunch", "Soup", ["Water", "Salt"])
    repository.insert_meal("dinner", "Pasta", ["Water", "Pasta"])
    yield repository
    connection.close()


PLAN_ROWS = [("Eggs", "Soup", "Pasta"), ("Eggs", "Soup", "Pasta")]


def test_flatten_and_count_keep_first_seen_order():
    names = flatten_plan(PLAN_ROWS + [("Toast", "Soup", "Fish")])
    assert names[:3] == ["Eggs", "Soup", "Pasta"]
    assert list(count_meals(names).items()) == [
        ("Eggs", 2), ("Soup", 3), ("Pasta", 2), ("Toast", 1), ("Fish", 1)
    ]


def test_quantities_add_up_across_meals(repo):
    # shared ingredients are summed, not overwritten
    shopping_list = build_shopping_list(PLAN_ROWS, repo)
    assert shopping_list.get_items() == [("Egg", 2), ("Water", 4), ("Salt", 2), ("Pasta", 2)]


def test_single_occurrence_formats_without_count(repo):
    shopping_list = build_shopping_list([("Eggs", "Soup", "Pasta")], repo)
    assert format_shopping_list(shopping_list) == "Egg\nWater x2\nSalt\nPasta\n"


def test_legacy_format(repo):
    shopping_list = build_shopping_list(PLAN_ROWS, repo)
    assert format_shopping_list(shopping_list, legacy=True) == "Egg x2Water x4Salt x2Pasta x2"


def test_unknown_meal_is_skipped(repo):
    shopping_list = build_shopping_list([("Eggs", "Ghost Soup", "Pasta")], repo)
    assert shopping_list.get_items() == [("Egg", 1), ("Water", 1), ("Pasta", 1)]
