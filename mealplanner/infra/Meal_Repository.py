import logging
import sqlite3
from contextlib import contextmanager
from typing import List, Optional, Tuple

from mealplanner.domain.Meal import MealInfo
from mealplanner.infra.database import StorageError

logger = logging.getLogger(__name__)


class MealRepository:
    """All SQL for meals, ingredients and the weekly plan lives here."""

    def __init__(self, connection: sqlite3.Connection):
        self.connection = connection

    @contextmanager
    def _cursor(self, action: str):
        try:
            cursor = self.connection.cursor()
            try:
                yield cursor
            finally:
                cursor.close()
        except sqlite3.Error as e:
            logger.error(f"Storage failure while trying to {action}: {e}")
            raise StorageError(f"Could not {action}") from e

    def list_meal_names(self, category: str) -> List[str]:
        with self._cursor(f"list {category} meals") as cur:
            cur.execute("SELECT meal FROM meals WHERE category = ? ORDER BY meal", (category,))
            return [row[0] for row in cur.fetchall()]

    def list_meals_with_ids(self, category: str) -> List[MealInfo]:
        with self._cursor(f"list {category} meals") as cur:
            cur.execute("SELECT meal, meal_id FROM meals WHERE category = ? ORDER BY meal_id", (category,))
            return [MealInfo(name, meal_id) for name, meal_id in cur.fetchall()]

    def plan_entries(self) -> List[Tuple[str, str, str]]:
        """Return every stored plan row as (breakfast, lunch, dinner), in storage order."""
        with self._cursor("read the plan") as cur:
            cur.execute("SELECT day, breakfast, lunch, dinner FROM plan ORDER BY rowid")
            return [(breakfast, lunch, dinner) for _day, breakfast, lunch, dinner in cur.fetchall()]

    def meal_id_by_name(self, name: str) -> Optional[int]:
        """Id of the first meal called ``name`` or None when there is none."""
        with self._cursor(f"look up meal {name!r}") as cur:
            cur.execute("SELECT meal_id FROM meals WHERE meal = ? ORDER BY meal_id LIMIT 1", (name,))
            row = cur.fetchone()
        return row[0] if row else None

    def ingredients_by_meal_id(self, meal_id: int) -> List[str]:
        with self._cursor(f"read ingredients of meal {meal_id}") as cur:
            cur.execute("SELECT ingredient FROM ingredients WHERE meal_id = ? ORDER BY ingredient_id", (meal_id,))
            return [row[0] for row in cur.fetchall()]

    def insert_plan_entry(self, day: str, breakfast: str, lunch: str, dinner: str) -> None:
        with self._cursor(f"save the plan for {day}") as cur:
            cur.execute(
                "INSERT INTO plan (day, breakfast, lunch, dinner) VALUES (?, ?, ?, ?)",
                (day, breakfast, lunch, dinner),
            )
            self.connection.commit()
        logger.info(f"Planned {day}: {breakfast} / {lunch} / {dinner}")

    def insert_meal(self, category: str, name: str, ingredients: List[str]) -> int:
        """Insert a meal and its ingredients; returns the generated meal id.

        The meal row is committed before the ingredients are written, so a
        failure in the second step leaves the meal without (all of) its
        ingredients. There is no rollback.
        """
        with self._cursor(f"add meal {name!r}") as cur:
            cur.execute("INSERT INTO meals (category, meal) VALUES (?, ?)", (category, name))
            meal_id = cur.lastrowid
            self.connection.commit()
        with self._cursor(f"add ingredients of meal {name!r}") as cur:
            cur.executemany(
                "INSERT INTO ingredients (ingredient, meal_id) VALUES (?, ?)",
                [(ingredient, meal_id) for ingredient in ingredients],
            )
            self.connection.commit()
        logger.info(f"Added {category} meal {name!r} (#{meal_id}) with {len(ingredients)} ingredients")
        return meal_id
