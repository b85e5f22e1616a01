import sqlite3
import unittest

from mealplanner.infra.database import StorageError, connect, initialize_schema
from mealplanner.infra.paths import IN_MEMORY


def _schema(connection):
    return connection.execute(
        "SELECT type, name, sql FROM sqlite_master WHERE type = 'table' ORDER BY name"
    ).fetchall()


class TestSchema(unittest.TestCase):

    def setUp(self):
        self.connection = connect(IN_MEMORY)

    def tearDown(self):
        self.connection.close()

    def test_creates_three_tables(self):
        initialize_schema(self.connection)
        names = {row[1] for row in _schema(self.connection)}
        self.assertTrue({"meals", "ingredients", "plan"} <= names)

    def test_setup_twice_is_idempotent(self):
        initialize_schema(self.connection)
        self.connection.execute("INSERT INTO meals (category, meal) VALUES ('lunch', 'Soup')")
        self.connection.commit()
        before = _schema(self.connection)

        initialize_schema(self.connection)

        self.assertEqual(_schema(self.connection), before)
        rows = self.connection.execute("SELECT category, meal FROM meals").fetchall()
        self.assertEqual(rows, [("lunch", "Soup")])

    def test_foreign_keys_enabled(self):
        initialize_schema(self.connection)
        with self.assertRaises(sqlite3.IntegrityError):
            self.connection.execute("INSERT INTO ingredients (ingredient, meal_id) VALUES ('Salt', 42)")

    def test_closed_connection_raises_storage_error(self):
        self.connection.close()
        with self.assertRaises(StorageError):
            initialize_schema(self.connection)


if __name__ == '__main__':
    unittest.main()
