"""SQLite connection factory and schema setup.

The three tables are created with ``CREATE TABLE IF NOT EXISTS`` so running
``initialize_schema`` on every startup is safe.
"""
import logging
import sqlite3
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS meals (
    category TEXT,
    meal     TEXT,
    meal_id  INTEGER PRIMARY KEY AUTOINCREMENT
);

CREATE TABLE IF NOT EXISTS ingredients (
    ingredient    TEXT,
    ingredient_id INTEGER PRIMARY KEY AUTOINCREMENT,
    meal_id       INTEGER,
    FOREIGN KEY (meal_id) REFERENCES meals(meal_id)
);

CREATE TABLE IF NOT EXISTS plan (
    day       TEXT,
    breakfast TEXT,
    lunch     TEXT,
    dinner    TEXT
);
"""


class StorageError(Exception):
    """Raised when the database connection or a query fails."""


def connect(path: Union[str, Path]) -> sqlite3.Connection:
    """Open the meal database at ``path`` (``":memory:"`` is accepted)."""
    try:
        connection = sqlite3.connect(str(path))
        connection.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as e:
        logger.error(f"Could not open database {path}: {e}")
        raise StorageError(f"Could not open database {path}") from e
    logger.info(f"Opened database {path}")
    return connection


def initialize_schema(connection: sqlite3.Connection) -> None:
    """Create the meals, ingredients and plan tables if they do not exist yet."""
    try:
        connection.executescript(SCHEMA)
        connection.commit()
    except sqlite3.Error as e:
        logger.error(f"Schema setup failed: {e}")
        raise StorageError("Schema setup failed") from e


__all__ = ['SCHEMA', 'StorageError', 'connect', 'initialize_schema']
