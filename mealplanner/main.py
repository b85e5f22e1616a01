import logging
import sys
from contextlib import closing
from pathlib import Path
from typing import Optional, Union

from mealplanner.cli.planner import MealPlanner
from mealplanner.infra.database import StorageError, connect, initialize_schema
from mealplanner.infra.Meal_Repository import MealRepository
from mealplanner.infra.paths import DATABASE_FILE
from mealplanner.utilities.config import LEGACY_SHOPPING_FORMAT, LOG_FILE, LOG_FORMAT, LOG_LEVEL

logger = logging.getLogger("mealplanner")


def configure_logging(level: str = LOG_LEVEL, log_file: Optional[str] = LOG_FILE):
    # stdout belongs to the prompt dialogue, so logs go to stderr or a file
    logging.basicConfig(level=level, format=LOG_FORMAT, filename=log_file)


def main(db_path: Union[str, Path, None] = None) -> int:
    configure_logging()
    path = db_path or DATABASE_FILE
    try:
        with closing(connect(path)) as connection:
            initialize_schema(connection)
            planner = MealPlanner(MealRepository(connection), legacy_shopping_format=LEGACY_SHOPPING_FORMAT)
            planner.wait_for_command()
    except StorageError as e:
        logger.critical(f"Database error, shutting down: {e}")
        return 1
    except OSError as e:
        logger.critical(f"Could not write file, shutting down: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
