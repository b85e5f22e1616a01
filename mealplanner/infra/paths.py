from pathlib import Path

from mealplanner.utilities.config import DB_FILE

# Database location resolved against the working directory (single source of truth)
DATABASE_FILE = Path(DB_FILE)
IN_MEMORY = ":memory:"

__all__ = ['DATABASE_FILE', 'IN_MEMORY']
