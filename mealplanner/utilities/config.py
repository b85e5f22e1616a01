"""Configuration management for the Meal Planner CLI."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from a .env file in the working directory, if present
load_dotenv(Path.cwd() / '.env')

# Storage
DB_FILE: Final[str] = os.getenv('MEALPLANNER_DB', 'meals.db')

# Logging
LOG_LEVEL: Final[str] = os.getenv('MEALPLANNER_LOG_LEVEL', 'WARNING').upper()
LOG_FILE: Final[Optional[str]] = os.getenv('MEALPLANNER_LOG_FILE') or None
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Shopping list export: write multi-quantity lines without a trailing newline
LEGACY_SHOPPING_FORMAT: Final[bool] = os.getenv('MEALPLANNER_LEGACY_SHOPPING_FORMAT', 'False').lower() == 'true'
