# config.py
# Role: Runtime configuration for the expense tracker.
#       Reads settings from environment variables (and an optional .env file)
#       so the database location and log verbosity can change per deployment.

import os

from dotenv import load_dotenv

load_dotenv()


def _env_truthy(name: str, default: str = "0") -> bool:
    v = os.getenv(name, default)
    return str(v).strip().lower() in ("1", "true", "yes", "y", "on")


# Base directory of the project (where this module lives)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Default SQLite location: <project_root>/database/expenses.db
DEFAULT_DB_DIR = os.path.join(BASE_DIR, "database")
DEFAULT_DB_PATH = os.path.join(DEFAULT_DB_DIR, "expenses.db")

DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DEFAULT_DB_PATH}")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Echo every SQL statement (debugging only)
SQL_ECHO = _env_truthy("SQL_ECHO")
