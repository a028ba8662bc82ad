"""
This script loads historical expenses from CSV files into the expense database.

Each CSV needs a header row with: date, description, amount
(dates as YYYY-MM-DD; amounts may use a comma as decimal separator).
Every file is inserted in a single commit, so a bad file leaves no partial
rows behind.

Usage (from any directory):
    python data-migration/script.py                 # all *.csv in <project_root>/data-migration/normalized
    python data-migration/script.py path/to/folder  # all *.csv in another folder
"""


from __future__ import annotations

import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import config  # noqa: E402
from db import SessionLocal, init_db  # noqa: E402
from app.services.csv_import import import_expenses_csv  # noqa: E402
from app.services.expense_store import ExpenseStore  # noqa: E402


NORMALIZED_DIR = PROJECT_ROOT / "data-migration" / "normalized"

logger = logging.getLogger("data-migration")


def import_folder(folder: Path = NORMALIZED_DIR) -> int:
    folder = Path(folder)
    csv_files = sorted(folder.glob("*.csv"))
    if not csv_files:
        raise FileNotFoundError(f"No CSV files found in: {folder.resolve()}")

    init_db()

    session = SessionLocal()
    total_inserted = 0

    try:
        store = ExpenseStore(session)
        for f in csv_files:
            inserted = import_expenses_csv(store, f)
            total_inserted += inserted
            logger.info("Imported %d rows from %s", inserted, f.name)

        logger.info("DONE. Total inserted: %d (now %d expenses stored)", total_inserted, store.count())
    finally:
        session.close()

    return total_inserted


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(message)s")
    import_folder(Path(sys.argv[1]) if len(sys.argv) > 1 else NORMALIZED_DIR)
