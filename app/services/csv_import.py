# app/services/csv_import.py
#
# CSV Import
# Reads expense CSV exports (date, description, amount) with pandas and
# normalizes them into row dicts the ExpenseStore can bulk insert.

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from app.errors import ValidationError
from app.services.expense_store import ExpenseStore
from app.services.import_helpers import parse_amount, parse_expense_date

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"date", "description", "amount"}


def _none_if_nan(x):
    if pd.isna(x):
        return None
    s = str(x).strip()
    return None if s == "" or s.lower() == "nan" else s


def _clean_amount(value: Any) -> str:
    # "1 234,56" -> "1234.56"
    return str(value).replace(" ", "").replace(",", ".").strip()


def read_expenses_csv(file_path: str | Path) -> List[Dict[str, Any]]:
    """
    Parse one CSV file into a list of {date, description, amount} dicts.

    Headers are matched case-insensitively. Fully empty rows and rows
    without a description are skipped. Raises ValidationError when a
    required column is missing or a value cannot be parsed.
    """
    file_path = Path(file_path)
    df = pd.read_csv(file_path, dtype=str, keep_default_na=True)

    # normalize headers
    df.columns = df.columns.str.strip().str.lower()

    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValidationError(f"{file_path.name}: missing required columns: {sorted(missing)}")

    # drop fully empty rows
    df = df.dropna(how="all")

    rows: List[Dict[str, Any]] = []
    # line numbers as seen in the file (header is line 1)
    for line_no, row in zip(df.index + 2, df.itertuples(index=False)):
        description = _none_if_nan(getattr(row, "description"))
        if description is None:
            logger.debug("%s:%d skipped (no description)", file_path.name, line_no)
            continue

        try:
            amount = parse_amount(_clean_amount(_none_if_nan(getattr(row, "amount")) or ""))
            date_value = parse_expense_date(_none_if_nan(getattr(row, "date")))
        except ValidationError as e:
            raise ValidationError(f"{file_path.name}:{line_no}: {e}") from e

        rows.append({"date": date_value, "description": description, "amount": amount})

    return rows


def import_expenses_csv(store: ExpenseStore, file_path: str | Path) -> int:
    """
    Read a CSV file and insert all its rows in one commit.
    Returns the number of expenses inserted.
    """
    rows = read_expenses_csv(file_path)
    inserted = store.bulk_create(rows)
    logger.info("Imported %d expenses from %s", inserted, Path(file_path).name)
    return inserted
