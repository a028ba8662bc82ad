"""
Tests for bulk CSV import.
"""

from datetime import date
from decimal import Decimal

import pytest

from app.errors import ValidationError
from app.services.csv_import import import_expenses_csv, read_expenses_csv


def write_csv(tmp_path, text, name="expenses.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_reads_rows_with_normalized_headers(tmp_path):
    path = write_csv(
        tmp_path,
        " Date ,DESCRIPTION,Amount\n"
        "2024-03-01,Coffee,4.50\n"
        "2024-03-02,Groceries,\"1 234,56\"\n",
    )

    rows = read_expenses_csv(path)

    assert rows == [
        {"date": date(2024, 3, 1), "description": "Coffee", "amount": Decimal("4.50")},
        {"date": date(2024, 3, 2), "description": "Groceries", "amount": Decimal("1234.56")},
    ]


def test_skips_empty_rows_and_rows_without_description(tmp_path):
    path = write_csv(
        tmp_path,
        "date,description,amount\n"
        "2024-03-01,Coffee,4.50\n"
        ",,\n"
        "2024-03-03,,9.99\n",
    )

    rows = read_expenses_csv(path)

    assert [r["description"] for r in rows] == ["Coffee"]


def test_missing_column_is_rejected(tmp_path):
    path = write_csv(tmp_path, "date,description\n2024-03-01,Coffee\n")

    with pytest.raises(ValidationError, match="amount"):
        read_expenses_csv(path)


def test_bad_value_reports_file_and_line(tmp_path):
    path = write_csv(
        tmp_path,
        "date,description,amount\n"
        "2024-03-01,Coffee,4.50\n"
        "2024-03-02,Tea,lots\n",
    )

    with pytest.raises(ValidationError, match=r"expenses\.csv:3"):
        read_expenses_csv(path)


def test_import_inserts_into_store(tmp_path, store, reports):
    path = write_csv(
        tmp_path,
        "date,description,amount\n"
        "2024-03-01,Coffee,4.50\n"
        "2024-04-01,Rent,800\n",
    )

    assert import_expenses_csv(store, path) == 2
    assert store.count() == 2
    assert reports.total() == Decimal("804.50")
