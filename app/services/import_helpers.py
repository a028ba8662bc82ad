# app/services/import_helpers.py
#
# Input Parsing Helpers
# Converts raw form / CSV values into the typed values stored on an Expense,
# and validates YYYY-MM month keys used by the monthly report.

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from app.errors import ValidationError

MONTH_KEY_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")

# NUMERIC(12, 2): at most 10 digits before the decimal point
MAX_ABS_AMOUNT = Decimal("1e10")


# ---- Amounts ----

def parse_amount(value: Any) -> Decimal:
    """
    Parse a monetary amount ("4.50", 4.5, "  -12 ") into a Decimal.

    Raises ValidationError for blanks, non-numbers, NaN, infinities and
    values too large for the NUMERIC(12, 2) column.
    """
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool) or value is None:
        raise ValidationError(f"Invalid amount: {value!r}")
    else:
        s = str(value).strip()
        if not s:
            raise ValidationError("Amount is required")
        try:
            amount = Decimal(s)
        except InvalidOperation:
            raise ValidationError(f"Invalid amount: {value!r}") from None

    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}")
    if abs(amount) >= MAX_ABS_AMOUNT:
        raise ValidationError(f"Amount out of range: {value!r}")
    return amount


# ---- Dates ----

def parse_expense_date(value: Any, today: date | None = None) -> date:
    """
    Parse a YYYY-MM-DD string into a date.

    Missing or blank values fall back to today's date (used by both
    create and update). Malformed values raise ValidationError.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    s = (value or "").strip() if isinstance(value, str) else value
    if not s:
        return today or date.today()

    try:
        return datetime.strptime(str(s), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None


# ---- Descriptions ----

def parse_description(value: Any) -> str:
    if value is None:
        raise ValidationError("Description is required")
    return str(value)


# ---- Month keys ----

def is_month_key(value: str | None) -> bool:
    """True for well-formed 'YYYY-MM' keys (month 01-12)."""
    return bool(value) and MONTH_KEY_RE.match(value) is not None
