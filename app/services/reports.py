# app/services/reports.py
#
# Expense Reports
# Read-only grouped-sum projections over the expenses table. Every call is
# recomputed by the database from current state; nothing here writes.

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import Expense
from app.errors import PersistenceError

logger = logging.getLogger(__name__)


CENTS = Decimal("0.01")


def _as_decimal(value: Any) -> Decimal:
    if value is None:
        value = 0
    try:
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        return value.quantize(CENTS)
    except InvalidOperation as e:
        # stored value does not fit NUMERIC(12, 2)
        raise PersistenceError(f"Stored amount out of range: {value!r}") from e


class ExpenseReports:
    def __init__(self, db: Session):
        self.db = db

    # ---- Date keys (dialect-specific formatting) ----

    def _date_key(self, pattern: str):
        """
        SQL expression rendering Expense.date as text.
        pattern is 'month' (YYYY-MM) or 'day' (YYYY-MM-DD).
        """
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            fmt = "YYYY-MM" if pattern == "month" else "YYYY-MM-DD"
            return func.to_char(Expense.date, fmt)
        fmt = "%Y-%m" if pattern == "month" else "%Y-%m-%d"
        return func.strftime(fmt, Expense.date)

    # ---- Reports ----

    def total(self) -> Decimal:
        """Sum of all amounts; 0 when there are no expenses."""
        try:
            value = self.db.query(func.coalesce(func.sum(Expense.amount), 0)).scalar()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not compute total: {e}") from e
        return _as_decimal(value)

    def by_description(self) -> List[Dict[str, Any]]:
        """
        Totals per exact description string, largest first.
        """
        total_col = func.sum(Expense.amount)
        try:
            rows = (
                self.db.query(
                    Expense.description.label("category"),
                    total_col.label("total"),
                )
                .group_by(Expense.description)
                .order_by(total_col.desc(), Expense.description)
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not group by description: {e}") from e

        return [{"category": r.category, "total": _as_decimal(r.total)} for r in rows]

    def by_month(self) -> List[Dict[str, Any]]:
        """Totals per YYYY-MM, oldest month first."""
        month_key = self._date_key("month")
        try:
            rows = (
                self.db.query(
                    month_key.label("month"),
                    func.sum(Expense.amount).label("total"),
                )
                .group_by(month_key)
                .order_by(month_key)
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not group by month: {e}") from e

        return [{"month": r.month, "total": _as_decimal(r.total)} for r in rows]

    def daily_for_month(self, month: str) -> List[Dict[str, Any]]:
        """
        Totals per YYYY-MM-DD within one YYYY-MM month, in date order.

        A month with no expenses (or a malformed key) simply yields [].
        """
        month_key = self._date_key("month")
        day_key = self._date_key("day")
        try:
            rows = (
                self.db.query(
                    day_key.label("day"),
                    func.sum(Expense.amount).label("total"),
                )
                .filter(month_key == month)
                .group_by(day_key)
                .order_by(day_key)
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not group days of {month!r}: {e}") from e

        if not rows:
            logger.debug("No expenses for month %r", month)
        return [{"day": r.day, "total": _as_decimal(r.total)} for r in rows]
