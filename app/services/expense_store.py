# app/services/expense_store.py
#
# Expense Store
# The only component allowed to create, change or remove Expense rows.
# Wraps one SQLAlchemy session; every write is a single commit, and any
# database failure is rolled back and re-raised as PersistenceError.

import logging
from typing import Any, Dict, Iterable, List

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import Expense
from app.errors import NotFoundError, PersistenceError
from app.services.import_helpers import (
    parse_amount,
    parse_description,
    parse_expense_date,
)

logger = logging.getLogger(__name__)


class ExpenseStore:
    def __init__(self, db: Session):
        self.db = db

    # ---- Reads ----

    def list_all(self) -> List[Expense]:
        """All expenses, most recent first (ties: newest id first)."""
        try:
            return (
                self.db.query(Expense)
                .order_by(Expense.date.desc(), Expense.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not list expenses: {e}") from e

    def get(self, expense_id: int) -> Expense:
        try:
            expense = self.db.get(Expense, expense_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not load expense {expense_id}: {e}") from e

        if expense is None:
            raise NotFoundError(expense_id)
        return expense

    def count(self) -> int:
        try:
            return self.db.query(func.count(Expense.id)).scalar() or 0
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not count expenses: {e}") from e

    # ---- Writes ----

    def create(self, description: Any, amount: Any, date_value: Any = None) -> Expense:
        """
        Insert a new expense and return it with its generated id.

        amount must parse as a number; a missing date defaults to today.
        """
        expense = Expense(
            description=parse_description(description),
            amount=parse_amount(amount),
            date=parse_expense_date(date_value),
        )

        self.db.add(expense)
        self._commit("create", refresh=expense)

        logger.info("Created expense id=%s date=%s amount=%s", expense.id, expense.date, expense.amount)
        return expense

    def bulk_create(self, rows: Iterable[Dict[str, Any]]) -> int:
        """
        Insert many {description, amount, date} dicts in one commit.
        Returns the number of rows inserted.
        """
        expenses = [
            Expense(
                description=parse_description(row.get("description")),
                amount=parse_amount(row.get("amount")),
                date=parse_expense_date(row.get("date")),
            )
            for row in rows
        ]
        if not expenses:
            return 0

        self.db.add_all(expenses)
        self._commit("bulk_create")

        logger.info("Inserted %d expenses", len(expenses))
        return len(expenses)

    def update(self, expense_id: int, description: Any, amount: Any, date_value: Any) -> Expense:
        """
        Overwrite all three fields of an existing expense (last write wins).
        """
        # Parse before loading so bad input never leaves a half-edited row
        new_description = parse_description(description)
        new_amount = parse_amount(amount)
        new_date = parse_expense_date(date_value)

        expense = self.get(expense_id)
        expense.description = new_description
        expense.amount = new_amount
        expense.date = new_date

        self._commit("update", refresh=expense)

        logger.info("Updated expense id=%s", expense_id)
        return expense

    def delete(self, expense_id: int) -> int:
        """
        Remove an expense. Deleting an unknown id is a no-op.
        Returns the number of rows removed (0 or 1).
        """
        try:
            removed = (
                self.db.query(Expense)
                .filter(Expense.id == expense_id)
                .delete(synchronize_session=False)
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not delete expense {expense_id}: {e}") from e

        self._commit("delete")

        if removed:
            logger.info("Deleted expense id=%s", expense_id)
        else:
            logger.info("Delete of expense id=%s matched no rows", expense_id)
        return removed

    # ---- Internals ----

    def _commit(self, operation: str, refresh: Expense | None = None) -> None:
        try:
            self.db.commit()
            if refresh is not None:
                self.db.refresh(refresh)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"{operation} failed: {e}") from e
