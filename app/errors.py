# app/errors.py
"""Domain-specific exceptions raised by the expense store and reports."""


class ExpenseError(Exception):
    """Base class for every failure the store/report layer reports."""


class ValidationError(ExpenseError, ValueError):
    """Raised when an amount, date or description cannot be accepted."""


class NotFoundError(ExpenseError, LookupError):
    """Raised when an operation targets an expense id that does not exist."""

    def __init__(self, expense_id: int):
        super().__init__(f"Expense {expense_id} not found")
        self.expense_id = expense_id


class PersistenceError(ExpenseError):
    """Raised when the underlying database operation fails."""
