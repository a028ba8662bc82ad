# routes_expenses.py
"""
Routes that change expenses: add, edit form, update, delete.

Browser forms post to /expenses/{id}?_method=PUT|DELETE; see app/middleware.py.
Every successful write redirects back to the list with 303 (See Other) so the
browser follows up with a GET.
"""

import logging

from fastapi import APIRouter, Request, Depends, Form
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from app.deps import get_store, templates
from app.errors import ExpenseError, NotFoundError
from app.services.expense_store import ExpenseStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _back_to_list() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


# -------------------------------------------------------------------
# Edit form
# -------------------------------------------------------------------

@router.get("/expenses/{expense_id}/edit", response_class=HTMLResponse)
def edit_expense_page(
    request: Request,
    expense_id: int,
    store: ExpenseStore = Depends(get_store),
):
    try:
        expense = store.get(expense_id)
    except NotFoundError:
        logger.warning("Edit requested for missing expense id=%s", expense_id)
        return PlainTextResponse("Expense not found", status_code=404)
    except ExpenseError:
        logger.exception("Error fetching expense id=%s for edit", expense_id)
        return PlainTextResponse("Error fetching data", status_code=500)

    return templates.TemplateResponse(
        request,
        "edit.html",
        {
            "title": "Edit Expense",
            "expense": expense,
        },
    )


# -------------------------------------------------------------------
# Create / update / delete
# -------------------------------------------------------------------

@router.post("/expenses")
def add_expense(
    description: str = Form(""),
    amount: str = Form(""),
    date: str = Form(""),
    store: ExpenseStore = Depends(get_store),
):
    try:
        store.create(description, amount, date)
    except ExpenseError:
        logger.exception(
            "Error adding expense (description=%r amount=%r date=%r)", description, amount, date
        )
        return PlainTextResponse("Error saving data", status_code=500)

    return _back_to_list()


@router.put("/expenses/{expense_id}")
def update_expense(
    expense_id: int,
    description: str = Form(""),
    amount: str = Form(""),
    date: str = Form(""),
    store: ExpenseStore = Depends(get_store),
):
    try:
        store.update(expense_id, description, amount, date)
    except NotFoundError:
        logger.warning("Update requested for missing expense id=%s", expense_id)
        return PlainTextResponse("Expense not found", status_code=404)
    except ExpenseError:
        logger.exception(
            "Error updating expense id=%s (description=%r amount=%r date=%r)",
            expense_id, description, amount, date,
        )
        return PlainTextResponse("Error updating data", status_code=500)

    return _back_to_list()


@router.delete("/expenses/{expense_id}")
def delete_expense(
    expense_id: int,
    store: ExpenseStore = Depends(get_store),
):
    try:
        store.delete(expense_id)
    except ExpenseError:
        logger.exception("Error deleting expense id=%s", expense_id)
        return PlainTextResponse("Error deleting data", status_code=500)

    return _back_to_list()
