# routes_root.py
"""
Root endpoints: the expense list (landing page) and a health check.
"""

import logging

from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from app.deps import get_store, templates
from app.errors import ExpenseError
from app.services.expense_store import ExpenseStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def expense_list_page(
    request: Request,
    store: ExpenseStore = Depends(get_store),
):
    """
    Show all expenses, most recent first, with the "new expense" form.
    """
    try:
        expenses = store.list_all()
    except ExpenseError:
        logger.exception("Error fetching expenses")
        return PlainTextResponse("Error fetching data", status_code=500)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": "Expense List",
            "expenses": expenses,
        },
    )


@router.get("/health")
def health_check():
    """
    Simple liveness endpoint.
    """
    return {"status": "ok"}
