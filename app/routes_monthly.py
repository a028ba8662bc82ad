# routes_monthly.py
"""
Monthly report: an HTML page plus the JSON feeds its chart fetches.
"""

import logging

from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from app.deps import get_reports, templates
from app.errors import ExpenseError
from app.services.import_helpers import is_month_key
from app.services.reports import ExpenseReports

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_json_rows(rows, key: str):
    # Decimal totals become plain JSON numbers
    return [{key: row[key], "total": float(row["total"])} for row in rows]


@router.get("/monthly", response_class=HTMLResponse)
def monthly_page(
    request: Request,
    reports: ExpenseReports = Depends(get_reports),
):
    try:
        monthly_data = reports.by_month()
    except ExpenseError:
        logger.exception("Error fetching monthly expenses")
        return PlainTextResponse("Error fetching monthly expenses", status_code=500)

    return templates.TemplateResponse(
        request,
        "monthly.html",
        {
            "title": "Monthly Expense Report",
            "monthly_data": monthly_data,
        },
    )


@router.get("/monthly/data")
def monthly_data(reports: ExpenseReports = Depends(get_reports)):
    try:
        rows = reports.by_month()
    except ExpenseError:
        logger.exception("Error fetching monthly expenses data")
        return JSONResponse({"error": "Failed to fetch monthly expenses data"}, status_code=500)

    return _to_json_rows(rows, "month")


@router.get("/monthly/daily/{month}")
def daily_data(month: str, reports: ExpenseReports = Depends(get_reports)):
    if not is_month_key(month):
        logger.info("Daily data requested for malformed month %r", month)
        return []

    try:
        rows = reports.daily_for_month(month)
    except ExpenseError:
        logger.exception("Error fetching daily expenses data (month=%r)", month)
        return JSONResponse({"error": "Failed to fetch daily expenses data"}, status_code=500)

    return _to_json_rows(rows, "day")
