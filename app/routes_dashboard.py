# app/routes_dashboard.py

import logging

from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from .deps import templates, get_reports
from .errors import ExpenseError
from .services.reports import ExpenseReports

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard_page(
    request: Request,
    reports: ExpenseReports = Depends(get_reports),
):
    try:
        total_expenses = reports.total()
        # description doubles as the category until a real category exists
        category_data = reports.by_description()
    except ExpenseError:
        logger.exception("Error fetching dashboard data")
        return PlainTextResponse("Error fetching dashboard data", status_code=500)

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "title": "Expense Dashboard",
            "total_expenses": total_expenses,
            "category_data": category_data,
            "chart_labels": [row["category"] for row in category_data],
            "chart_values": [float(row["total"]) for row in category_data],
        },
    )
