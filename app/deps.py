# app/deps.py
# Role: Shared application-level dependencies.
#       Provides the Jinja2 templates loader, the per-request database session,
#       and the store/report objects routes use instead of the raw session.

"""
Shared dependencies for the expense tracker app.
"""

import os
from typing import Generator

from fastapi import Depends
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from db import SessionLocal
from app.services.expense_store import ExpenseStore
from app.services.reports import ExpenseReports

# -------------------------------------------------------------------
# Paths
# -------------------------------------------------------------------

APP_DIR = os.path.dirname(os.path.abspath(__file__))
TEMPLATES_DIR = os.path.join(APP_DIR, "templates")
STATIC_DIR = os.path.join(APP_DIR, "static")

# -------------------------------------------------------------------
# Templates
# -------------------------------------------------------------------

# Jinja2 templates loader (used by all HTML-rendering routes)
templates = Jinja2Templates(directory=TEMPLATES_DIR)

# -------------------------------------------------------------------
# Database dependency
# -------------------------------------------------------------------

def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session and ensures it is closed,
    whether the request succeeds or fails.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> ExpenseStore:
    return ExpenseStore(db)


def get_reports(db: Session = Depends(get_db)) -> ExpenseReports:
    return ExpenseReports(db)
