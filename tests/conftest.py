"""
Shared fixtures.

DATABASE_URL is pointed at an in-memory SQLite database before anything
imports db.py, so tests never touch database/expenses.db.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from db import Base, SessionLocal, engine, init_db  # noqa: E402
from app.main import app  # noqa: E402
from app.services.expense_store import ExpenseStore  # noqa: E402
from app.services.reports import ExpenseReports  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_db():
    """Create the schema for each test and drop it afterwards."""
    init_db(engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def store(session):
    return ExpenseStore(session)


@pytest.fixture
def reports(session):
    return ExpenseReports(session)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
