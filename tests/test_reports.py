"""
Tests for the read-only aggregation queries.
"""

from datetime import date
from decimal import Decimal

import pytest

from app.errors import PersistenceError
from db import Base, engine
from models import Expense


@pytest.fixture
def sample(store):
    rows = [
        ("Coffee", "4.50", "2024-03-01"),
        ("Coffee", "3.20", "2024-03-01"),
        ("Groceries", "55.10", "2024-03-15"),
        ("coffee", "2.00", "2024-04-02"),
        ("Rent", "800.00", "2024-04-01"),
        ("Refund", "-10.00", "2024-01-20"),
    ]
    for description, amount, day in rows:
        store.create(description, amount, day)
    return rows


class TestTotal:
    def test_empty_store_is_zero(self, reports):
        total = reports.total()
        assert total == 0
        assert isinstance(total, Decimal)

    def test_equals_sum_of_amounts(self, reports, sample):
        expected = sum(Decimal(amount) for _, amount, _ in sample)
        assert reports.total() == expected

    def test_sums_without_float_drift(self, store, reports):
        for _ in range(10):
            store.create("Penny", "0.10", "2024-01-01")
        assert reports.total() == Decimal("1.00")

    def test_reflects_current_state(self, store, reports):
        created = store.create("Coffee", "4.50", "2024-03-01")
        assert reports.total() == Decimal("4.50")
        store.delete(created.id)
        assert reports.total() == 0


class TestByDescription:
    def test_groups_on_exact_text_largest_first(self, reports, sample):
        assert reports.by_description() == [
            {"category": "Rent", "total": Decimal("800.00")},
            {"category": "Groceries", "total": Decimal("55.10")},
            {"category": "Coffee", "total": Decimal("7.70")},
            {"category": "coffee", "total": Decimal("2.00")},
            {"category": "Refund", "total": Decimal("-10.00")},
        ]

    def test_whitespace_is_significant(self, store, reports):
        store.create("Tea", "1", "2024-01-01")
        store.create("Tea ", "1", "2024-01-01")
        assert len(reports.by_description()) == 2

    def test_empty(self, reports):
        assert reports.by_description() == []


class TestByMonth:
    def test_grouped_and_ordered_chronologically(self, reports, sample):
        assert reports.by_month() == [
            {"month": "2024-01", "total": Decimal("-10.00")},
            {"month": "2024-03", "total": Decimal("62.80")},
            {"month": "2024-04", "total": Decimal("802.00")},
        ]

    def test_months_partition_the_total(self, reports, sample):
        assert sum(row["total"] for row in reports.by_month()) == reports.total()

    def test_year_boundary_sorts_correctly(self, store, reports):
        store.create("Late", "1", "2023-12-31")
        store.create("Early", "1", "2024-01-01")
        assert [row["month"] for row in reports.by_month()] == ["2023-12", "2024-01"]


class TestDailyForMonth:
    def test_days_within_month(self, reports, sample):
        assert reports.daily_for_month("2024-03") == [
            {"day": "2024-03-01", "total": Decimal("7.70")},
            {"day": "2024-03-15", "total": Decimal("55.10")},
        ]

    def test_days_sum_to_month_total(self, reports, sample):
        monthly = {row["month"]: row["total"] for row in reports.by_month()}
        for month, month_total in monthly.items():
            days = reports.daily_for_month(month)
            assert all(row["day"].startswith(month) for row in days)
            assert sum(row["total"] for row in days) == month_total

    @pytest.mark.parametrize("month", ["2025-07", "2024-3", "garbage", ""])
    def test_unknown_or_malformed_month_is_empty(self, reports, sample, month):
        assert reports.daily_for_month(month) == []


def test_database_failures_surface_as_persistence_error(reports):
    Base.metadata.drop_all(bind=engine)

    with pytest.raises(PersistenceError):
        reports.total()
    with pytest.raises(PersistenceError):
        reports.by_month()


def test_stored_amount_beyond_column_precision_is_a_persistence_error(session, reports):
    # rows written by other tools bypass parse_amount
    session.add(Expense(description="Legacy", amount=Decimal("1e27"), date=date(2024, 3, 1)))
    session.commit()

    with pytest.raises(PersistenceError):
        reports.total()
    with pytest.raises(PersistenceError):
        reports.by_month()
