# models.py
# Role: SQLAlchemy ORM models for the expense tracker domain.
#       Defines the Expense model, the only persisted entity.

from sqlalchemy import Column, Integer, Date, Numeric, Text
from db import Base


class Expense(Base):
    """
    ORM model representing a single recorded expense.

    Amounts are stored as NUMERIC(12, 2) and read back as Decimal, so totals
    computed by the database do not accumulate float rounding error.
    """

    __tablename__ = "expenses"

    # Primary key (system-generated, never changes)
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Free-form text; also used as the grouping key on the dashboard
    description = Column(Text, nullable=False)

    # Single implicit currency; negative values (refunds) are allowed
    amount = Column(Numeric(12, 2, asdecimal=True), nullable=False)

    # Calendar date of the expense (no time-of-day)
    date = Column(Date, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Expense id={self.id} date={self.date} amount={self.amount} description={self.description!r}>"
