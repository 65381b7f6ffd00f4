from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, String, Text, Date, DateTime, Numeric, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from backoffice.db.main import Base


class DailyExpense(Base):
    """
    DailyExpense model representing an operating expense entry.

    expense_date is a calendar date without time of day; the profit & loss
    report compares it directly against the requested dates.
    """
    __tablename__ = 'dailyexpenses'

    __table_args__ = (
        Index('idx_dailyexpenses_expensedate', 'expensedate'),
        {'comment': 'Operating expenses entered from the back office'}
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    expense_date: Mapped[date] = mapped_column('expensedate', Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column('createdat', DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column('updatedat', DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
