from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, String, Text, Numeric, Index
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.main import Base


class Customer(Base):
    """
    Customer model representing a buyer with an optional credit account.

    outstanding_balance is what the customer owes; only positive balances
    count as accounts receivable.
    """
    __tablename__ = 'customers'

    __table_args__ = (
        Index('idx_customers_name', 'name'),
        {'comment': 'Customers and their credit balances'}
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255))
    phone: Mapped[Optional[str]] = mapped_column(String(50))
    address: Mapped[Optional[str]] = mapped_column(Text)
    identification_number: Mapped[Optional[str]] = mapped_column(String(50))
    purchase_history_count: Mapped[int] = mapped_column('purchasehistorycount', Integer, nullable=False, default=0)
    total_spent: Mapped[Decimal] = mapped_column('totalspent', Numeric(12, 2), nullable=False, default=Decimal("0"))
    credit_limit: Mapped[Optional[Decimal]] = mapped_column('creditlimit', Numeric(12, 2))
    outstanding_balance: Mapped[Optional[Decimal]] = mapped_column('outstandingbalance', Numeric(12, 2))
