from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Integer, String, DateTime, Numeric,
    ForeignKey, Index, CheckConstraint
)
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.main import Base


class Sale(Base):
    """
    Sale model representing one completed point-of-sale transaction.

    The table is written by the POS checkout; this service only reads it.
    Column names follow the existing schema (unquoted, lower-cased identifiers).

    Attributes:
        id: Primary key
        date: Timestamp of the sale (full precision, with time zone)
        total_amount: Total charged, equal to the sum of the items' total_price
        payment_method: Cash, Card, Transfer or Combined
        customer_id: Optional customer reference
        cashier_id: User who registered the sale
    """
    __tablename__ = 'sales'

    __table_args__ = (
        Index('idx_sales_date', 'date'),
        {'comment': 'Completed point-of-sale transactions'}
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    total_amount: Mapped[Decimal] = mapped_column('totalamount', Numeric(12, 2), nullable=False)
    payment_method: Mapped[Optional[str]] = mapped_column('paymentmethod', String(20))
    customer_id: Mapped[Optional[str]] = mapped_column('customerid', String(64))
    cashier_id: Mapped[Optional[str]] = mapped_column('cashierid', String(64))


class SaleItem(Base):
    """
    SaleItem model representing a single line of a sale.

    cost_price is the per-unit cost recorded at sale time, not the live
    product cost, so COGS for past periods does not move when prices change.
    """
    __tablename__ = 'saleitems'

    __table_args__ = (
        CheckConstraint('quantity >= 0', name='check_saleitems_quantity_non_negative'),
        CheckConstraint('costprice >= 0', name='check_saleitems_costprice_non_negative'),
        Index('idx_saleitems_sale_id', 'sale_id'),
        Index('idx_saleitems_product_id', 'product_id'),
        {'comment': 'Line items of completed sales with historical cost'}
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    sale_id: Mapped[str] = mapped_column(String(64), ForeignKey('sales.id', ondelete='CASCADE'), nullable=False)
    product_id: Mapped[str] = mapped_column(String(64), ForeignKey('products.id'), nullable=False)
    product_name: Mapped[str] = mapped_column('productname', String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column('unitprice', Numeric(12, 2), nullable=False)
    cost_price: Mapped[Decimal] = mapped_column('costprice', Numeric(12, 2), nullable=False)
    total_price: Mapped[Decimal] = mapped_column('totalprice', Numeric(12, 2), nullable=False)
