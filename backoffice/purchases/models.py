from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, String, Date, Numeric, Index
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.main import Base


class PurchaseInvoice(Base):
    """
    PurchaseInvoice model representing a supplier invoice.

    Attributes:
        id: Primary key
        invoice_number: Supplier's invoice number
        invoice_date: Calendar date of the invoice
        supplier_name: Supplier
        total_amount: Invoice total
        payment_terms: Credit or Cash
        processed: True once the items were added to inventory
        balance_due: Amount still owed to the supplier
        payment_status: Unpaid, Partially Paid or Paid
    """
    __tablename__ = 'purchaseinvoices'

    __table_args__ = (
        Index('idx_purchaseinvoices_payment_status', 'payment_status'),
        {'comment': 'Supplier invoices and their payment state'}
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    invoice_number: Mapped[str] = mapped_column('invoicenumber', String(64), nullable=False)
    invoice_date: Mapped[date] = mapped_column('invoicedate', Date, nullable=False)
    supplier_name: Mapped[str] = mapped_column('suppliername', String(255), nullable=False)
    total_amount: Mapped[Decimal] = mapped_column('totalamount', Numeric(12, 2), nullable=False)
    payment_terms: Mapped[Optional[str]] = mapped_column('paymentterms', String(20))
    processed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    balance_due: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    payment_status: Mapped[Optional[str]] = mapped_column(String(20))
