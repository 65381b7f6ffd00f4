from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, String, Text, Numeric, Index
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.db.main import Base


class Product(Base):
    """
    Product model representing an inventory item.

    Attributes:
        id: Primary key
        name: Display name
        code: Internal product code (shown in the top-selling report)
        reference: Supplier reference
        barcode: EAN/UPC barcode (nullable)
        stock: Units on hand
        min_stock: Reorder threshold; 0 < stock < min_stock counts as low stock
        max_stock: Target stock level
        cost: Current unit cost
        price: Current selling price
    """
    __tablename__ = 'products'

    __table_args__ = (
        Index('idx_products_code', 'code'),
        {'comment': 'Inventory items'}
    )

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(64), nullable=False)
    reference: Mapped[Optional[str]] = mapped_column(String(64))
    barcode: Mapped[Optional[str]] = mapped_column(String(64))
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category: Mapped[Optional[str]] = mapped_column(String(100))
    brand: Mapped[Optional[str]] = mapped_column(String(100))
    min_stock: Mapped[int] = mapped_column('minstock', Integer, nullable=False, default=0)
    max_stock: Mapped[int] = mapped_column('maxstock', Integer, nullable=False, default=0)
    cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column('imageurl', Text)
