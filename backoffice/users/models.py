from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import Integer, String, Text, DateTime, Boolean
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func, expression

from backoffice.db.main import Base


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class User(Base):
    """
    User model representing a back-office account.

    Attributes:
        id: Primary key (auto-incremented)
        email: Login e-mail (unique)
        role: Role name, see UserRole
        full_name: Display name (nullable)
        password_hash: Never selected by this service
        is_active: Account status (default true)
        supabase_user_id: Identity provider reference (nullable)
        created_at: Timestamp of creation
        updated_at: Timestamp of last update
    """
    __tablename__ = 'users'

    __table_args__ = (
        {'comment': 'Back-office user accounts'}
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    role: Mapped[str] = mapped_column(String(50), nullable=False, default=UserRole.EMPLOYEE.value)
    full_name: Mapped[Optional[str]] = mapped_column(String(255))
    password_hash: Mapped[Optional[str]] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=expression.true())
    supabase_user_id: Mapped[Optional[str]] = mapped_column(String(64))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
