"""SQLAlchemy ORM model for dashboard users (admins)."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from audit_dashboard.db.base import Base
from audit_dashboard.domain.mixins import TimestampMixin


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # Only "admin" exists today
    role: Mapped[str] = mapped_column(String(50), default="admin", nullable=False)
