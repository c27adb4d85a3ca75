"""SQLAlchemy ORM model for Companies (seeded, read-only through the API)."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from audit_dashboard.db.base import Base
from audit_dashboard.domain.mixins import TimestampMixin

# (internal name, display name)
DEFAULT_COMPANIES: tuple[tuple[str, str], ...] = (
    ("carol", "Carol"),
    ("grand-vision", "Grand Vision"),
    ("sunglass-hut", "SunglassHut"),
)


class Company(Base, TimestampMixin):
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
