"""SQLAlchemy ORM model for uploaded compliance audits."""

from __future__ import annotations

import enum
from datetime import date
from typing import Optional

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from audit_dashboard.db.base import Base
from audit_dashboard.domain.mixins import TimestampMixin


class AuditStatus(str, enum.Enum):
    """Outcome of an audit. Values are the wire/storage representation."""

    APPROVED = "aprovada"
    APPROVED_WITH_WARNING = "aprovada-com-aviso"
    REJECTED = "reprovada"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class Audit(Base, TimestampMixin):
    """One uploaded audit file. Created on upload, deleted by id, never updated."""

    __tablename__ = "audits"
    __table_args__ = (
        CheckConstraint(
            "status IN ('aprovada', 'aprovada-com-aviso', 'reprovada')",
            name="ck_audits_status",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("companies.id"), nullable=False, index=True
    )

    # File storage reference
    filename: Mapped[str] = mapped_column(String(500), nullable=False)
    original_filename: Mapped[str] = mapped_column(String(255), nullable=False)
    file_path: Mapped[str] = mapped_column(String(1000), nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, nullable=False)
    file_type: Mapped[str] = mapped_column(String(255), nullable=False)

    audit_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    branch_number: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    uploaded_by: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True
    )
