"""Persistence contract shared by the SQL and in-memory backends.

Services and the stats engine are written against :class:`Store` only; they
never know which backend is active.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import date
from typing import Any

from audit_dashboard.domain import Audit, Company, News, User

# Ids are signed 64-bit integers on every backend.
MAX_ID = 2**63 - 1


@dataclass(frozen=True)
class AuditFilter:
    """Conjunctive audit filter. ``None`` means "don't filter on this"."""

    company_id: int | None = None
    status: str | None = None
    date_from: date | None = None
    date_to: date | None = None


class Store(abc.ABC):
    # ------------------------------------------------------------------
    # Companies
    # ------------------------------------------------------------------

    @abc.abstractmethod
    async def find_company(self, name: str) -> Company | None: ...

    @abc.abstractmethod
    async def get_company(self, company_id: int) -> Company | None: ...

    @abc.abstractmethod
    async def list_companies(self) -> list[Company]:
        """All companies ordered by display name."""

    @abc.abstractmethod
    async def ensure_company(self, name: str, display_name: str) -> Company:
        """Return the company named ``name``, creating it when missing (seeding)."""

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    @abc.abstractmethod
    async def find_user(self, email: str) -> User | None: ...

    @abc.abstractmethod
    async def get_user(self, user_id: int) -> User | None: ...

    @abc.abstractmethod
    async def insert_user(self, *, email: str, password_hash: str, role: str = "admin") -> User:
        """Raises ConflictError when ``email`` is already taken."""

    @abc.abstractmethod
    async def update_user_password(self, user_id: int, password_hash: str) -> bool: ...

    # ------------------------------------------------------------------
    # Audits
    # ------------------------------------------------------------------

    @abc.abstractmethod
    async def list_audits(
        self, filters: AuditFilter | None = None, *, offset: int = 0, limit: int | None = None
    ) -> tuple[list[Audit], int]:
        """Return (page, total matching) ordered newest-created first."""

    @abc.abstractmethod
    async def get_audit(self, audit_id: int) -> Audit | None: ...

    @abc.abstractmethod
    async def insert_audit(self, **fields: Any) -> Audit:
        """Persist a new audit; the backend assigns ``id`` and ``created_at``."""

    @abc.abstractmethod
    async def delete_audit(self, audit_id: int) -> bool: ...

    # ------------------------------------------------------------------
    # News
    # ------------------------------------------------------------------

    @abc.abstractmethod
    async def list_news(self, *, offset: int = 0, limit: int | None = None) -> tuple[list[News], int]:
        """Return (page, total) ordered by news_date desc, then created_at desc."""

    @abc.abstractmethod
    async def get_news(self, news_id: int) -> News | None: ...

    @abc.abstractmethod
    async def insert_news(self, **fields: Any) -> News: ...

    @abc.abstractmethod
    async def update_news(self, news_id: int, **fields: Any) -> News | None: ...

    @abc.abstractmethod
    async def delete_news(self, news_id: int) -> bool: ...
