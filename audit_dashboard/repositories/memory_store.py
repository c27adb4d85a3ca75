"""Volatile :class:`Store` for constrained deployments.

All data lives in one :class:`MemoryDatabase` that the application creates at
startup and drops at shutdown. Every operation completes without awaiting
mid-mutation, so interleaved requests on one event loop never observe a
half-applied change. Nothing survives a restart.
"""

from __future__ import annotations

import itertools
from datetime import datetime, timezone
from typing import Any

from audit_dashboard.core.exceptions import ConflictError
from audit_dashboard.domain import Audit, Company, News, User
from audit_dashboard.repositories.store import AuditFilter, Store


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MemoryDatabase:
    """Process-lifetime collections plus per-collection id counters."""

    def __init__(self) -> None:
        self.companies: dict[int, Company] = {}
        self.users: dict[int, User] = {}
        self.audits: dict[int, Audit] = {}
        self.news: dict[int, News] = {}
        self._ids = {
            "companies": itertools.count(1),
            "users": itertools.count(1),
            "audits": itertools.count(1),
            "news": itertools.count(1),
        }

    def next_id(self, collection: str) -> int:
        return next(self._ids[collection])

    def clear(self) -> None:
        self.companies.clear()
        self.users.clear()
        self.audits.clear()
        self.news.clear()


def _page(items: list, offset: int, limit: int | None) -> list:
    end = None if limit is None else offset + limit
    return items[offset:end]


class MemoryStore(Store):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    # ------------------------------------------------------------------
    # Companies
    # ------------------------------------------------------------------

    async def find_company(self, name: str) -> Company | None:
        return next((c for c in self._db.companies.values() if c.name == name), None)

    async def get_company(self, company_id: int) -> Company | None:
        return self._db.companies.get(company_id)

    async def list_companies(self) -> list[Company]:
        return sorted(self._db.companies.values(), key=lambda c: (c.display_name, c.id))

    async def ensure_company(self, name: str, display_name: str) -> Company:
        existing = await self.find_company(name)
        if existing is not None:
            return existing
        now = _now()
        company = Company(
            id=self._db.next_id("companies"),
            name=name,
            display_name=display_name,
            created_at=now,
            updated_at=now,
        )
        self._db.companies[company.id] = company
        return company

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def find_user(self, email: str) -> User | None:
        return next((u for u in self._db.users.values() if u.email == email), None)

    async def get_user(self, user_id: int) -> User | None:
        return self._db.users.get(user_id)

    async def insert_user(self, *, email: str, password_hash: str, role: str = "admin") -> User:
        if any(u.email == email for u in self._db.users.values()):
            raise ConflictError("User already exists")
        now = _now()
        user = User(
            id=self._db.next_id("users"),
            email=email,
            password_hash=password_hash,
            role=role,
            created_at=now,
            updated_at=now,
        )
        self._db.users[user.id] = user
        return user

    async def update_user_password(self, user_id: int, password_hash: str) -> bool:
        user = self._db.users.get(user_id)
        if user is None:
            return False
        user.password_hash = password_hash
        user.updated_at = _now()
        return True

    # ------------------------------------------------------------------
    # Audits
    # ------------------------------------------------------------------

    async def list_audits(
        self, filters: AuditFilter | None = None, *, offset: int = 0, limit: int | None = None
    ) -> tuple[list[Audit], int]:
        f = filters or AuditFilter()
        matched = [
            a for a in self._db.audits.values()
            if (f.company_id is None or a.company_id == f.company_id)
            and (f.status is None or a.status == f.status)
            and (f.date_from is None or a.audit_date >= f.date_from)
            and (f.date_to is None or a.audit_date <= f.date_to)
        ]
        matched.sort(key=lambda a: (a.created_at, a.id), reverse=True)
        return _page(matched, offset, limit), len(matched)

    async def get_audit(self, audit_id: int) -> Audit | None:
        return self._db.audits.get(audit_id)

    async def insert_audit(self, **fields: Any) -> Audit:
        now = _now()
        fields.pop("id", None)
        audit = Audit(id=self._db.next_id("audits"), created_at=now, updated_at=now, **fields)
        self._db.audits[audit.id] = audit
        return audit

    async def delete_audit(self, audit_id: int) -> bool:
        return self._db.audits.pop(audit_id, None) is not None

    # ------------------------------------------------------------------
    # News
    # ------------------------------------------------------------------

    async def list_news(self, *, offset: int = 0, limit: int | None = None) -> tuple[list[News], int]:
        items = sorted(
            self._db.news.values(),
            key=lambda n: (n.news_date, n.created_at, n.id),
            reverse=True,
        )
        return _page(items, offset, limit), len(items)

    async def get_news(self, news_id: int) -> News | None:
        return self._db.news.get(news_id)

    async def insert_news(self, **fields: Any) -> News:
        now = _now()
        fields.pop("id", None)
        news = News(id=self._db.next_id("news"), created_at=now, updated_at=now, **fields)
        self._db.news[news.id] = news
        return news

    async def update_news(self, news_id: int, **fields: Any) -> News | None:
        news = self._db.news.get(news_id)
        if news is None:
            return None
        fields.pop("id", None)
        for name, value in fields.items():
            setattr(news, name, value)
        news.updated_at = _now()
        return news

    async def delete_news(self, news_id: int) -> bool:
        return self._db.news.pop(news_id, None) is not None
