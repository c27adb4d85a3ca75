"""Durable :class:`Store` backed by async SQLAlchemy.

One instance wraps one request-scoped AsyncSession; the request dependency
commits on success and rolls back on error.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from audit_dashboard.core.exceptions import ConflictError, StorageError
from audit_dashboard.domain import Audit, Company, News, User
from audit_dashboard.repositories.audit import AuditRepository
from audit_dashboard.repositories.company import CompanyRepository
from audit_dashboard.repositories.news import NewsRepository
from audit_dashboard.repositories.store import AuditFilter, Store
from audit_dashboard.repositories.user import UserRepository

logger = logging.getLogger(__name__)


def _storage_errors(func):
    """Translate driver/ORM failures into StorageError, keeping the detail in the log.

    OverflowError comes from the sqlite3 driver binding an int wider than 64 bits.
    """

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except (SQLAlchemyError, OverflowError) as exc:
            logger.error("%s failed: %s", func.__name__, exc)
            raise StorageError(f"{func.__name__} failed: {exc}") from exc

    return wrapper


class SqlStore(Store):
    def __init__(self, session: AsyncSession):
        self._session = session
        self._companies = CompanyRepository(session)
        self._users = UserRepository(session)
        self._audits = AuditRepository(session)
        self._news = NewsRepository(session)

    # ------------------------------------------------------------------
    # Companies
    # ------------------------------------------------------------------

    @_storage_errors
    async def find_company(self, name: str) -> Company | None:
        return await self._companies.get_by_name(name)

    @_storage_errors
    async def get_company(self, company_id: int) -> Company | None:
        return await self._companies.get_by_id(company_id)

    @_storage_errors
    async def list_companies(self) -> list[Company]:
        return await self._companies.list_by_display_name()

    @_storage_errors
    async def ensure_company(self, name: str, display_name: str) -> Company:
        company = await self._companies.get_by_name(name)
        if company is None:
            company = await self._companies.create(name=name, display_name=display_name)
        return company

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    @_storage_errors
    async def find_user(self, email: str) -> User | None:
        return await self._users.get_by_email(email)

    @_storage_errors
    async def get_user(self, user_id: int) -> User | None:
        return await self._users.get_by_id(user_id)

    @_storage_errors
    async def insert_user(self, *, email: str, password_hash: str, role: str = "admin") -> User:
        try:
            return await self._users.create(email=email, password_hash=password_hash, role=role)
        except IntegrityError as exc:
            # users.email is unique; a concurrent insert won the race
            logger.info("Duplicate user insert for %s: %s", email, exc.orig)
            raise ConflictError("User already exists") from exc

    @_storage_errors
    async def update_user_password(self, user_id: int, password_hash: str) -> bool:
        return await self._users.update(user_id, password_hash=password_hash) is not None

    # ------------------------------------------------------------------
    # Audits
    # ------------------------------------------------------------------

    @_storage_errors
    async def list_audits(
        self, filters: AuditFilter | None = None, *, offset: int = 0, limit: int | None = None
    ) -> tuple[list[Audit], int]:
        return await self._audits.search(filters or AuditFilter(), offset=offset, limit=limit)

    @_storage_errors
    async def get_audit(self, audit_id: int) -> Audit | None:
        return await self._audits.get_by_id(audit_id)

    @_storage_errors
    async def insert_audit(self, **fields: Any) -> Audit:
        return await self._audits.create(**fields)

    @_storage_errors
    async def delete_audit(self, audit_id: int) -> bool:
        return await self._audits.delete(audit_id)

    # ------------------------------------------------------------------
    # News
    # ------------------------------------------------------------------

    @_storage_errors
    async def list_news(self, *, offset: int = 0, limit: int | None = None) -> tuple[list[News], int]:
        return await self._news.list(offset=offset, limit=limit)

    @_storage_errors
    async def get_news(self, news_id: int) -> News | None:
        return await self._news.get_by_id(news_id)

    @_storage_errors
    async def insert_news(self, **fields: Any) -> News:
        return await self._news.create(**fields)

    @_storage_errors
    async def update_news(self, news_id: int, **fields: Any) -> News | None:
        return await self._news.update(news_id, **fields)

    @_storage_errors
    async def delete_news(self, news_id: int) -> bool:
        return await self._news.delete(news_id)
