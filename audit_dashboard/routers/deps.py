"""Shared FastAPI dependencies: settings, request-scoped Store, access gate."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from audit_dashboard.core.config import Settings
from audit_dashboard.core.exceptions import UnauthorizedError
from audit_dashboard.repositories.files import FileStorage
from audit_dashboard.repositories.memory_store import MemoryStore
from audit_dashboard.repositories.sql_store import SqlStore
from audit_dashboard.repositories.store import Store
from audit_dashboard.services.auth import AuthService, Principal

security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_file_storage(request: Request) -> FileStorage:
    return request.app.state.files


async def get_store(request: Request) -> AsyncGenerator[Store, None]:
    """Yield the configured Store.

    SQL: one AsyncSession per request, committed on success and rolled back
    on error. Memory: a view over the application's MemoryDatabase.
    """
    memory_db = getattr(request.app.state, "memory_db", None)
    if memory_db is not None:
        yield MemoryStore(memory_db)
        return

    async with request.app.state.session_factory() as session:
        try:
            yield SqlStore(session)
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_auth_service(
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(store, settings)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> Principal:
    """Require a valid bearer token; the server is the only authority."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise UnauthorizedError("Authentication required")
    return AuthService.principal_from_token(credentials.credentials, settings)
