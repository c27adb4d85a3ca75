"""
Shared pytest fixtures.

Test strategy:
- Every API test runs twice: against the SQL store (SQLite file in tmp_path)
  and against the in-memory store, so both backends honour one contract.
- The app lifespan is entered explicitly so seeding happens exactly as in
  production (three companies + the default admin).
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from audit_dashboard.core.config import Settings
from audit_dashboard.db.base import build_engine, build_session_factory, create_schema
from audit_dashboard.main import create_app
from audit_dashboard.repositories.memory_store import MemoryDatabase, MemoryStore
from audit_dashboard.repositories.sql_store import SqlStore
from audit_dashboard.repositories.store import Store

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "audit@2025"


def _settings(backend: str, tmp_path, **overrides) -> Settings:
    fields = dict(
        _env_file=None,
        app_env="test",
        storage_backend=backend,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        upload_dir=str(tmp_path / "uploads"),
        jwt_secret="test-secret",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        rate_limit="1000/minute",
    )
    fields.update(overrides)
    return Settings(**fields)


# ============================================================
# 1. Settings (parametrized over both backends)
# ============================================================
@pytest.fixture(params=["sql", "memory"])
def settings(request, tmp_path) -> Settings:
    return _settings(request.param, tmp_path)


# ============================================================
# 2. Application with lifespan (engine / memory db + seeding)
# ============================================================
@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    response = await client.post(
        "/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


# ============================================================
# 3. Bare Store (contract tests without HTTP)
# ============================================================
@pytest_asyncio.fixture(params=["sql", "memory"])
async def store(request, tmp_path) -> AsyncGenerator[Store, None]:
    if request.param == "memory":
        yield MemoryStore(MemoryDatabase())
        return

    engine = build_engine(_settings("sql", tmp_path))
    await create_schema(engine)
    session_factory = build_session_factory(engine)
    async with session_factory() as session:
        try:
            yield SqlStore(session)
        finally:
            await session.rollback()
    await engine.dispose()


# ============================================================
# 4. Upload helpers
# ============================================================
def upload_form(**overrides) -> dict[str, str]:
    form = {
        "company_id": "1",
        "audit_date": "2025-03-10",
        "branch_number": "042",
        "description": "Quarterly inspection",
        "status": "aprovada",
    }
    form.update(overrides)
    return {k: v for k, v in form.items() if v is not None}


def pdf_file(name: str = "report.pdf", content: bytes = b"%PDF-1.4 test") -> dict:
    return {"file": (name, content, "application/pdf")}


async def upload_audit(client: AsyncClient, headers: dict, **overrides):
    return await client.post(
        "/api/audits/upload", data=upload_form(**overrides), files=pdf_file(), headers=headers,
    )
