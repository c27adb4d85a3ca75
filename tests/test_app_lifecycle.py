"""
Application wiring: shutdown of the memory backend, security headers, rate limiting.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from audit_dashboard.main import create_app
from audit_dashboard.middleware.security_headers import SECURITY_HEADERS
from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD, _settings, upload_audit


@asynccontextmanager
async def _running(application: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with application.router.lifespan_context(application):
        transport = ASGITransport(app=application)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


async def test_memory_shutdown_drops_transient_files(tmp_path):
    application = create_app(_settings("memory", tmp_path))

    async with _running(application) as client:
        login = await client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
        response = await upload_audit(client, {"Authorization": f"Bearer {login.json()['token']}"})
        assert response.status_code == 201
        files = application.state.files
        assert files.count == 1

    assert files.count == 0
    assert application.state.memory_db is None


async def test_security_headers_on_success_and_error_responses(client: AsyncClient):
    for path in ("/health", "/api/does-not-exist"):
        response = await client.get(path)

        for name, value in SECURITY_HEADERS.items():
            assert response.headers[name] == value, (path, name)


class TestRateLimit:
    async def test_requests_over_the_limit_get_429_envelope(self, tmp_path):
        application = create_app(_settings("memory", tmp_path, rate_limit="3/minute"))

        async with _running(application) as client:
            statuses = [(await client.get("/health")).status_code for _ in range(3)]
            limited = await client.get("/api/companies")

        assert statuses == [200, 200, 200]
        assert limited.status_code == 429
        assert limited.json()["error"]["code"] == "RATE_LIMITED"
        assert limited.headers["X-Content-Type-Options"] == "nosniff"

    async def test_limit_can_be_disabled(self, tmp_path):
        application = create_app(
            _settings("memory", tmp_path, rate_limit="1/minute", rate_limit_enabled=False)
        )

        async with _running(application) as client:
            statuses = [(await client.get("/health")).status_code for _ in range(3)]

        assert statuses == [200, 200, 200]
