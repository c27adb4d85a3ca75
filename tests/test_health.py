"""
Health check and unknown-route handling.
"""

from httpx import AsyncClient

from audit_dashboard.core.config import Settings


async def test_health(client: AsyncClient, settings: Settings):
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["version"] == settings.app_version
    assert body["environment"] == "test"
    assert body["storage"] == settings.storage_backend
    assert "timestamp" in body


async def test_unknown_route_uses_error_envelope(client: AsyncClient):
    response = await client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
