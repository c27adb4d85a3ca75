"""
News API tests — create, list ordering, partial update, delete.
"""

from httpx import AsyncClient

NEWS = {
    "title": "New audit checklist",
    "summary": "The 2025 checklist is now mandatory for every branch.",
    "content": "Details follow.",
    "news_date": "2025-05-01",
}


async def _create(client: AsyncClient, headers: dict, **overrides) -> dict:
    response = await client.post("/api/news", json={**NEWS, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreate:
    async def test_create_and_fetch(self, client: AsyncClient, auth_headers: dict):
        created = await _create(client, auth_headers, title="  Padded title  ")

        assert created["title"] == "Padded title"
        assert created["created_by"] is not None

        fetched = await client.get(f"/api/news/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["data"]["summary"] == NEWS["summary"]

    async def test_requires_authentication(self, client: AsyncClient):
        response = await client.post("/api/news", json=NEWS)

        assert response.status_code == 401

    async def test_title_and_summary_bounds(self, client: AsyncClient, auth_headers: dict):
        response = await client.post(
            "/api/news",
            json={**NEWS, "title": "x" * 201, "summary": "   "},
            headers=auth_headers,
        )

        assert response.status_code == 422
        fields = {d["field"] for d in response.json()["error"]["details"]}
        assert fields == {"title", "summary"}

    async def test_invalid_news_date(self, client: AsyncClient, auth_headers: dict):
        response = await client.post(
            "/api/news", json={**NEWS, "news_date": "yesterday"}, headers=auth_headers
        )

        assert response.status_code == 422
        assert response.json()["error"]["details"][0]["field"] == "news_date"


class TestList:
    async def test_newest_news_date_first(self, client: AsyncClient, auth_headers: dict):
        old = await _create(client, auth_headers, news_date="2024-01-01")
        new = await _create(client, auth_headers, news_date="2025-09-01")
        middle = await _create(client, auth_headers, news_date="2025-01-01")

        body = (await client.get("/api/news")).json()

        assert [n["id"] for n in body["data"]] == [new["id"], middle["id"], old["id"]]
        assert body["meta"]["total"] == 3

    async def test_limit_and_offset(self, client: AsyncClient, auth_headers: dict):
        for day in range(1, 4):
            await _create(client, auth_headers, news_date=f"2025-01-0{day}")

        body = (await client.get("/api/news", params={"limit": 1, "offset": 1})).json()

        assert [n["news_date"] for n in body["data"]] == ["2025-01-02"]


class TestUpdate:
    async def test_single_field_update_preserves_others(self, client: AsyncClient, auth_headers: dict):
        created = await _create(client, auth_headers)

        response = await client.put(
            f"/api/news/{created['id']}", json={"summary": "Updated summary"}, headers=auth_headers
        )

        assert response.status_code == 200
        updated = response.json()["data"]
        assert updated["summary"] == "Updated summary"
        assert updated["title"] == created["title"]
        assert updated["content"] == created["content"]
        assert updated["news_date"] == created["news_date"]

    async def test_empty_update_is_rejected(self, client: AsyncClient, auth_headers: dict):
        created = await _create(client, auth_headers)

        response = await client.put(f"/api/news/{created['id']}", json={}, headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["error"]["message"] == "No fields to update"

    async def test_null_title_is_rejected(self, client: AsyncClient, auth_headers: dict):
        created = await _create(client, auth_headers)

        response = await client.put(
            f"/api/news/{created['id']}", json={"title": None}, headers=auth_headers
        )

        assert response.status_code == 422

    async def test_unknown_id(self, client: AsyncClient, auth_headers: dict):
        response = await client.put("/api/news/9999", json={"title": "x"}, headers=auth_headers)

        assert response.status_code == 404


class TestDelete:
    async def test_delete_then_not_found(self, client: AsyncClient, auth_headers: dict):
        created = await _create(client, auth_headers)

        first = await client.delete(f"/api/news/{created['id']}", headers=auth_headers)
        second = await client.delete(f"/api/news/{created['id']}", headers=auth_headers)

        assert first.status_code == 204
        assert second.status_code == 404
        assert (await client.get(f"/api/news/{created['id']}")).status_code == 404
