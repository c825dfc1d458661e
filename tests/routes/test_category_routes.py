# tests/routes/test_category_routes.py
"""Tests for category endpoints and the creation gatekeeper."""

import pytest
from httpx import AsyncClient

NAME_REQUIRED = {
    "status": "error",
    "code": "validation_error",
    "message": "Validation failed",
    "errors": {"name": "Category name is required"},
}


async def category_count(client: AsyncClient) -> int:
    response = await client.get("/categories")
    return response.json()["data"]["count"]


class TestCreateCategory:
    """Tests for POST /categories."""

    @pytest.mark.parametrize("body", [{"name": ""}, {"name": "   "}, {}, {"title": "Tech"}])
    async def test_missing_or_empty_name_is_rejected(
        self,
        client: AsyncClient,
        body: dict[str, str],
    ) -> None:
        response = await client.post("/categories", json=body)

        assert response.status_code == 400
        assert response.json() == NAME_REQUIRED
        assert await category_count(client) == 0

    async def test_request_without_body_is_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/categories")

        assert response.status_code == 400
        assert response.json() == NAME_REQUIRED

    async def test_named_category_is_created(self, client: AsyncClient) -> None:
        response = await client.post("/categories", json={"name": "Tech"})

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        assert body["message"] == "Category created successfully"
        assert body["data"]["category"]["name"] == "Tech"
        assert "createdAt" in body["data"]["category"]
        assert await category_count(client) == 1

    async def test_name_is_trimmed(self, client: AsyncClient) -> None:
        response = await client.post("/categories", json={"name": "  Tech  "})

        assert response.json()["data"]["category"]["name"] == "Tech"


class TestListCategories:
    """Tests for GET /categories."""

    async def test_lists_alphabetically(self, client: AsyncClient) -> None:
        for name in ("Travel", "Engineering", "Food"):
            assert (await client.post("/categories", json={"name": name})).status_code == 201

        response = await client.get("/categories")

        body = response.json()
        assert body["message"] == "Categories fetched successfully"
        assert [c["name"] for c in body["data"]["categories"]] == ["Engineering", "Food", "Travel"]
