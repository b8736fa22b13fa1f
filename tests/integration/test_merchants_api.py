"""
Integration tests for the merchant directory.

These tests verify:
1. GET /v1/merchants - active merchants only, ordered by name
2. Pagination and its bounds
"""

import pytest
from httpx import AsyncClient

from tests.conftest import ACTIVE_MERCHANT_ID, INACTIVE_MERCHANT_ID


class TestListMerchants:
    """Tests for GET /v1/merchants."""

    @pytest.mark.asyncio
    async def test_lists_active_merchants(self, client: AsyncClient):
        response = await client.get("/v1/merchants")

        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 2
        assert data["limit"] == 20
        assert data["offset"] == 0
        assert [m["name"] for m in data["merchants"]] == ["Acme Electronics", "Blue Bikes"]
        assert all(m["isActive"] for m in data["merchants"])
        assert INACTIVE_MERCHANT_ID not in {m["id"] for m in data["merchants"]}

    @pytest.mark.asyncio
    async def test_merchant_fields(self, client: AsyncClient):
        response = await client.get("/v1/merchants", params={"limit": 1})

        merchant = response.json()["merchants"][0]
        assert merchant["id"] == ACTIVE_MERCHANT_ID
        assert merchant["category"] == "electronics"
        assert merchant["logo"] is None
        assert merchant["wallet"].startswith("G")

    @pytest.mark.asyncio
    async def test_pagination(self, client: AsyncClient):
        response = await client.get("/v1/merchants", params={"limit": 1, "offset": 1})

        data = response.json()
        assert data["total"] == 2
        assert [m["name"] for m in data["merchants"]] == ["Blue Bikes"]

    @pytest.mark.asyncio
    async def test_offset_past_end_is_empty(self, client: AsyncClient):
        response = await client.get("/v1/merchants", params={"offset": 10})

        data = response.json()
        assert data["merchants"] == []
        assert data["total"] == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [{"limit": 0}, {"limit": 101}, {"offset": -1}, {"limit": "many"}],
    )
    async def test_invalid_paging_rejected(self, client: AsyncClient, params: dict):
        response = await client.get("/v1/merchants", params=params)

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
