"""Tests for tenant category management endpoints."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from storefront.core.exceptions import CatalogMutationError

AUTH = {"Authorization": "Bearer tok"}


class TestManageCategories:
    """Tests for /manage/categories routes."""

    @pytest.fixture(autouse=True)
    def tree(self, mock_catalog: AsyncMock, sample_tree):
        mock_catalog.fetch_category_tree.return_value = sample_tree

    @pytest.mark.asyncio
    async def test_requires_token(self, client: AsyncClient, mock_catalog: AsyncMock):
        response = await client.get("/manage/categories/tree")

        assert response.status_code == 401
        mock_catalog.fetch_category_tree.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_tree(self, client: AsyncClient):
        response = await client.get("/manage/categories/tree", headers=AUTH)

        assert response.status_code == 200
        roots = response.json()
        assert [root["name"] for root in roots] == ["Electronics", "Gift card"]
        pixel = roots[0]["children"][0]["children"][0]
        assert pixel["price"] == 699.0
        assert pixel["stock"] == 4

    @pytest.mark.asyncio
    async def test_create_category(self, client: AsyncClient, mock_catalog: AsyncMock):
        response = await client.post(
            "/manage/categories",
            json={"name": " Toys ", "parentId": "c1"},
            headers=AUTH,
        )

        assert response.status_code == 201
        mock_catalog.create_category.assert_awaited_once_with("tok", "Toys", parent_id="c1")
        mock_catalog.fetch_category_tree.assert_awaited_once_with("tok")

    @pytest.mark.asyncio
    async def test_create_blank_name(self, client: AsyncClient, mock_catalog: AsyncMock):
        response = await client.post("/manage/categories", json={"name": "  "}, headers=AUTH)

        assert response.status_code == 422
        mock_catalog.create_category.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_details(self, client: AsyncClient, mock_catalog: AsyncMock):
        response = await client.patch(
            "/manage/categories/c3/details",
            json={"sku": " PX-8 ", "price": 649.5, "stock": 2},
            headers=AUTH,
        )

        assert response.status_code == 200
        category_id = mock_catalog.update_category_details.call_args[0][1]
        details = mock_catalog.update_category_details.call_args[0][2]
        assert category_id == "c3"
        assert details.sku == "PX-8"
        assert details.stock == 2

    @pytest.mark.asyncio
    async def test_update_details_rejects_negative_stock(self, client: AsyncClient, mock_catalog: AsyncMock):
        response = await client.patch(
            "/manage/categories/c3/details",
            json={"stock": -1},
            headers=AUTH,
        )

        assert response.status_code == 422
        mock_catalog.update_category_details.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_category(self, client: AsyncClient, mock_catalog: AsyncMock):
        response = await client.delete("/manage/categories/c1", headers=AUTH)

        assert response.status_code == 200
        mock_catalog.delete_category.assert_awaited_once_with("tok", "c1")

    @pytest.mark.asyncio
    async def test_mutation_failure(self, client: AsyncClient, mock_catalog: AsyncMock):
        mock_catalog.delete_category.side_effect = CatalogMutationError(
            "Failed to delete category", status_code=500
        )

        response = await client.delete("/manage/categories/c1", headers=AUTH)

        assert response.status_code == 502
        assert response.json()["error"] == "Failed to delete category"
        mock_catalog.fetch_category_tree.assert_not_awaited()
