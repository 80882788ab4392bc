"""Shared fixtures."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from storefront.api.deps import get_catalog
from storefront.main import app
from storefront.schemas.catalog import CatalogEntry, CategoryTreeNode
from storefront.services.catalog_client import CatalogClient


@pytest.fixture
def sample_entries() -> list[CatalogEntry]:
    """Small catalog with two levels of categories and one uncategorized entry."""
    return [
        CatalogEntry(
            id="p1",
            name="Pixel 8",
            price="699.00",
            sku="PX-8",
            path=["Electronics", "Phones"],
            updatedAt="2024-03-01T10:00:00Z",
        ),
        CatalogEntry(
            id="p2",
            name="ThinkPad X1",
            price="1499.00",
            sku="TP-X1",
            path=["Electronics", "Laptops"],
            updatedAt="2024-05-01T10:00:00Z",
        ),
        CatalogEntry(
            id="p3",
            name="Rake",
            price="25.50",
            path=["Garden"],
            updatedAt="2023-11-20",
        ),
        CatalogEntry(id="p4", name="Gift card"),
    ]


@pytest.fixture
def sample_tree() -> list[CategoryTreeNode]:
    """Stored category tree with product details on its leaves."""
    return [
        CategoryTreeNode.model_validate(
            {
                "id": "c1",
                "name": "Electronics",
                "children": [
                    {
                        "id": "c2",
                        "name": "Phones",
                        "children": [
                            {"id": "c3", "name": "Pixel 8", "price": 699, "sku": "PX-8", "stock": 4},
                        ],
                    },
                    {"id": "c4", "name": "Cables", "children": []},
                ],
            }
        ),
        CategoryTreeNode.model_validate(
            {"id": "c5", "name": "Gift card", "price": 50, "children": []}
        ),
    ]


@pytest.fixture
def mock_catalog() -> AsyncMock:
    """CatalogClient double used by API tests."""
    return AsyncMock(spec=CatalogClient)


@pytest_asyncio.fixture
async def client(mock_catalog: AsyncMock) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app with the catalog client overridden."""
    app.dependency_overrides[get_catalog] = lambda: mock_catalog
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
