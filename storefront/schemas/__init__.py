"""Pydantic schemas for catalog data and API responses."""

from storefront.schemas.browse import BrowseState, CatalogView
from storefront.schemas.catalog import (
    CatalogEntry,
    CategoryCreate,
    CategoryNode,
    CategoryTreeNode,
    ProductDetails,
)
from storefront.schemas.common import ErrorResponse, HealthResponse

__all__ = [
    "BrowseState",
    "CatalogView",
    "CatalogEntry",
    "CategoryCreate",
    "CategoryNode",
    "CategoryTreeNode",
    "ProductDetails",
    "ErrorResponse",
    "HealthResponse",
]
