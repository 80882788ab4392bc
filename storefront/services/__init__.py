"""Business logic services."""

from storefront.services.browse_service import BrowseService
from storefront.services.catalog_client import CatalogClient, get_catalog_client
from storefront.services.category_manager import CategoryManager

__all__ = [
    "BrowseService",
    "CatalogClient",
    "get_catalog_client",
    "CategoryManager",
]
