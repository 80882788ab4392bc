"""Category manager - tenant-side edits of the category tree.

Every successful mutation is followed by a full re-fetch of the tree, and
the fresh tree is returned to the caller.
"""

from storefront.infra.logging import get_logger
from storefront.schemas.catalog import CategoryTreeNode, ProductDetails
from storefront.services.catalog_client import CatalogClient

logger = get_logger(__name__)


class CategoryManager:
    """Create, update and delete categories for one tenant."""

    def __init__(self, client: CatalogClient, token: str) -> None:
        self._client = client
        self._token = token

    async def load_tree(self) -> list[CategoryTreeNode]:
        return await self._client.fetch_category_tree(self._token)

    async def add_category(self, name: str, parent_id: str | None = None) -> list[CategoryTreeNode]:
        """Add a root category, or a subcategory of ``parent_id``.

        Blank names are ignored and the current tree is returned unchanged.
        """
        name = name.strip()
        if not name:
            logger.debug("Ignoring blank category name", parent_id=parent_id)
            return await self.load_tree()

        await self._client.create_category(self._token, name, parent_id=parent_id)
        return await self.load_tree()

    async def save_details(self, category_id: str, details: ProductDetails) -> list[CategoryTreeNode]:
        """Attach product details to a leaf category."""
        await self._client.update_category_details(self._token, category_id, details)
        return await self.load_tree()

    async def delete_category(self, category_id: str) -> list[CategoryTreeNode]:
        """Delete a category and all of its subcategories."""
        await self._client.delete_category(self._token, category_id)
        return await self.load_tree()
