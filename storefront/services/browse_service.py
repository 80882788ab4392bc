"""Browse service - load a catalog snapshot and derive the browse view."""

from storefront.core.catalog_view import derive_view
from storefront.core.category_tree import flatten_category_tree
from storefront.core.view_state import ViewState
from storefront.infra.logging import get_logger
from storefront.schemas.browse import CatalogView
from storefront.services.catalog_client import CatalogClient

logger = get_logger(__name__)


class BrowseService:
    """Derives catalog views for the public site and the tenant dashboard.

    Each call fetches a fresh snapshot; nothing is cached between calls.
    Fetch failures propagate as CatalogFetchError.
    """

    def __init__(self, client: CatalogClient) -> None:
        self._client = client

    async def public_view(self, site_name: str, state: ViewState) -> CatalogView:
        """Browse view of a tenant's public product list."""
        entries = await self._client.fetch_public_products(site_name)
        view = derive_view(entries, state)
        logger.debug(
            "Public view derived",
            site_name=site_name,
            path=list(state.selected_path),
            shown=len(view.entries),
            is_leaf_level=view.is_leaf_level,
        )
        return view

    async def tenant_view(self, token: str, state: ViewState) -> CatalogView:
        """Browse view built from the tenant's stored category tree."""
        roots = await self._client.fetch_category_tree(token)
        entries = flatten_category_tree(roots)
        view = derive_view(entries, state)
        logger.debug(
            "Tenant view derived",
            path=list(state.selected_path),
            shown=len(view.entries),
            is_leaf_level=view.is_leaf_level,
        )
        return view
