"""Core module - category tree, path resolution, entry selection, view state."""

from storefront.core.catalog_view import derive_view
from storefront.core.category_tree import build_tree, flatten_category_tree
from storefront.core.entry_selection import select_entries, top_level_categories
from storefront.core.exceptions import (
    CatalogAPIError,
    CatalogFetchError,
    CatalogMutationError,
)
from storefront.core.path_walker import PathResolution, resolve
from storefront.core.view_state import ViewState, reduce

__all__ = [
    "derive_view",
    "build_tree",
    "flatten_category_tree",
    "select_entries",
    "top_level_categories",
    "CatalogAPIError",
    "CatalogFetchError",
    "CatalogMutationError",
    "PathResolution",
    "resolve",
    "ViewState",
    "reduce",
]
