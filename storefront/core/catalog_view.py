"""Compose tree building, path resolution and entry selection into one view."""

from collections.abc import Sequence

from storefront.core.category_tree import build_tree
from storefront.core.entry_selection import select_entries, top_level_categories
from storefront.core.path_walker import resolve
from storefront.core.view_state import ViewState
from storefront.schemas.browse import BrowseState, CatalogView
from storefront.schemas.catalog import CatalogEntry


def derive_view(entries: Sequence[CatalogEntry], state: ViewState) -> CatalogView:
    """Derive the full catalog view for ``state``.

    Everything is recomputed from the snapshot on each call.

    Args:
        entries: Catalog snapshot
        state: Current browse state

    Returns:
        CatalogView with tree, current level, leaf flag and display list
    """
    tree = build_tree(entries)
    level = resolve(tree, state.selected_path)
    selected = select_entries(
        entries,
        selected_path=state.selected_path,
        query=state.query,
        category_filter=state.category_filter,
        sort_key=state.sort_key,
    )
    return CatalogView(
        state=BrowseState(
            selected_path=list(state.selected_path),
            query=state.query,
            category_filter=state.category_filter,
            sort_key=state.sort_key,
            layout=state.layout,
        ),
        tree=tree,
        categories=level.nodes,
        is_leaf_level=level.is_leaf_level,
        entries=selected,
        category_options=top_level_categories(entries),
        total_entries=len(entries),
    )
