"""Resolve a selected category path against the category tree."""

from collections.abc import Sequence
from typing import NamedTuple

from storefront.schemas.catalog import CategoryNode


class PathResolution(NamedTuple):
    """Categories at the selected level and whether it is a leaf level."""

    nodes: list[CategoryNode]
    is_leaf_level: bool


def resolve(tree: Sequence[CategoryNode], path: Sequence[str]) -> PathResolution:
    """Walk ``tree`` one path segment at a time.

    The root (empty path) is never a leaf level. A segment that matches no
    child yields an empty level, which callers see as a leaf level just like
    a category without subcategories.

    Args:
        tree: Root category nodes
        path: Selected category names, root first

    Returns:
        PathResolution for the selected level
    """
    if not path:
        return PathResolution(nodes=list(tree), is_leaf_level=False)

    nodes: list[CategoryNode] = list(tree)
    for name in path:
        found = next((node for node in nodes if node.name == name), None)
        if found is None:
            nodes = []
            break
        nodes = found.children

    return PathResolution(nodes=list(nodes), is_leaf_level=not nodes)
