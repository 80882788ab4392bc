"""Category tree construction from entry paths.

The tree is rebuilt from scratch whenever the entry list changes, so nodes
own their children and carry no back-references.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from storefront.schemas.catalog import CatalogEntry, CategoryNode, CategoryTreeNode


@dataclass
class _BuilderNode:
    """Mutable node used while walking entry paths."""

    name: str
    depth: int
    children: dict[str, "_BuilderNode"] = field(default_factory=dict)

    def child(self, name: str) -> "_BuilderNode":
        """Return the child named ``name``, creating it on first sight."""
        node = self.children.get(name)
        if node is None:
            node = _BuilderNode(name=name, depth=self.depth + 1)
            self.children[name] = node
        return node

    def freeze(self) -> CategoryNode:
        return CategoryNode(
            id=f"{self.name}_{self.depth}",
            name=self.name,
            children=[child.freeze() for child in self.children.values()],
        )


def build_tree(entries: Iterable[CatalogEntry]) -> list[CategoryNode]:
    """Build the category forest from entry paths.

    Entries without a non-empty path are skipped. Siblings keep first-seen
    order and are matched by exact, case-sensitive name.

    Args:
        entries: Catalog snapshot

    Returns:
        Root category nodes
    """
    # Sentinel root at depth -1 so real roots get depth 0
    root = _BuilderNode(name="", depth=-1)
    for entry in entries:
        if not entry.has_category:
            continue
        level = root
        for segment in entry.path:
            level = level.child(segment)
    return [node.freeze() for node in root.children.values()]


def flatten_category_tree(nodes: Sequence[CategoryTreeNode]) -> list[CatalogEntry]:
    """Turn the stored category tree into catalog entries.

    Every node carrying product details becomes one entry whose path is the
    chain of its ancestors' names. Root nodes get no path. Pre-order,
    depth first.

    Args:
        nodes: Root nodes from ``GET /categories/tree``

    Returns:
        Flat entry list
    """
    entries: list[CatalogEntry] = []

    def visit(node: CategoryTreeNode, ancestors: list[str]) -> None:
        if node.has_product_details:
            entries.append(
                CatalogEntry(
                    id=node.id,
                    name=node.name,
                    price=node.price,
                    sku=node.sku,
                    image=node.image,
                    stock=node.stock,
                    description=node.description,
                    path=list(ancestors) if ancestors else None,
                    updated_at=node.updated_at,
                )
            )
        for child in node.children:
            visit(child, [*ancestors, node.name])

    for root in nodes:
        visit(root, [])
    return entries
