"""Tenant category management endpoints.

Every mutation responds with the freshly re-fetched tree.
"""

from fastapi import APIRouter, status

from storefront.api.deps import Manager
from storefront.schemas.catalog import CategoryCreate, CategoryTreeNode, ProductDetails

router = APIRouter()


@router.get("/categories/tree", response_model=list[CategoryTreeNode])
async def category_tree(manager: Manager) -> list[CategoryTreeNode]:
    return await manager.load_tree()


@router.post(
    "/categories",
    response_model=list[CategoryTreeNode],
    status_code=status.HTTP_201_CREATED,
)
async def create_category(body: CategoryCreate, manager: Manager) -> list[CategoryTreeNode]:
    """Create a root category, or a subcategory when ``parentId`` is set."""
    return await manager.add_category(body.name, parent_id=body.parent_id)


@router.patch("/categories/{category_id}/details", response_model=list[CategoryTreeNode])
async def update_details(
    category_id: str,
    details: ProductDetails,
    manager: Manager,
) -> list[CategoryTreeNode]:
    """Set SKU, price, stock, description and image on a leaf category."""
    return await manager.save_details(category_id, details)


@router.delete("/categories/{category_id}", response_model=list[CategoryTreeNode])
async def delete_category(category_id: str, manager: Manager) -> list[CategoryTreeNode]:
    """Delete a category and its whole subtree."""
    return await manager.delete_category(category_id)
