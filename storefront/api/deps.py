"""FastAPI dependencies for dependency injection.

Provides:
- Catalog client and services
- Tenant bearer token
- Browse state parsed from query parameters
"""

from typing import Annotated

from fastapi import Cookie, Depends, Header, HTTPException, Query, status

from storefront.config import settings
from storefront.core.view_state import (
    EnterCategory,
    SetCategoryFilter,
    SetLayout,
    SetQuery,
    SetSortKey,
    ViewAction,
    ViewState,
    reduce_all,
)
from storefront.infra.logging import get_logger
from storefront.schemas.catalog import Layout, SortKey
from storefront.services.browse_service import BrowseService
from storefront.services.catalog_client import CatalogClient, get_catalog_client
from storefront.services.category_manager import CategoryManager

logger = get_logger(__name__)

# First path segments that belong to the dashboard and never name a site
RESERVED_SLUGS = frozenset(
    {
        "login",
        "register",
        "home",
        "home-view",
        "products",
        "create-products",
        "api",
        "manage",
        "health",
        "docs",
    }
)


async def get_catalog() -> CatalogClient:
    """Get catalog client dependency."""
    return get_catalog_client()


Catalog = Annotated[CatalogClient, Depends(get_catalog)]


async def get_browse_service(client: Catalog) -> BrowseService:
    return BrowseService(client)


async def get_site_name(site_name: str) -> str:
    """Validate the site slug taken from the URL.

    Raises:
        HTTPException: 404 for reserved dashboard slugs
    """
    if site_name in RESERVED_SLUGS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return site_name


async def get_tenant_token(
    authorization: Annotated[str | None, Header()] = None,
    token: Annotated[str | None, Cookie()] = None,
) -> str:
    """Extract the tenant bearer token.

    The Authorization header wins over the ``token`` cookie.

    Raises:
        HTTPException: 401 if no token is present
    """
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    if token:
        return token

    logger.debug("Rejected request without tenant token")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Missing bearer token",
        headers={"WWW-Authenticate": "Bearer"},
    )


TenantToken = Annotated[str, Depends(get_tenant_token)]


async def get_category_manager(client: Catalog, token: TenantToken) -> CategoryManager:
    return CategoryManager(client, token)


def get_view_state(
    path: Annotated[list[str] | None, Query(description="Selected category path, root first")] = None,
    q: Annotated[str, Query(description="Search on name, SKU and category path")] = "",
    category: Annotated[str, Query(description="Top-level category filter")] = "",
    sort: Annotated[SortKey | None, Query()] = None,
    layout: Annotated[Layout, Query()] = "grid",
) -> ViewState:
    """Build the browse state from query parameters."""
    actions: list[ViewAction] = [EnterCategory(name) for name in path or []]
    actions += [
        SetQuery(q),
        SetCategoryFilter(category),
        SetSortKey(sort or settings.default_sort_key),
        SetLayout(layout),
    ]
    return reduce_all(ViewState(), actions)


SiteName = Annotated[str, Depends(get_site_name)]
Browse = Annotated[BrowseService, Depends(get_browse_service)]
Manager = Annotated[CategoryManager, Depends(get_category_manager)]
State = Annotated[ViewState, Depends(get_view_state)]
