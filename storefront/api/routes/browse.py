"""Catalog browse endpoints.

The same view is served for the public site (by slug) and for the tenant
dashboard (by bearer token).
"""

from fastapi import APIRouter

from storefront.api.deps import Browse, SiteName, State, TenantToken
from storefront.schemas.browse import CatalogView

router = APIRouter()


@router.get("/manage/products", response_model=CatalogView)
async def tenant_products(browse: Browse, token: TenantToken, state: State) -> CatalogView:
    """Browse the authenticated tenant's own catalog."""
    return await browse.tenant_view(token, state)


@router.get("/s/{site_name}/products", response_model=CatalogView)
async def public_products(site_name: SiteName, browse: Browse, state: State) -> CatalogView:
    """Browse a tenant's public catalog."""
    return await browse.public_view(site_name, state)


@router.get("/{site_name}/products", response_model=CatalogView)
async def site_products(site_name: SiteName, browse: Browse, state: State) -> CatalogView:
    """Browse a tenant's public catalog under its bare slug."""
    return await browse.public_view(site_name, state)
