"""API routes module."""

from storefront.api.routes.browse import router as browse_router
from storefront.api.routes.health import router as health_router
from storefront.api.routes.manage import router as manage_router

__all__ = ["browse_router", "health_router", "manage_router"]
