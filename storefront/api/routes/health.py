"""Health check endpoints."""

from fastapi import APIRouter

from storefront import __version__
from storefront.api.deps import Catalog
from storefront.config import settings
from storefront.schemas.common import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Basic health check.

    Returns 200 if service is running.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={},
    )


@router.get("/health/ready", response_model=HealthResponse)
async def health_ready(client: Catalog) -> HealthResponse:
    """Readiness check.

    Verifies the catalog API is reachable.
    """
    checks = {"catalog_api": await client.ping()}

    return HealthResponse(
        status="healthy" if all(checks.values()) else "degraded",
        version=__version__,
        environment=settings.environment,
        checks=checks,
    )


@router.get("/health/live", response_model=HealthResponse)
async def health_live() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        checks={"alive": True},
    )
