"""FastAPI application entry point.

Storefront catalog service: derives category navigation and product
listings from the external catalog API.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront import __version__
from storefront.config import settings
from storefront.core.exceptions import CatalogAPIError
from storefront.infra.logging import get_logger, setup_logging
from storefront.schemas.common import ErrorResponse
from storefront.services.catalog_client import get_catalog_client

from storefront.api.routes.browse import router as browse_router
from storefront.api.routes.health import router as health_router
from storefront.api.routes.manage import router as manage_router

# Setup logging first
setup_logging()
logger = get_logger(__name__)

# Upstream statuses forwarded as-is; everything else becomes 502
PASSTHROUGH_STATUSES = frozenset({401, 403, 404})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Shutdown closes the shared catalog API client.
    """
    logger.info(
        "Storefront service starting",
        environment=settings.environment,
        catalog_api_base=settings.catalog_api_base,
    )

    yield

    logger.info("Storefront service shutting down")
    await get_catalog_client().close()


app = FastAPI(
    title="Storefront Catalog",
    description="Category navigation and product listings for storefront tenants",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)

# CORS middleware (mainly for local development)
if settings.environment == "dev":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(CatalogAPIError)
async def catalog_error_handler(request: Request, exc: CatalogAPIError) -> JSONResponse:
    """Surface catalog API failures as a single user-visible message."""
    status_code = exc.status_code if exc.status_code in PASSTHROUGH_STATUSES else 502
    logger.warning(
        "Catalog API failure",
        error=exc.message,
        error_type=type(exc).__name__,
        upstream_status=exc.status_code,
        path=request.url.path,
    )
    body = ErrorResponse(
        error=exc.message,
        error_type=type(exc).__name__,
        detail={"upstream_status": exc.status_code},
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "error_type": type(exc).__name__,
        },
    )


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(manage_router, prefix="/manage", tags=["Manage"])
app.include_router(browse_router, tags=["Browse"])


# =============================================================================
# Root Endpoint
# =============================================================================


@app.get("/")
async def root() -> dict:
    """Root endpoint - basic service info."""
    return {
        "service": "Storefront Catalog",
        "version": __version__,
        "environment": settings.environment,
    }
