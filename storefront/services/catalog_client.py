"""Catalog Client - HTTP client for the external catalog API.

Public product listings are unauthenticated. Category tree reads and
mutations are made on behalf of a tenant with its bearer token.
"""

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from storefront.config import settings
from storefront.core.exceptions import (
    CatalogAPIError,
    CatalogFetchError,
    CatalogMutationError,
)
from storefront.infra.logging import get_logger
from storefront.schemas.catalog import CatalogEntry, CategoryTreeNode, ProductDetails

logger = get_logger(__name__)


def _error_message(response: httpx.Response) -> str | None:
    """Pull the API's ``message`` field out of an error response."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


class CatalogClient:
    """HTTP client for the catalog API."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        """Initialize catalog client.

        Args:
            base_url: Catalog API base URL (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
        """
        self.base_url = base_url or settings.catalog_api_base
        self.timeout = timeout if timeout is not None else settings.catalog_api_timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @staticmethod
    def _auth_headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    async def _request(
        self,
        method: str,
        url: str,
        error_cls: type[CatalogAPIError],
        default_message: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request, translating failures into ``error_cls``."""
        client = await self._get_client()
        try:
            response = await client.request(method, url, **kwargs)
            response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            logger.error(
                "Catalog API returned error",
                method=method,
                url=url,
                status_code=e.response.status_code,
                response_text=e.response.text[:500],
            )
            raise error_cls(
                _error_message(e.response) or default_message,
                status_code=e.response.status_code,
            ) from e

        except httpx.HTTPError as e:
            logger.error(
                "Catalog API request failed",
                method=method,
                url=url,
                error=str(e),
            )
            raise error_cls(str(e) or default_message) from e

    @staticmethod
    def _json_list(response: httpx.Response, default_message: str) -> list[Any]:
        try:
            body = response.json()
        except ValueError as e:
            raise CatalogFetchError(default_message, status_code=response.status_code) from e
        return body if isinstance(body, list) else []

    async def fetch_public_products(self, site_name: str) -> list[CatalogEntry]:
        """Fetch a tenant's public product list.

        Items without a usable id are skipped; other malformed fields fall
        back to their defaults.

        Args:
            site_name: Public site slug

        Returns:
            Catalog entries in API order

        Raises:
            CatalogFetchError: If the request fails
        """
        default_message = "Failed to load"
        response = await self._request(
            "GET",
            f"/public/{quote(site_name, safe='')}/products",
            CatalogFetchError,
            default_message,
        )

        entries: list[CatalogEntry] = []
        skipped = 0
        for item in self._json_list(response, default_message):
            try:
                entries.append(CatalogEntry.model_validate(item))
            except ValidationError:
                skipped += 1

        logger.info(
            "Public products loaded",
            site_name=site_name,
            count=len(entries),
            skipped=skipped,
        )
        return entries

    async def fetch_category_tree(self, token: str) -> list[CategoryTreeNode]:
        """Fetch the tenant's stored category tree.

        Args:
            token: Tenant bearer token

        Returns:
            Root category nodes

        Raises:
            CatalogFetchError: If the request fails or the tree is invalid
        """
        default_message = "Failed to load categories"
        response = await self._request(
            "GET",
            "/categories/tree",
            CatalogFetchError,
            default_message,
            headers=self._auth_headers(token),
        )

        try:
            roots = [
                CategoryTreeNode.model_validate(item)
                for item in self._json_list(response, default_message)
            ]
        except ValidationError as e:
            logger.error("Invalid category tree payload", error=str(e))
            raise CatalogFetchError(default_message, status_code=response.status_code) from e

        logger.info("Category tree loaded", roots=len(roots))
        return roots

    async def create_category(
        self,
        token: str,
        name: str,
        parent_id: str | None = None,
    ) -> dict[str, Any] | None:
        """Create a root category, or a child when ``parent_id`` is given.

        Returns:
            The created node as returned by the API, if any

        Raises:
            CatalogMutationError: If the request fails
        """
        payload: dict[str, Any] = {"name": name}
        if parent_id is not None:
            payload["parentId"] = parent_id

        response = await self._request(
            "POST",
            "/categories",
            CatalogMutationError,
            "Failed to create subcategory" if parent_id else "Failed to create root category",
            json=payload,
            headers=self._auth_headers(token),
        )
        logger.info("Category created", name=name, parent_id=parent_id)

        try:
            body = response.json()
        except ValueError:
            return None
        return body if isinstance(body, dict) else None

    async def update_category_details(
        self,
        token: str,
        category_id: str,
        details: ProductDetails,
    ) -> None:
        """Replace the product details of a leaf category.

        Raises:
            CatalogMutationError: If the request fails
        """
        await self._request(
            "PATCH",
            f"/categories/{quote(category_id, safe='')}/details",
            CatalogMutationError,
            "Failed to save details",
            json=details.to_payload(),
            headers=self._auth_headers(token),
        )
        logger.info("Category details saved", category_id=category_id)

    async def delete_category(self, token: str, category_id: str) -> None:
        """Delete a category together with its subtree.

        Raises:
            CatalogMutationError: If the request fails
        """
        await self._request(
            "DELETE",
            f"/categories/{quote(category_id, safe='')}",
            CatalogMutationError,
            "Failed to delete category",
            headers=self._auth_headers(token),
        )
        logger.info("Category deleted", category_id=category_id)

    async def ping(self) -> bool:
        """Check that the catalog API answers at all."""
        client = await self._get_client()
        try:
            await client.get("/")
            return True
        except httpx.HTTPError as e:
            logger.warning("Catalog API unreachable", error=str(e))
            return False


# Singleton instance
_catalog_client: CatalogClient | None = None


def get_catalog_client() -> CatalogClient:
    """Get catalog client singleton."""
    global _catalog_client
    if _catalog_client is None:
        _catalog_client = CatalogClient()
    return _catalog_client
