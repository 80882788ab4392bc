"""Errors raised when talking to the catalog API."""


class CatalogAPIError(Exception):
    """Raised when the catalog API call fails.

    ``message`` is safe to show to the user. ``status_code`` is the upstream
    HTTP status, or None when the request never got a response.
    """

    default_message = "Catalog request failed"

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        self.status_code = status_code
        super().__init__(self.message)


class CatalogFetchError(CatalogAPIError):
    """Raised when loading products or the category tree fails."""

    default_message = "Failed to load"


class CatalogMutationError(CatalogAPIError):
    """Raised when creating, updating or deleting a category fails."""

    default_message = "Failed to save changes"
