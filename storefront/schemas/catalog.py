"""Catalog schemas shared with the external catalog API.

Field names follow the API's JSON (camelCase aliases where it differs).
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_serializer,
    field_validator,
)

SortKey = Literal["name", "priceAsc", "priceDesc", "recent"]
Layout = Literal["grid", "list"]

SORT_KEYS: tuple[str, ...] = ("name", "priceAsc", "priceDesc", "recent")


def _none_if_invalid(v: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Validate ``v``, falling back to ``None`` when it cannot be parsed."""
    try:
        return handler(v)
    except ValidationError:
        return None


def _timestamp_text(v: Any) -> str | None:
    """Keep date strings as-is; numbers are epoch milliseconds."""
    if isinstance(v, str):
        return v
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        try:
            moment = datetime.fromtimestamp(v / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
        return moment.isoformat().replace("+00:00", "Z")
    return None


class CatalogEntry(BaseModel):
    """One product as listed in a tenant's catalog.

    ``path`` runs from the root category to the entry's immediate category.
    Anything other than a list of strings is treated as uncategorized.
    Only ``id`` is required; any other field that cannot be parsed falls
    back to its default. A numeric ``updatedAt`` is read as epoch
    milliseconds.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
        frozen=True,
    )

    id: str
    name: str = ""
    price: Decimal | None = None
    sku: str | None = None
    image: str | None = None
    stock: int | None = None
    description: str | None = None
    path: list[str] | None = None
    updated_at: str | None = Field(default=None, alias="updatedAt")

    @field_validator("name", mode="wrap")
    @classmethod
    def default_name(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> str:
        if v is None:
            return ""
        try:
            return handler(v)
        except ValidationError:
            return ""

    @field_validator("price", "stock", "sku", "image", "description", mode="wrap")
    @classmethod
    def drop_unparsable(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _none_if_invalid(v, handler)

    @field_validator("updated_at", mode="before")
    @classmethod
    def normalize_timestamp(cls, v: Any) -> str | None:
        return _timestamp_text(v)

    @field_validator("path", mode="before")
    @classmethod
    def normalize_path(cls, v: Any) -> list[str] | None:
        """Drop malformed paths instead of rejecting the entry."""
        if not isinstance(v, (list, tuple)):
            return None
        if not all(isinstance(segment, str) for segment in v):
            return None
        return list(v)

    @field_serializer("price", when_used="json")
    def price_as_number(self, v: Decimal | None) -> float | None:
        return float(v) if v is not None else None

    @property
    def has_category(self) -> bool:
        """True when the path is a non-empty list of segments."""
        return bool(self.path)


class CategoryNode(BaseModel):
    """Node of the category tree derived from entry paths."""

    id: str = Field(description="Synthetic id built from name and depth")
    name: str = Field(description="Path segment this node represents")
    children: list[CategoryNode] = Field(default_factory=list)


class CategoryTreeNode(BaseModel):
    """Node of the tenant's stored category tree (``GET /categories/tree``).

    Leaf nodes may carry product details directly on the node. The id is
    read from ``_id`` when the backend sends document-style nodes.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    name: str
    children: list[CategoryTreeNode] = Field(default_factory=list)
    sku: str | None = None
    price: Decimal | None = None
    stock: int | None = None
    description: str | None = None
    image: str | None = None
    updated_at: str | None = Field(default=None, alias="updatedAt")

    @field_validator("children", mode="before")
    @classmethod
    def default_children(cls, v: Any) -> Any:
        return v if isinstance(v, list) else []

    @field_validator("price", "stock", "sku", "image", "description", mode="wrap")
    @classmethod
    def drop_unparsable(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        return _none_if_invalid(v, handler)

    @field_validator("updated_at", mode="before")
    @classmethod
    def normalize_timestamp(cls, v: Any) -> str | None:
        return _timestamp_text(v)

    @field_serializer("price", when_used="json")
    def price_as_number(self, v: Decimal | None) -> float | None:
        return float(v) if v is not None else None

    @property
    def has_product_details(self) -> bool:
        """True when any product detail field is set."""
        return bool(
            self.sku
            or self.price is not None
            or self.stock is not None
            or self.description
            or self.image
        )


class ProductDetails(BaseModel):
    """Product details attached to a leaf category.

    Text fields are trimmed; blank text becomes ``None``.
    """

    model_config = ConfigDict(extra="forbid")

    sku: str | None = Field(default=None, max_length=100)
    price: Decimal | None = Field(default=None, ge=0, decimal_places=2)
    stock: int | None = Field(default=None, ge=0)
    description: str | None = None
    image: str | None = Field(default=None, description="Image URL or data URL")

    @field_validator("sku", "description", mode="before")
    @classmethod
    def strip_blank(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    def to_payload(self) -> dict[str, Any]:
        """Serialize for ``PATCH /categories/{id}/details``."""
        return {
            "sku": self.sku,
            "price": float(self.price) if self.price is not None else None,
            "stock": self.stock,
            "description": self.description,
            "image": self.image,
        }


class CategoryCreate(BaseModel):
    """Request body for creating a root or child category."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str = Field(min_length=1, max_length=200)
    parent_id: str | None = Field(default=None, alias="parentId")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v
