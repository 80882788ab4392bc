"""Tests for catalog schemas."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront.schemas.catalog import (
    CatalogEntry,
    CategoryCreate,
    CategoryTreeNode,
    ProductDetails,
)


class TestCatalogEntry:
    """Tests for CatalogEntry parsing."""

    def test_parses_api_payload(self):
        entry = CatalogEntry.model_validate(
            {
                "id": 42,
                "name": "Lamp",
                "price": 19.99,
                "stock": 3,
                "path": ["Home", "Lighting"],
                "updatedAt": "2024-02-02T08:00:00Z",
                "ownerId": "ignored",
            }
        )

        assert entry.id == "42"
        assert entry.price == Decimal("19.99")
        assert entry.path == ["Home", "Lighting"]
        assert entry.updated_at == "2024-02-02T08:00:00Z"
        assert entry.has_category

    @pytest.mark.parametrize("path", ["Home", {"a": 1}, ["Home", None], 7])
    def test_malformed_path_is_uncategorized(self, path):
        entry = CatalogEntry.model_validate({"id": "1", "name": "x", "path": path})

        assert entry.path is None
        assert not entry.has_category

    def test_empty_path_kept(self):
        entry = CatalogEntry.model_validate({"id": "1", "name": "x", "path": []})

        assert entry.path == []
        assert not entry.has_category

    def test_missing_name_defaults_to_empty(self):
        assert CatalogEntry.model_validate({"id": "1", "name": None}).name == ""

    def test_requires_id(self):
        with pytest.raises(ValidationError):
            CatalogEntry.model_validate({"name": "No id"})

    @pytest.mark.parametrize(
        "field,value",
        [("price", "N/A"), ("price", float("nan")), ("stock", "lots"), ("stock", 2.5), ("sku", ["A1"])],
    )
    def test_unparsable_field_falls_back_to_none(self, field, value):
        entry = CatalogEntry.model_validate({"id": "1", "name": "x", field: value})

        assert getattr(entry, field) is None

    def test_unparsable_name_defaults_to_empty(self):
        assert CatalogEntry.model_validate({"id": "1", "name": {"en": "x"}}).name == ""

    def test_numeric_updated_at_is_epoch_millis(self):
        entry = CatalogEntry.model_validate({"id": "1", "updatedAt": 0})

        assert entry.updated_at == "1970-01-01T00:00:00Z"

    def test_json_uses_wire_names(self):
        entry = CatalogEntry(id="1", name="x", price="2.50", updatedAt="2024-01-01")

        data = entry.model_dump(mode="json", by_alias=True)

        assert data["updatedAt"] == "2024-01-01"
        assert data["price"] == 2.5


class TestCategoryTreeNode:
    """Tests for CategoryTreeNode."""

    def test_nested_parsing(self, sample_tree):
        electronics = sample_tree[0]

        assert electronics.children[0].children[0].name == "Pixel 8"
        assert electronics.children[1].children == []

    @pytest.mark.parametrize(
        "payload,expected",
        [
            ({"_id": "abc", "name": "x"}, "abc"),
            ({"id": 12, "name": "x"}, "12"),
            ({"_id": "doc", "id": "plain", "name": "x"}, "doc"),
        ],
    )
    def test_id_sources(self, payload, expected):
        assert CategoryTreeNode.model_validate(payload).id == expected

    def test_requires_some_id(self):
        with pytest.raises(ValidationError):
            CategoryTreeNode.model_validate({"name": "x"})

    def test_unparsable_details_fall_back_to_none(self):
        node = CategoryTreeNode.model_validate(
            {"id": "1", "name": "x", "price": "free", "stock": "many", "sku": "A1"}
        )

        assert node.price is None
        assert node.stock is None
        assert node.has_product_details

    def test_null_children(self):
        node = CategoryTreeNode.model_validate({"id": "1", "name": "x", "children": None})

        assert node.children == []

    @pytest.mark.parametrize(
        "fields,expected",
        [
            ({}, False),
            ({"sku": ""}, False),
            ({"sku": "A1"}, True),
            ({"stock": 0}, True),
            ({"description": "Nice"}, True),
            ({"image": "data:image/png;base64,AAA"}, True),
        ],
    )
    def test_has_product_details(self, fields, expected):
        node = CategoryTreeNode.model_validate({"id": "1", "name": "x", **fields})

        assert node.has_product_details is expected


class TestProductDetails:
    """Tests for ProductDetails validation."""

    def test_blank_text_becomes_none(self):
        details = ProductDetails(sku="  ", description="  Soft cotton  ")

        assert details.sku is None
        assert details.description == "Soft cotton"

    def test_rejects_negative_price(self):
        with pytest.raises(ValidationError):
            ProductDetails(price=-1)

    def test_rejects_more_than_two_decimals(self):
        with pytest.raises(ValidationError):
            ProductDetails(price="1.999")

    def test_rejects_negative_stock(self):
        with pytest.raises(ValidationError):
            ProductDetails(stock=-3)

    def test_payload(self):
        details = ProductDetails(sku="A1", price="12.50", stock=7)

        assert details.to_payload() == {
            "sku": "A1",
            "price": 12.5,
            "stock": 7,
            "description": None,
            "image": None,
        }


class TestCategoryCreate:
    """Tests for CategoryCreate."""

    def test_trims_name(self):
        body = CategoryCreate.model_validate({"name": "  Shoes ", "parentId": "c1"})

        assert body.name == "Shoes"
        assert body.parent_id == "c1"

    def test_rejects_blank_name(self):
        with pytest.raises(ValidationError):
            CategoryCreate.model_validate({"name": "   "})
