"""
Tests for commerce models
"""

import pytest
from pydantic import ValidationError

from storefront.commerce.models import (
    Cart,
    CartItem,
    Collection,
    PageInfo,
    Product,
    ProductPage,
    ProductQuery,
)


class TestCart:
    """Tests for the Cart snapshot model."""

    def test_parse_store_api_payload(self, sample_cart_payload):
        """Test a backend cart validates and keeps item order."""
        cart = Cart.model_validate(sample_cart_payload)

        assert [item.id for item in cart.items] == [42, 44]
        assert cart.item_count == 3
        assert cart.quantity_sum == cart.item_count
        assert cart.needs_payment is True
        assert cart.totals.total_price == "55.48"

    def test_null_totals_become_zero(self, sample_cart_payload):
        """Test null shipping totals are normalized to "0"."""
        cart = Cart.model_validate(sample_cart_payload)

        assert cart.totals.total_shipping == "0"
        assert cart.totals.total_shipping_tax == "0"

    def test_empty_cart(self):
        """Test the defined empty cart."""
        cart = Cart.empty()

        assert cart.items == []
        assert cart.item_count == 0
        assert cart.needs_payment is False
        assert cart.needs_shipping is False
        assert cart.is_empty
        assert cart.totals.total_price == "0"
        assert cart.totals.total_items == "0"
        assert cart.totals.currency_code == "USD"

    def test_find_item(self, sample_cart_payload):
        """Test finding a line by key."""
        cart = Cart.model_validate(sample_cart_payload)

        assert cart.find_item("c81e728d9d4c2f636f067f89cc14862c").id == 44
        assert cart.find_item("missing") is None

    def test_negative_quantity_rejected(self):
        """Test a line can never carry a negative quantity."""
        with pytest.raises(ValidationError):
            CartItem(key="abc", id=1, quantity=-1)


class TestProduct:
    """Tests for catalog models."""

    def test_unknown_fields_ignored(self, sample_product_payload):
        """Test backend-only fields do not break validation."""
        product = Product.model_validate(sample_product_payload)

        assert product.slug == "classic-tee"
        assert product.related_ids == [43, 44]
        assert not hasattr(product, "meta_data")

    def test_numeric_price_coerced(self):
        """Test numeric prices are stored as strings."""
        product = Product(id=1, name="X", slug="x", price=12.5)

        assert product.price == "12.5"
        assert str(product.price_decimal) == "12.5"

    def test_collection_path_is_derived(self):
        """Test the collection path comes from the slug."""
        collection = Collection(id=15, name="Apparel", slug="apparel")

        assert collection.path == "/products?category=apparel"
        assert collection.model_dump()["path"] == "/products?category=apparel"


class TestPageInfo:
    """Tests for pagination models."""

    def test_dump_uses_wire_names(self):
        """Test PageInfo serializes with camelCase keys."""
        info = PageInfo(has_next_page=True, has_previous_page=False, end_cursor="1")

        assert info.model_dump(by_alias=True) == {
            "hasNextPage": True,
            "hasPreviousPage": False,
            "endCursor": "1",
        }

    def test_parse_wire_names(self):
        """Test PageInfo accepts camelCase keys."""
        page = ProductPage.model_validate(
            {"products": [], "pageInfo": {"hasNextPage": False, "hasPreviousPage": True, "endCursor": "2"}}
        )

        assert page.page_info.has_previous_page is True
        assert page.page_info.end_cursor == "2"


class TestProductQuery:
    """Tests for product filter translation."""

    def test_defaults(self):
        """Test default query parameters."""
        assert ProductQuery().to_params() == {
            "page": "1",
            "per_page": "12",
            "orderby": "date",
            "order": "desc",
        }

    def test_optional_filters(self):
        """Test only provided filters are emitted."""
        params = ProductQuery(
            page=2,
            search="tee",
            category="apparel",
            min_price="10",
            exclude=[42, 43],
        ).to_params()

        assert params["page"] == "2"
        assert params["search"] == "tee"
        assert params["category"] == "apparel"
        assert params["min_price"] == "10"
        assert params["exclude"] == "42,43"
        assert "tag" not in params
        assert "max_price" not in params

    def test_page_is_one_based(self):
        """Test page 0 is rejected."""
        with pytest.raises(ValidationError):
            ProductQuery(page=0)
