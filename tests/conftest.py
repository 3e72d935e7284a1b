"""Pytest configuration and fixtures"""
import os

import pytest

# Tests never talk to a real storefront: force the mock backend selection
os.environ["STOREFRONT_API_URL"] = ""
os.environ["STOREFRONT_CONSUMER_KEY"] = ""
os.environ["STOREFRONT_CONSUMER_SECRET"] = ""
os.environ.setdefault("LOG_LEVEL", "WARNING")

from storefront.cart.store import CartStore  # noqa: E402
from storefront.commerce.backends.mock import MockBackend  # noqa: E402
from storefront.commerce.client import CommerceClient  # noqa: E402
from storefront.config import Settings  # noqa: E402
from storefront.errors import BackendError  # noqa: E402


class FlakyBackend(MockBackend):
    """Mock backend that records calls and fails the methods named in `fail`."""

    def __init__(self, *args, fail=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.fail = set(fail)
        self.calls: list[str] = []

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail:
            raise BackendError(f"{name} unavailable", status_code=503)

    async def get_cart(self):
        self._record("get_cart")
        return await super().get_cart()

    async def add_item(self, product_id, quantity, variation=None):
        self._record("add_item")
        return await super().add_item(product_id, quantity, variation)

    async def remove_item(self, item_key):
        self._record("remove_item")
        return await super().remove_item(item_key)

    async def update_item(self, item_key, quantity):
        self._record("update_item")
        return await super().update_item(item_key, quantity)

    async def list_products(self, query):
        self._record("list_products")
        return await super().list_products(query)

    async def find_products_by_slug(self, slug):
        self._record("find_products_by_slug")
        return await super().find_products_by_slug(slug)

    async def get_product_by_id(self, product_id):
        self._record("get_product_by_id")
        return await super().get_product_by_id(product_id)

    async def list_categories(self):
        self._record("list_categories")
        return await super().list_categories()


@pytest.fixture
def backend():
    """Recording mock backend with the demo catalog"""
    return FlakyBackend()


@pytest.fixture
def client(backend):
    """Commerce client bound to the recording mock backend"""
    return CommerceClient(backend=backend)


@pytest.fixture
def store(client):
    """Cart store over the mock client"""
    return CartStore(client=client)


@pytest.fixture
def live_settings():
    """Settings that select the live backend"""
    return Settings(
        api_url="https://shop.test/wp-json",
        consumer_key="ck_test",
        consumer_secret="cs_test",
    )


@pytest.fixture
def sample_cart_payload():
    """Store API cart response"""
    return {
        "items": [
            {
                "key": "c4ca4238a0b923820dcc509a6f75849b",
                "id": 42,
                "quantity": 2,
                "name": "Classic Tee",
                "sku": "TEE-001",
                "permalink": "https://shop.test/product/classic-tee",
                "images": [{"id": 1, "src": "https://shop.test/tee.jpg", "name": "tee", "alt": ""}],
                "variation": [],
                "item_data": [],
                "prices": {"price": "19.99", "regular_price": "19.99", "sale_price": "19.99"},
                "totals": {"line_subtotal": "39.98", "line_total": "39.98"},
                "catalog_visibility": "visible",
            },
            {
                "key": "c81e728d9d4c2f636f067f89cc14862c",
                "id": 44,
                "quantity": 1,
                "name": "Canvas Tote",
                "prices": {"price": "15.50"},
                "totals": {"line_subtotal": "15.50", "line_total": "15.50"},
            },
        ],
        "totals": {
            "total_items": "55.48",
            "total_items_tax": "0",
            "total_fees": "0",
            "total_fees_tax": "0",
            "total_discount": "0",
            "total_discount_tax": "0",
            "total_shipping": None,
            "total_shipping_tax": None,
            "total_price": "55.48",
            "total_tax": "0",
            "currency_code": "USD",
            "currency_symbol": "$",
        },
        "item_count": 3,
        "needs_payment": True,
        "needs_shipping": True,
        "coupons": [],
    }


@pytest.fixture
def sample_product_payload():
    """Management API product response"""
    return {
        "id": 42,
        "name": "Classic Tee",
        "slug": "classic-tee",
        "permalink": "https://shop.test/product/classic-tee",
        "type": "simple",
        "status": "publish",
        "price": "19.99",
        "regular_price": "19.99",
        "sale_price": "",
        "stock_status": "instock",
        "total_sales": 120,
        "categories": [{"id": 15, "name": "Apparel", "slug": "apparel"}],
        "tags": [],
        "images": [],
        "related_ids": [43, 44],
        "upsell_ids": [],
        "meta_data": [{"id": 1, "key": "_internal", "value": "x"}],
    }
