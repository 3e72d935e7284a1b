"""Mock commerce backend - in-memory catalog and session cart.

Used when the live API is not configured. It keeps the same call contract
as the live backend, including its failure modes (unknown product, unknown
cart line), so the client and store behave identically against both.
"""

import hashlib
import json
import math
from dataclasses import dataclass, field
from typing import Any, Optional

from storefront.commerce.backends.base import CommerceBackend
from storefront.commerce.backends.mock_data import MOCK_CATEGORIES, MOCK_PRODUCTS
from storefront.commerce.constants import (
    DEFAULT_CURRENCY_CODE,
    DEFAULT_CURRENCY_SYMBOL,
    SortOrder,
)
from storefront.commerce.models import (
    Cart,
    CartItem,
    CartTotals,
    Collection,
    ItemPrices,
    ItemTotals,
    PageInfo,
    Product,
    ProductPage,
    ProductQuery,
)
from storefront.errors import BackendError
from storefront.logging import get_logger, loggable
from storefront.services.money import multiply, to_amount_string, to_decimal, total

logger = get_logger(__name__)


def make_item_key(product_id: int, variation: Optional[list[dict[str, Any]]] = None) -> str:
    """Cart line key: hash of product id plus variation, so variations get separate lines."""
    raw = json.dumps({"id": product_id, "variation": variation or []}, sort_keys=True)
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


@dataclass
class _CartLine:
    product_id: int
    quantity: int
    variation: list[dict[str, Any]] = field(default_factory=list)


# orderby -> sort key function over Product
_ORDERBY_KEYS = {
    "date": lambda p: p.date_created,
    "price": lambda p: p.price_decimal,
    "popularity": lambda p: p.total_sales,
    "title": lambda p: p.name.lower(),
    "id": lambda p: p.id,
    "slug": lambda p: p.slug,
    "rating": lambda p: to_decimal(p.average_rating),
}


class MockBackend(CommerceBackend):
    """In-memory commerce backend."""

    name = "mock"

    def __init__(
        self,
        products: Optional[list[dict]] = None,
        categories: Optional[list[dict]] = None,
    ):
        self._products = [
            Product.model_validate(p) for p in (products if products is not None else MOCK_PRODUCTS)
        ]
        self._categories = list(categories if categories is not None else MOCK_CATEGORIES)
        # key -> line, insertion order is the cart order
        self._lines: dict[str, _CartLine] = {}

    def _find_product(self, product_id: int) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    # ==================== CART ====================

    async def get_cart(self) -> Cart:
        items = []
        for key, line in self._lines.items():
            product = self._find_product(line.product_id)
            if product is None:
                continue
            line_total = to_amount_string(multiply(product.price, line.quantity))
            items.append(
                CartItem(
                    key=key,
                    id=product.id,
                    quantity=line.quantity,
                    name=product.name,
                    short_description=product.short_description,
                    description=product.description,
                    sku=product.sku,
                    sold_individually=product.sold_individually,
                    backorders_allowed=product.backorders_allowed,
                    permalink=product.permalink,
                    images=[image.model_copy() for image in product.images],
                    variation=list(line.variation),
                    prices=ItemPrices(
                        price=product.price,
                        regular_price=product.regular_price or product.price,
                        sale_price=product.sale_price or product.price,
                    ),
                    totals=ItemTotals(line_subtotal=line_total, line_total=line_total),
                )
            )

        subtotal = to_amount_string(total(item.totals.line_total for item in items))
        return Cart(
            items=items,
            totals=CartTotals(
                total_items=subtotal,
                total_price=subtotal,
                currency_code=DEFAULT_CURRENCY_CODE,
                currency_symbol=DEFAULT_CURRENCY_SYMBOL,
            ),
            item_count=sum(item.quantity for item in items),
            needs_payment=bool(items),
            needs_shipping=bool(items),
        )

    async def add_item(
        self,
        product_id: int,
        quantity: int,
        variation: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        product = self._find_product(product_id)
        if product is None:
            raise BackendError(f"No product found with ID {product_id}", status_code=404)
        if quantity < 1:
            raise BackendError("Quantity must be at least 1", status_code=400)
        if not product.purchasable:
            raise BackendError(f"{product.name} cannot be purchased", status_code=400)

        key = make_item_key(product_id, variation)
        line = self._lines.get(key)
        if line is None:
            self._lines[key] = _CartLine(product_id=product_id, quantity=quantity, variation=list(variation or []))
        elif product.sold_individually:
            raise BackendError(f"You cannot add another {product.name} to your cart", status_code=400)
        else:
            line.quantity += quantity
        logger.debug("Mock cart: added product %s x%s", product_id, quantity)

    async def remove_item(self, item_key: str) -> None:
        if item_key not in self._lines:
            raise BackendError("Cart item no longer exists or is invalid", status_code=409)
        del self._lines[item_key]
        logger.debug("Mock cart: removed line %s", loggable(item_key))

    async def update_item(self, item_key: str, quantity: int) -> None:
        line = self._lines.get(item_key)
        if line is None:
            raise BackendError("Cart item no longer exists or is invalid", status_code=409)
        if quantity < 1:
            raise BackendError("Quantity must be at least 1", status_code=400)
        line.quantity = quantity

    # ==================== CATALOG ====================

    async def list_products(self, query: ProductQuery) -> ProductPage:
        products = [p for p in self._products if self._matches(p, query)]

        sort_key = _ORDERBY_KEYS.get(query.orderby)
        if sort_key is None:
            raise BackendError("Invalid parameter(s): orderby", status_code=400)
        products.sort(key=sort_key, reverse=query.order != SortOrder.ASC.value)

        total_pages = max(1, math.ceil(len(products) / query.per_page))
        start = (query.page - 1) * query.per_page
        page = products[start:start + query.per_page]

        return ProductPage(
            products=[p.model_copy(deep=True) for p in page],
            page_info=PageInfo(
                has_next_page=query.page < total_pages,
                has_previous_page=query.page > 1,
                end_cursor=str(query.page),
            ),
        )

    @staticmethod
    def _matches(product: Product, query: ProductQuery) -> bool:
        if query.search:
            needle = query.search.lower()
            haystack = f"{product.name} {product.description} {product.sku}".lower()
            if needle not in haystack:
                return False
        if query.category and not any(
            query.category in (c.slug, str(c.id)) for c in product.categories
        ):
            return False
        if query.tag and not any(query.tag in (t.slug, str(t.id)) for t in product.tags):
            return False
        if query.min_price and product.price_decimal < to_decimal(query.min_price):
            return False
        if query.max_price and product.price_decimal > to_decimal(query.max_price):
            return False
        if product.id in query.exclude:
            return False
        return True

    async def find_products_by_slug(self, slug: str) -> list[Product]:
        return [p.model_copy(deep=True) for p in self._products if p.slug == slug]

    async def get_product_by_id(self, product_id: int) -> Product:
        product = self._find_product(product_id)
        if product is None:
            raise BackendError("Invalid ID.", status_code=404)
        return product.model_copy(deep=True)

    async def list_categories(self) -> list[Collection]:
        collections = []
        for category in self._categories:
            count = sum(
                1 for p in self._products if any(c.id == category["id"] for c in p.categories)
            )
            collections.append(Collection.model_validate({**category, "count": count}))
        return collections
