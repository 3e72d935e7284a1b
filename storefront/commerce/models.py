"""Commerce Models - Pydantic models for cart and catalog entities.

Field names follow the commerce REST API payloads so responses validate
directly. Unknown backend fields are ignored.
"""
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from storefront.commerce.constants import (
    DEFAULT_ORDER,
    DEFAULT_ORDERBY,
    DEFAULT_PER_PAGE,
    HIDDEN_PRODUCT_TAG,
)
from storefront.services.money import to_decimal


class Image(BaseModel):
    id: int = 0
    src: str = ""
    name: str = ""
    alt: str = ""
    width: Optional[int] = None
    height: Optional[int] = None

    class Config:
        extra = "ignore"


# ==================== CART MODELS ====================

class CartTotals(BaseModel):
    """Aggregate cart totals. Amounts are decimal strings."""
    total_items: str = "0"
    total_items_tax: str = "0"
    total_fees: str = "0"
    total_fees_tax: str = "0"
    total_discount: str = "0"
    total_discount_tax: str = "0"
    total_shipping: str = "0"
    total_shipping_tax: str = "0"
    total_price: str = "0"
    total_tax: str = "0"
    currency_code: str = "USD"
    currency_symbol: str = "$"

    class Config:
        extra = "ignore"

    @field_validator(
        "total_items", "total_items_tax", "total_fees", "total_fees_tax",
        "total_discount", "total_discount_tax", "total_shipping",
        "total_shipping_tax", "total_price", "total_tax",
        mode="before",
    )
    @classmethod
    def amount_to_str(cls, v):
        # Some shipping plugins send null for zero amounts
        if v is None:
            return "0"
        return str(v)


class ItemPrices(BaseModel):
    """Per-unit price snapshot frozen when the backend computed the cart."""
    price: str = "0"
    regular_price: str = "0"
    sale_price: str = "0"
    price_range: Optional[Any] = None
    currency_code: str = "USD"
    currency_symbol: str = "$"
    currency_minor_unit: int = 2
    currency_decimal_separator: str = "."
    currency_thousand_separator: str = ","
    currency_prefix: str = "$"
    currency_suffix: str = ""

    class Config:
        extra = "ignore"


class ItemTotals(BaseModel):
    """Line totals for one cart item."""
    line_subtotal: str = "0"
    line_subtotal_tax: str = "0"
    line_total: str = "0"
    line_total_tax: str = "0"
    currency_code: str = "USD"
    currency_symbol: str = "$"
    currency_minor_unit: int = 2

    class Config:
        extra = "ignore"


class CartItem(BaseModel):
    """
    Single line of the session cart.

    `key` identifies the line, `id` the product; one product can occupy
    several lines when variations differ.
    """
    key: str
    id: int
    quantity: int = Field(ge=0)
    name: str = ""
    short_description: str = ""
    description: str = ""
    sku: str = ""
    low_stock_remaining: Optional[int] = None
    backorders_allowed: bool = False
    show_backorder_badge: bool = False
    sold_individually: bool = False
    permalink: str = ""
    images: list[Image] = []
    variation: list[dict[str, Any]] = []
    item_data: list[Any] = []
    prices: ItemPrices = Field(default_factory=ItemPrices)
    totals: ItemTotals = Field(default_factory=ItemTotals)

    class Config:
        extra = "ignore"


class Cart(BaseModel):
    """
    Snapshot of the session cart as returned by the backend.

    `item_count` equals the sum of item quantities only for snapshots
    produced by the backend; never edit one in place.
    """
    items: list[CartItem] = []
    totals: CartTotals = Field(default_factory=CartTotals)
    item_count: int = 0
    needs_payment: bool = False
    needs_shipping: bool = False

    class Config:
        extra = "ignore"

    @classmethod
    def empty(cls) -> "Cart":
        """The well-defined cart rendered when the backend has none."""
        return cls(
            items=[],
            totals=CartTotals(),
            item_count=0,
            needs_payment=False,
            needs_shipping=False,
        )

    @property
    def quantity_sum(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find_item(self, key: str) -> Optional[CartItem]:
        return next((item for item in self.items if item.key == key), None)


# ==================== CATALOG MODELS ====================

class ProductCategory(BaseModel):
    id: int
    name: str = ""
    slug: str = ""

    class Config:
        extra = "ignore"


class ProductTag(BaseModel):
    id: int
    name: str = ""
    slug: str = ""

    class Config:
        extra = "ignore"


class Product(BaseModel):
    """Catalog product. Read-only from the storefront's point of view."""
    id: int
    name: str
    slug: str
    permalink: str = ""
    type: str = "simple"
    status: str = "publish"
    featured: bool = False
    description: str = ""
    short_description: str = ""
    sku: str = ""
    price: str = "0"
    regular_price: str = ""
    sale_price: str = ""
    on_sale: bool = False
    purchasable: bool = True
    total_sales: int = 0
    manage_stock: bool = False
    stock_quantity: Optional[int] = None
    stock_status: str = "instock"
    backorders_allowed: bool = False
    sold_individually: bool = False
    date_created: str = ""
    average_rating: str = "0"
    rating_count: int = 0
    categories: list[ProductCategory] = []
    tags: list[ProductTag] = []
    images: list[Image] = []
    related_ids: list[int] = []
    upsell_ids: list[int] = []
    cross_sell_ids: list[int] = []

    class Config:
        extra = "ignore"

    @field_validator("price", "regular_price", "sale_price", mode="before")
    @classmethod
    def price_to_str(cls, v):
        if v is None:
            return ""
        return str(v)

    @property
    def price_decimal(self) -> Decimal:
        return to_decimal(self.price)

    @property
    def is_hidden(self) -> bool:
        """Tagged to stay out of listings; still reachable by slug."""
        return any(tag.slug == HIDDEN_PRODUCT_TAG for tag in self.tags)


class Collection(BaseModel):
    """Category facade over products; `slug` is the catalog filter key."""
    id: int
    name: str
    slug: str
    description: str = ""
    image: Optional[Image] = None
    count: int = 0

    class Config:
        extra = "ignore"

    @computed_field
    @property
    def path(self) -> str:
        return f"/products?category={self.slug}"


class PageInfo(BaseModel):
    """
    One page of a result sequence.

    `end_cursor` is an opaque continuation token. The current backend binding
    uses the page number, but callers must pass it back unchanged.
    """
    has_next_page: bool = Field(default=False, alias="hasNextPage")
    has_previous_page: bool = Field(default=False, alias="hasPreviousPage")
    end_cursor: str = Field(default="1", alias="endCursor")

    class Config:
        populate_by_name = True


class ProductPage(BaseModel):
    products: list[Product] = []
    page_info: Optional[PageInfo] = Field(default=None, alias="pageInfo")

    class Config:
        populate_by_name = True


class Money(BaseModel):
    amount: str
    currency_code: str = Field(default="USD", alias="currencyCode")

    class Config:
        populate_by_name = True


class ProductQuery(BaseModel):
    """Normalized product list filter."""
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1, le=100)
    search: Optional[str] = None
    category: Optional[str] = None
    tag: Optional[str] = None
    orderby: str = DEFAULT_ORDERBY
    order: str = DEFAULT_ORDER
    min_price: Optional[str] = None
    max_price: Optional[str] = None
    exclude: list[int] = []

    def to_params(self) -> dict[str, str]:
        """Query parameters in the backend's native shape; empty filters are omitted."""
        params = {
            "page": str(self.page),
            "per_page": str(self.per_page),
            "orderby": self.orderby,
            "order": self.order,
        }
        for name in ("search", "category", "tag", "min_price", "max_price"):
            value = getattr(self, name)
            if value:
                params[name] = value
        if self.exclude:
            params["exclude"] = ",".join(str(product_id) for product_id in self.exclude)
        return params
