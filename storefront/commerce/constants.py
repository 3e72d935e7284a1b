"""Catalog constants, sort vocabulary and commerce API endpoint paths."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SortKey(str, Enum):
    """Sort keys accepted by collection listings."""
    PRICE = "PRICE"
    BEST_SELLING = "BEST_SELLING"
    CREATED_AT = "CREATED_AT"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Sort key -> backend orderby. Anything else falls back to DEFAULT_ORDERBY.
SORT_KEY_ORDERBY: dict[str, str] = {
    SortKey.PRICE.value: "price",
    SortKey.BEST_SELLING.value: "popularity",
    SortKey.CREATED_AT.value: "date",
}

DEFAULT_ORDERBY = "date"
DEFAULT_ORDER = SortOrder.DESC.value
DEFAULT_PER_PAGE = 12
COLLECTION_PER_PAGE = 100
RECOMMENDATIONS_LIMIT = 4
CATEGORIES_PER_PAGE = 100


def orderby_for_sort_key(sort_key: Optional[str]) -> str:
    """Translate a collection sort key into the backend orderby value."""
    if not sort_key:
        return DEFAULT_ORDERBY
    return SORT_KEY_ORDERBY.get(sort_key, DEFAULT_ORDERBY)


def orderby_for_listing(sort_key: Optional[str]) -> str:
    """
    Translate the product list `sortKey` into the backend orderby value.

    SortKey names are translated by the fixed table. Anything else is taken
    as a backend orderby already (the SORTING menu links use those) and is
    passed through for the backend to accept or reject.
    """
    if not sort_key:
        return DEFAULT_ORDERBY
    return SORT_KEY_ORDERBY.get(sort_key, sort_key)


def order_for_reverse(reverse: bool) -> str:
    """
    Translate the listing `reverse` flag into the backend order direction.

    reverse=True maps to ascending and reverse=False to descending. Storefront
    links are built against this mapping; keep it as is.
    """
    return SortOrder.ASC.value if reverse else SortOrder.DESC.value


@dataclass(frozen=True)
class SortFilterItem:
    """Entry of the storefront sort menu."""
    title: str
    slug: Optional[str]
    sort_key: str
    reverse: bool


DEFAULT_SORT = SortFilterItem(title="Relevance", slug=None, sort_key="date", reverse=False)

SORTING: tuple[SortFilterItem, ...] = (
    DEFAULT_SORT,
    SortFilterItem(title="Trending", slug="trending-desc", sort_key="popularity", reverse=False),
    SortFilterItem(title="Latest arrivals", slug="latest-desc", sort_key="date", reverse=True),
    SortFilterItem(title="Price: Low to high", slug="price-asc", sort_key="price", reverse=False),
    SortFilterItem(title="Price: High to low", slug="price-desc", sort_key="price", reverse=True),
)


def get_sort_by_slug(slug: Optional[str]) -> SortFilterItem:
    """Find a sort menu entry by slug; unknown or empty slugs give DEFAULT_SORT."""
    if not slug:
        return DEFAULT_SORT
    return next((item for item in SORTING if item.slug == slug), DEFAULT_SORT)


HIDDEN_PRODUCT_TAG = "hidden"
DEFAULT_CURRENCY_CODE = "USD"
DEFAULT_CURRENCY_SYMBOL = "$"


class Endpoints:
    """Commerce REST API paths, relative to the configured API URL."""

    # Session cart (Store API, no key/secret)
    CART = "/wc/store/v1/cart"
    CART_ADD_ITEM = "/wc/store/v1/cart/add-item"
    CART_REMOVE_ITEM = "/wc/store/v1/cart/remove-item"
    CART_UPDATE_ITEM = "/wc/store/v1/cart/update-item"

    # Catalog (management API, key/secret required)
    PRODUCTS = "/wc/v3/products"
    CATEGORIES = "/wc/v3/products/categories"

    @staticmethod
    def product(product_id: int) -> str:
        return f"/wc/v3/products/{product_id}"


# Pagination headers sent with product listings
HEADER_TOTAL_PAGES = "X-WP-TotalPages"
HEADER_TOTAL = "X-WP-Total"
