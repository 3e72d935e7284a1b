"""
Commerce Client

Single point of contact with the commerce backend for cart and catalog
calls. The backend (live API or mock dataset) is chosen once when the client
is built and stays fixed for its lifetime.

Failure policy:
- get_cart(): falls back to the empty cart
- cart mutations and get_products(): raise BackendError
- get_product(): None on error
- collections, collection products, recommendations: empty results on error

Listings never include products tagged hidden; get_product() still finds them.
"""
import asyncio
from typing import Any, Optional

from storefront.commerce.backends import CommerceBackend, MockBackend, select_backend
from storefront.commerce.constants import (
    COLLECTION_PER_PAGE,
    DEFAULT_CURRENCY_CODE,
    RECOMMENDATIONS_LIMIT,
    order_for_reverse,
    orderby_for_sort_key,
)
from storefront.commerce.models import (
    Cart,
    Collection,
    Money,
    Product,
    ProductPage,
    ProductQuery,
)
from storefront.config import Settings, get_settings
from storefront.errors import BackendError
from storefront.logging import get_logger, loggable

logger = get_logger(__name__)


def _visible(page: ProductPage) -> ProductPage:
    """Drop products tagged hidden; pagination is left as the backend reported it."""
    products = [p for p in page.products if not p.is_hidden]
    if len(products) == len(page.products):
        return page
    return ProductPage(products=products, page_info=page.page_info)


class CommerceClient:
    """Stateless request/response client over one commerce backend."""

    def __init__(self, backend: Optional[CommerceBackend] = None, settings: Optional[Settings] = None):
        self._backend = backend if backend is not None else select_backend(settings or get_settings())

    @property
    def backend(self) -> CommerceBackend:
        return self._backend

    @property
    def is_mock(self) -> bool:
        return isinstance(self._backend, MockBackend)

    async def aclose(self) -> None:
        await self._backend.aclose()

    # ==================== CART ====================

    async def get_cart(self) -> Cart:
        """Current session cart, or the empty cart if the backend fails."""
        try:
            return await self._backend.get_cart()
        except BackendError as e:
            logger.warning("Cart fetch failed, returning empty cart: %s", e)
            return Cart.empty()

    async def fetch_cart(self) -> Cart:
        """Current session cart; raises BackendError instead of falling back."""
        return await self._backend.get_cart()

    async def create_cart(self) -> Cart:
        """The backend creates carts per session on first use; this only reads it."""
        return await self.get_cart()

    async def add_to_cart(
        self,
        product_id: int,
        quantity: int = 1,
        variation: Optional[list[dict[str, Any]]] = None,
    ) -> Cart:
        await self.send_add_item(product_id, quantity, variation)
        return await self.get_cart()

    async def remove_from_cart(self, item_key: str) -> Cart:
        await self.send_remove_item(item_key)
        return await self.get_cart()

    async def update_cart(self, item_key: str, quantity: int) -> Cart:
        await self.send_update_item(item_key, quantity)
        return await self.get_cart()

    # Mutation requests alone, for callers that do their own follow-up read

    async def send_add_item(
        self,
        product_id: int,
        quantity: int = 1,
        variation: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        await self._backend.add_item(product_id, quantity, variation)
        logger.info("Added product %s x%s to cart", product_id, quantity)

    async def send_remove_item(self, item_key: str) -> None:
        await self._backend.remove_item(item_key)
        logger.info("Removed cart item %s", loggable(item_key))

    async def send_update_item(self, item_key: str, quantity: int) -> None:
        await self._backend.update_item(item_key, quantity)
        logger.info("Updated cart item %s to quantity %s", loggable(item_key), quantity)

    # ==================== CATALOG ====================

    async def get_products(self, query: Optional[ProductQuery] = None) -> ProductPage:
        """One page of products. Backend errors propagate to the caller."""
        query = query or ProductQuery()
        if query.search:
            logger.debug("Product search: %s", loggable(query.search))
        return _visible(await self._backend.list_products(query))

    async def get_product(self, slug: str) -> Optional[Product]:
        """Product by slug; None when not found or on backend error."""
        try:
            products = await self._backend.find_products_by_slug(slug)
        except BackendError as e:
            logger.error("Error fetching product %s: %s", loggable(slug), e)
            return None
        return products[0] if products else None

    async def get_collection_products(
        self,
        collection: str,
        sort_key: Optional[str] = None,
        reverse: bool = False,
    ) -> ProductPage:
        """Products of one category, sorted by the fixed sort-key table."""
        query = ProductQuery(
            category=collection,
            orderby=orderby_for_sort_key(sort_key),
            order=order_for_reverse(reverse),
            per_page=COLLECTION_PER_PAGE,
        )
        try:
            return _visible(await self._backend.list_products(query))
        except BackendError as e:
            logger.error(
                "Error fetching collection products for %s: %s",
                loggable(collection),
                e,
            )
            return ProductPage(products=[], page_info=None)

    async def get_collections(self) -> list[Collection]:
        try:
            return await self._backend.list_categories()
        except BackendError as e:
            logger.error("Error fetching collections: %s", e)
            return []

    async def get_product_recommendations(self, product_id: int) -> list[Product]:
        """
        Products to show next to `product_id`.

        Related products first (up to 4), otherwise products from the first
        category of the product, otherwise nothing.
        """
        try:
            product = await self._backend.get_product_by_id(product_id)

            if product.related_ids:
                related_ids = product.related_ids[:RECOMMENDATIONS_LIMIT]
                related = await asyncio.gather(
                    *[self._backend.get_product_by_id(related_id) for related_id in related_ids]
                )
                return [p for p in related if not p.is_hidden]

            if product.categories:
                page = await self._backend.list_products(
                    ProductQuery(
                        category=str(product.categories[0].id),
                        exclude=[product_id],
                        per_page=RECOMMENDATIONS_LIMIT,
                    )
                )
                return _visible(page).products

            return []
        except BackendError as e:
            logger.error("Error fetching product recommendations for %s: %s", product_id, e)
            return []

    async def get_highest_product_price(self) -> Optional[Money]:
        """Price of the most expensive product, used to bound price filters."""
        try:
            page = await self._backend.list_products(
                ProductQuery(orderby="price", order="desc", per_page=1)
            )
        except BackendError as e:
            logger.error("Error fetching highest product price: %s", e)
            return None

        if not page.products:
            return None
        return Money(amount=page.products[0].price, currency_code=DEFAULT_CURRENCY_CODE)


# Process-wide instance; the backend choice is fixed once it exists
_commerce_client: Optional[CommerceClient] = None


def get_commerce_client() -> CommerceClient:
    """Get CommerceClient singleton."""
    global _commerce_client
    if _commerce_client is None:
        _commerce_client = CommerceClient()
    return _commerce_client
