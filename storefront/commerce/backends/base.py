"""Base Backend for commerce data sources.

Defines the capability interface the commerce client depends on. The live
REST API and the in-memory mock dataset both implement it, so the client
never branches on which one it talks to.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from storefront.commerce.models import Cart, Collection, Product, ProductPage, ProductQuery


class CommerceBackend(ABC):
    """Base class for commerce backends.

    Every method is one request/response exchange and raises
    `storefront.errors.BackendError` on failure. Fallback policy belongs to
    the client, not to backends.
    """

    # Backend identifier used in logs
    name: str = ""

    # ==================== CART ====================

    @abstractmethod
    async def get_cart(self) -> Cart:
        """Return the authoritative session cart."""

    @abstractmethod
    async def add_item(
        self,
        product_id: int,
        quantity: int,
        variation: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        """Add a product line (or increase an existing one)."""

    @abstractmethod
    async def remove_item(self, item_key: str) -> None:
        """Remove the cart line identified by `item_key`."""

    @abstractmethod
    async def update_item(self, item_key: str, quantity: int) -> None:
        """Set the quantity of an existing cart line."""

    # ==================== CATALOG ====================

    @abstractmethod
    async def list_products(self, query: ProductQuery) -> ProductPage:
        """Return one page of products with its PageInfo."""

    @abstractmethod
    async def find_products_by_slug(self, slug: str) -> list[Product]:
        """Return products whose slug matches (zero or one in practice)."""

    @abstractmethod
    async def get_product_by_id(self, product_id: int) -> Product:
        """Return one product; a missing id is a BackendError with status 404."""

    @abstractmethod
    async def list_categories(self) -> list[Collection]:
        """Return product categories as collections."""

    async def aclose(self) -> None:
        """Release transport resources. Default: nothing to release."""
        return None
