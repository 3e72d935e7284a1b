"""Cart store - the in-process cart snapshot and its reconcile protocol.

Every successful mutation is followed by a fresh read of the backend cart.
The snapshot is always replaced with what the backend returns and never
merged locally with the mutation's parameters.

Failure policy:
- mutation rejected or failed: CartMutationError, no refresh, snapshot kept
- mutation succeeded but the refresh failed: CartRefreshError, snapshot kept

Mutations and refreshes are serialized per store by an asyncio.Lock, so two
mutations scheduled back to back end with the snapshot of the one issued
last, and a refresh can never land on top of a newer post-mutation snapshot.
"""
import asyncio
from typing import Any, Callable, Optional

from storefront.cart.actions import (
    CartActionResult,
    add_item,
    remove_item,
    update_item_quantity,
)
from storefront.commerce.client import CommerceClient, get_commerce_client
from storefront.commerce.models import Cart
from storefront.errors import ERROR_CART_REFRESH, BackendError, CartMutationError, CartRefreshError
from storefront.logging import get_logger
from storefront.state import Atom, Computed, Unsubscribe

logger = get_logger(__name__)


def _total_quantity(cart: Optional[Cart]) -> int:
    return cart.item_count if cart else 0


class CartStore:
    """
    Owns the authoritative in-process cart snapshot.

    `cart` is None until the first refresh. `total_quantity` is derived from
    the snapshot and has no storage of its own.
    """

    def __init__(self, client: Optional[CommerceClient] = None):
        self._client = client
        self.cart: Atom[Optional[Cart]] = Atom(None)
        self.total_quantity: Computed[Optional[Cart], int] = Computed(self.cart, _total_quantity)
        self._lock = asyncio.Lock()

    @property
    def client(self) -> CommerceClient:
        if self._client is None:
            self._client = get_commerce_client()
        return self._client

    @property
    def snapshot(self) -> Optional[Cart]:
        return self.cart.get()

    def subscribe(self, listener: Callable[[Optional[Cart]], None]) -> Unsubscribe:
        """Observe snapshot replacements; `listener` also gets the current snapshot."""
        return self.cart.subscribe(listener)

    async def refresh(self) -> Cart:
        """Replace the snapshot with the backend cart (empty cart if unavailable)."""
        async with self._lock:
            cart = await self.client.get_cart()
            self.cart.set(cart)
            return cart

    async def add_item_to_cart(
        self,
        product_id: Optional[int],
        quantity: int = 1,
        variation: Optional[list[dict[str, Any]]] = None,
    ) -> Cart:
        async with self._lock:
            result = await add_item(self.client, product_id, quantity, variation)
            return await self._reconcile(result)

    async def remove_item_from_cart(self, item_key: Optional[str]) -> Cart:
        async with self._lock:
            result = await remove_item(self.client, item_key)
            return await self._reconcile(result)

    async def update_cart_item_quantity(self, item_key: Optional[str], quantity: int) -> Cart:
        async with self._lock:
            result = await update_item_quantity(self.client, item_key, quantity)
            return await self._reconcile(result)

    async def _reconcile(self, result: CartActionResult) -> Cart:
        if not result.ok:
            logger.info("Cart mutation rejected: %s", result.reason.value if result.reason else "unknown")
            raise CartMutationError(
                result.reason,
                result.message or "Cart update failed",
                status_code=result.status_code,
            )

        try:
            cart = await self.client.fetch_cart()
        except BackendError as e:
            logger.error("Cart refresh after mutation failed: %s", e)
            raise CartRefreshError(f"{ERROR_CART_REFRESH}: {e}") from e

        self.cart.set(cart)
        return cart


# Singleton instance
_cart_store: Optional[CartStore] = None


def get_cart_store() -> CartStore:
    """Get CartStore singleton."""
    global _cart_store
    if _cart_store is None:
        _cart_store = CartStore()
    return _cart_store
