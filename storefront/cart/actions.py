"""Cart actions - validate cart intents and send them to the commerce client.

Each action returns a CartActionResult instead of raising. Validation
rejections never reach the network. Backend failures are reported as
REJECTED when the backend answered 4xx, BACKEND_UNAVAILABLE otherwise.

Actions only send the mutation; re-reading the cart is left to the caller
(see CartStore), so every mutation costs exactly one follow-up read.
"""
from dataclasses import dataclass
from typing import Any, Optional

from storefront.commerce.client import CommerceClient
from storefront.errors import (
    ERROR_ADD_TO_CART,
    ERROR_INVALID_QUANTITY,
    ERROR_MISSING_ITEM_KEY,
    ERROR_MISSING_PRODUCT_ID,
    ERROR_REMOVE_FROM_CART,
    ERROR_UPDATE_CART,
    BackendError,
    CartActionFailure,
)
from storefront.logging import get_logger, loggable

logger = get_logger(__name__)


@dataclass
class CartActionResult:
    """Outcome of one cart action."""
    ok: bool
    reason: Optional[CartActionFailure] = None
    message: Optional[str] = None
    # backend HTTP status, when the backend answered at all
    status_code: Optional[int] = None

    @classmethod
    def success(cls) -> "CartActionResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: CartActionFailure, message: str) -> "CartActionResult":
        return cls(ok=False, reason=reason, message=message)

    @classmethod
    def from_backend_error(cls, e: BackendError, prefix: str) -> "CartActionResult":
        status = e.status_code
        reason = (
            CartActionFailure.REJECTED
            if status is not None and 400 <= status < 500
            else CartActionFailure.BACKEND_UNAVAILABLE
        )
        return cls(ok=False, reason=reason, message=f"{prefix}: {e}", status_code=status)

    @property
    def is_validation_error(self) -> bool:
        return self.reason is not None and self.reason.is_validation


async def add_item(
    client: CommerceClient,
    product_id: Optional[int],
    quantity: int = 1,
    variation: Optional[list[dict[str, Any]]] = None,
) -> CartActionResult:
    """Add `quantity` of a product. A missing or non-positive id is rejected locally."""
    if not product_id or product_id < 0:
        return CartActionResult.failure(CartActionFailure.MISSING_PRODUCT_ID, ERROR_MISSING_PRODUCT_ID)
    if quantity < 1:
        return CartActionResult.failure(CartActionFailure.INVALID_QUANTITY, ERROR_INVALID_QUANTITY)

    try:
        await client.send_add_item(product_id, quantity, variation)
    except BackendError as e:
        logger.warning("Add to cart failed for product %s: %s", product_id, e)
        return CartActionResult.from_backend_error(e, ERROR_ADD_TO_CART)
    return CartActionResult.success()


async def remove_item(client: CommerceClient, item_key: Optional[str]) -> CartActionResult:
    """Remove one cart line by key."""
    if not item_key:
        return CartActionResult.failure(CartActionFailure.MISSING_ITEM_KEY, ERROR_MISSING_ITEM_KEY)

    try:
        await client.send_remove_item(item_key)
    except BackendError as e:
        logger.warning("Remove from cart failed for %s: %s", loggable(item_key), e)
        return CartActionResult.from_backend_error(e, ERROR_REMOVE_FROM_CART)
    return CartActionResult.success()


async def update_item_quantity(
    client: CommerceClient,
    item_key: Optional[str],
    quantity: int,
) -> CartActionResult:
    """
    Set the quantity of one cart line.

    Quantity 0 is not a stored state: it is sent as a removal of the line.
    """
    if not item_key:
        return CartActionResult.failure(CartActionFailure.MISSING_ITEM_KEY, ERROR_MISSING_ITEM_KEY)
    if quantity < 0:
        return CartActionResult.failure(CartActionFailure.INVALID_QUANTITY, ERROR_INVALID_QUANTITY)

    try:
        if quantity == 0:
            await client.send_remove_item(item_key)
        else:
            await client.send_update_item(item_key, quantity)
    except BackendError as e:
        logger.warning("Cart update failed for %s: %s", loggable(item_key), e)
        return CartActionResult.from_backend_error(e, ERROR_UPDATE_CART)
    return CartActionResult.success()
