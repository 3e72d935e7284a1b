"""
Common Error Constants and Exceptions

Centralized error messages to avoid string duplication, plus the exception
types raised across the commerce client and the cart store.
"""
from enum import Enum
from typing import Any

# Cart errors
ERROR_MISSING_PRODUCT_ID = "Missing product ID"
ERROR_MISSING_ITEM_KEY = "Missing item key"
ERROR_INVALID_QUANTITY = "Quantity must be a non-negative integer"
ERROR_ADD_TO_CART = "Error adding item to cart"
ERROR_REMOVE_FROM_CART = "Error removing item from cart"
ERROR_UPDATE_CART = "Error updating item quantity"
ERROR_CART_REFRESH = "Cart could not be refreshed after update"

# Catalog errors
ERROR_FETCH_PRODUCTS = "Failed to fetch products"
ERROR_PRODUCT_NOT_FOUND = "Product not found"


class CartActionFailure(str, Enum):
    """Machine-checkable reason a cart action did not succeed."""
    MISSING_PRODUCT_ID = "missing_product_id"
    MISSING_ITEM_KEY = "missing_item_key"
    INVALID_QUANTITY = "invalid_quantity"
    # backend answered 4xx, e.g. a cart line that no longer exists
    REJECTED = "rejected"
    BACKEND_UNAVAILABLE = "backend_unavailable"

    @property
    def is_validation(self) -> bool:
        """True when the action was rejected before any request was sent."""
        return self not in (CartActionFailure.REJECTED, CartActionFailure.BACKEND_UNAVAILABLE)


class StorefrontError(Exception):
    """Base class for storefront core errors."""


class BackendError(StorefrontError):
    """Commerce backend request failed or returned a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        raw_error: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.raw_error = raw_error


class CartMutationError(StorefrontError):
    """A cart mutation was rejected or failed; the cart snapshot is unchanged."""

    def __init__(
        self,
        reason: CartActionFailure,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code


class CartRefreshError(StorefrontError):
    """The mutation was accepted but the cart could not be re-read afterwards."""
