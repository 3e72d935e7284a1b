"""Commerce package: models, backends, and the cart/catalog client."""
from .client import CommerceClient, get_commerce_client
from .models import (
    Cart,
    CartItem,
    CartTotals,
    Collection,
    Money,
    PageInfo,
    Product,
    ProductPage,
    ProductQuery,
)

__all__ = [
    "Cart",
    "CartItem",
    "CartTotals",
    "Collection",
    "CommerceClient",
    "Money",
    "PageInfo",
    "Product",
    "ProductPage",
    "ProductQuery",
    "get_commerce_client",
]
