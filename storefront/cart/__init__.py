"""Cart package: actions, store, and layout view preference."""
from .actions import CartActionResult, add_item, remove_item, update_item_quantity
from .store import CartStore, get_cart_store
from .view import LayoutView, get_layout_view, layout_view, set_layout_view

__all__ = [
    "CartActionResult",
    "CartStore",
    "LayoutView",
    "add_item",
    "get_cart_store",
    "get_layout_view",
    "layout_view",
    "remove_item",
    "set_layout_view",
    "update_item_quantity",
]
