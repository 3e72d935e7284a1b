"""
Cart API Router

Session cart endpoints. Every write returns the cart as re-read from the
backend after the mutation, plus the derived total quantity.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.cart.store import CartStore, get_cart_store
from storefront.errors import CartActionFailure, CartMutationError, CartRefreshError
from .models import AddToCartRequest, UpdateCartItemRequest

router = APIRouter(tags=["cart"])


def _cart_response(store: CartStore) -> dict:
    cart = store.snapshot
    return {
        "cart": cart.model_dump() if cart else None,
        "total_quantity": store.total_quantity.get(),
    }


def _raise_for_mutation(e: CartMutationError) -> None:
    if e.reason is not None and e.reason.is_validation:
        status_code = 400
    elif e.reason is CartActionFailure.REJECTED and e.status_code:
        # backend refused the change; pass its 4xx through
        status_code = e.status_code
    else:
        status_code = 502
    raise HTTPException(
        status_code=status_code,
        detail={"reason": e.reason.value if e.reason else None, "message": str(e)},
    )


@router.get("/api/cart")
async def get_cart(store: CartStore = Depends(get_cart_store)):
    await store.refresh()
    return _cart_response(store)


@router.post("/api/cart/items")
async def add_cart_item(request: AddToCartRequest, store: CartStore = Depends(get_cart_store)):
    try:
        await store.add_item_to_cart(request.product_id, request.quantity, request.variation)
    except CartMutationError as e:
        _raise_for_mutation(e)
    except CartRefreshError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _cart_response(store)


@router.patch("/api/cart/items/{item_key}")
async def update_cart_item(
    item_key: str,
    request: UpdateCartItemRequest,
    store: CartStore = Depends(get_cart_store),
):
    try:
        await store.update_cart_item_quantity(item_key, request.quantity)
    except CartMutationError as e:
        _raise_for_mutation(e)
    except CartRefreshError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _cart_response(store)


@router.delete("/api/cart/items/{item_key}")
async def remove_cart_item(item_key: str, store: CartStore = Depends(get_cart_store)):
    try:
        await store.remove_item_from_cart(item_key)
    except CartMutationError as e:
        _raise_for_mutation(e)
    except CartRefreshError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _cart_response(store)
