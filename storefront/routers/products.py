"""
Products API Router

Public catalog endpoints: paginated product list, product detail,
recommendations and collections.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from storefront.commerce.client import CommerceClient, get_commerce_client
from storefront.commerce.constants import order_for_reverse, orderby_for_listing
from storefront.commerce.models import ProductQuery
from storefront.errors import ERROR_FETCH_PRODUCTS, ERROR_PRODUCT_NOT_FOUND, BackendError
from storefront.logging import get_logger, loggable

logger = get_logger(__name__)

router = APIRouter(tags=["products"])


def _page_from_cursor(cursor: Optional[str]) -> int:
    """The current backend binding encodes the cursor as a page number."""
    if not cursor:
        return 1
    try:
        page = int(cursor)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid cursor")
    if page < 1:
        raise HTTPException(status_code=400, detail="Invalid cursor")
    return page


@router.get("/api/products")
async def get_products(
    cursor: Optional[str] = None,
    sortKey: Optional[str] = None,
    reverse: bool = False,
    search: Optional[str] = None,
    category: Optional[str] = None,
    tag: Optional[str] = None,
    client: CommerceClient = Depends(get_commerce_client),
):
    """Product list page for infinite scroll; `cursor` is the previous page's endCursor."""
    query = ProductQuery(
        page=_page_from_cursor(cursor),
        orderby=orderby_for_listing(sortKey),
        order=order_for_reverse(reverse),
        search=search,
        category=category,
        tag=tag,
    )
    try:
        page = await client.get_products(query)
    except BackendError as e:
        logger.error("Error fetching products: %s", e)
        return JSONResponse(status_code=500, content={"error": ERROR_FETCH_PRODUCTS})

    return page.model_dump(by_alias=True)


@router.get("/api/products/{slug}")
async def get_product(slug: str, client: CommerceClient = Depends(get_commerce_client)):
    product = await client.get_product(slug)
    if product is None:
        logger.info("Product not found: %s", loggable(slug))
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return product.model_dump()


@router.get("/api/products/{product_id}/recommendations")
async def get_product_recommendations(
    product_id: int, client: CommerceClient = Depends(get_commerce_client)
):
    products = await client.get_product_recommendations(product_id)
    return [p.model_dump() for p in products]


@router.get("/api/collections")
async def get_collections(client: CommerceClient = Depends(get_commerce_client)):
    collections = await client.get_collections()
    return [c.model_dump() for c in collections]


@router.get("/api/collections/{slug}/products")
async def get_collection_products(
    slug: str,
    sortKey: Optional[str] = None,
    reverse: bool = False,
    client: CommerceClient = Depends(get_commerce_client),
):
    page = await client.get_collection_products(slug, sort_key=sortKey, reverse=reverse)
    return page.model_dump(by_alias=True)


@router.get("/api/price-range")
async def get_price_range(client: CommerceClient = Depends(get_commerce_client)):
    """Highest catalog price, for the price filter slider."""
    highest = await client.get_highest_product_price()
    return {"highest": highest.model_dump(by_alias=True) if highest else None}
