"""Live commerce backend - WooCommerce-style REST API over httpx.

Session cart calls go to the Store API and rely on the session cookie kept
by the shared httpx client. Catalog calls go to the management API and are
authenticated with the consumer key/secret pair.
"""

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from storefront.commerce.backends.base import CommerceBackend
from storefront.commerce.constants import (
    CATEGORIES_PER_PAGE,
    HEADER_TOTAL,
    HEADER_TOTAL_PAGES,
    Endpoints,
)
from storefront.commerce.models import (
    Cart,
    Collection,
    PageInfo,
    Product,
    ProductPage,
    ProductQuery,
)
from storefront.config import Settings
from storefront.errors import BackendError
from storefront.logging import get_logger

logger = get_logger(__name__)


def _parse_int_header(response: httpx.Response, name: str, default: int) -> int:
    try:
        return int(response.headers.get(name, default))
    except (TypeError, ValueError):
        return default


class LiveBackend(CommerceBackend):
    """Commerce backend talking to a real storefront API."""

    name = "live"

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self.base_url = settings.api_url.rstrip("/")
        self._transport = transport

        # HTTP client (lazy init)
        self._http_client: httpx.AsyncClient | None = None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazy creation of the shared httpx client; it also holds the cart session cookie."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.settings.http_timeout, connect=5.0),
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def _auth_params(self) -> dict[str, str]:
        return {
            "consumer_key": self.settings.consumer_key,
            "consumer_secret": self.settings.consumer_secret,
        }

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[dict[str, Any]] = None,
        body: Optional[dict[str, Any]] = None,
        require_auth: bool = False,
        basic_auth: bool = False,
    ) -> httpx.Response:
        """
        Send one request and return the successful response.

        Args:
            method: HTTP method
            endpoint: Path relative to the API URL
            params: Query parameters
            body: JSON body (ignored for GET)
            require_auth: Attach key/secret as query parameters
            basic_auth: Send key/secret as HTTP Basic credentials

        Raises:
            BackendError: On transport failure or non-2xx status
        """
        query = dict(params or {})
        if require_auth:
            query.update(self._auth_params())

        auth = None
        if basic_auth:
            auth = httpx.BasicAuth(self.settings.consumer_key, self.settings.consumer_secret)

        client = await self._get_http_client()
        try:
            response = await client.request(
                method,
                f"{self.base_url}{endpoint}",
                params=query or None,
                json=body if body is not None and method != "GET" else None,
                auth=auth,
            )
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("Commerce API error %s on %s %s", status, method, endpoint)
            raise BackendError(
                f"Commerce API error: {status} {e.response.reason_phrase}",
                status_code=status,
                raw_error=e,
            ) from e
        except httpx.RequestError as e:
            logger.error("Commerce API network error on %s %s: %s", method, endpoint, e)
            raise BackendError(f"Failed to connect to commerce API: {e!s}", raw_error=e) from e

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise BackendError("Commerce API returned invalid JSON", raw_error=e) from e

    # ==================== CART ====================

    async def get_cart(self) -> Cart:
        response = await self._request("GET", Endpoints.CART)
        try:
            return Cart.model_validate(self._json(response))
        except ValidationError as e:
            raise BackendError("Commerce API returned a malformed cart", raw_error=e) from e

    async def add_item(
        self,
        product_id: int,
        quantity: int,
        variation: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        body: dict[str, Any] = {"id": product_id, "quantity": quantity}
        if variation:
            body["variation"] = variation
        await self._request("POST", Endpoints.CART_ADD_ITEM, body=body)

    async def remove_item(self, item_key: str) -> None:
        await self._request("POST", Endpoints.CART_REMOVE_ITEM, body={"key": item_key})

    async def update_item(self, item_key: str, quantity: int) -> None:
        await self._request(
            "POST", Endpoints.CART_UPDATE_ITEM, body={"key": item_key, "quantity": quantity}
        )

    # ==================== CATALOG ====================

    async def list_products(self, query: ProductQuery) -> ProductPage:
        response = await self._request(
            "GET", Endpoints.PRODUCTS, params=query.to_params(), basic_auth=True
        )
        products = self._parse_products(self._json(response))

        # Page flags come from the pagination headers, not from the result size
        total_pages = _parse_int_header(response, HEADER_TOTAL_PAGES, 1)
        total = _parse_int_header(response, HEADER_TOTAL, 0)
        logger.debug(
            "Fetched products page %s/%s (%s total)", query.page, total_pages, total
        )

        return ProductPage(
            products=products,
            page_info=PageInfo(
                has_next_page=query.page < total_pages,
                has_previous_page=query.page > 1,
                end_cursor=str(query.page),
            ),
        )

    async def find_products_by_slug(self, slug: str) -> list[Product]:
        response = await self._request(
            "GET", Endpoints.PRODUCTS, params={"slug": slug}, require_auth=True
        )
        return self._parse_products(self._json(response))

    async def get_product_by_id(self, product_id: int) -> Product:
        response = await self._request("GET", Endpoints.product(product_id), require_auth=True)
        try:
            return Product.model_validate(self._json(response))
        except ValidationError as e:
            raise BackendError("Commerce API returned a malformed product", raw_error=e) from e

    async def list_categories(self) -> list[Collection]:
        response = await self._request(
            "GET", Endpoints.CATEGORIES, params={"per_page": CATEGORIES_PER_PAGE}, require_auth=True
        )
        data = self._json(response)
        if not isinstance(data, list):
            raise BackendError("Commerce API returned a malformed category list")
        try:
            return [Collection.model_validate(category) for category in data]
        except ValidationError as e:
            raise BackendError("Commerce API returned a malformed category", raw_error=e) from e

    @staticmethod
    def _parse_products(data: Any) -> list[Product]:
        if not isinstance(data, list):
            raise BackendError("Commerce API returned a malformed product list")
        try:
            return [Product.model_validate(item) for item in data]
        except ValidationError as e:
            raise BackendError("Commerce API returned a malformed product", raw_error=e) from e
