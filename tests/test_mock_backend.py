"""Tests for the in-memory commerce backend"""
import pytest

from storefront.commerce.backends.mock import MockBackend, make_item_key
from storefront.commerce.models import ProductQuery
from storefront.errors import BackendError


@pytest.fixture
def mock_backend():
    return MockBackend()


@pytest.mark.asyncio
async def test_new_session_cart_is_empty(mock_backend):
    cart = await mock_backend.get_cart()

    assert cart.items == []
    assert cart.item_count == 0
    assert cart.needs_payment is False
    assert cart.needs_shipping is False


@pytest.mark.asyncio
async def test_add_item_builds_totals(mock_backend):
    await mock_backend.add_item(42, 2)

    cart = await mock_backend.get_cart()

    assert cart.item_count == 2
    assert len(cart.items) == 1
    item = cart.items[0]
    assert item.id == 42
    assert item.key == make_item_key(42)
    assert item.totals.line_total == "39.98"
    assert cart.totals.total_price == "39.98"
    assert cart.needs_payment is True


@pytest.mark.asyncio
async def test_add_same_product_merges_line(mock_backend):
    await mock_backend.add_item(42, 1)
    await mock_backend.add_item(42, 2)

    cart = await mock_backend.get_cart()

    assert len(cart.items) == 1
    assert cart.items[0].quantity == 3


@pytest.mark.asyncio
async def test_variations_get_separate_lines(mock_backend):
    await mock_backend.add_item(42, 1, [{"attribute": "size", "value": "M"}])
    await mock_backend.add_item(42, 1, [{"attribute": "size", "value": "L"}])

    cart = await mock_backend.get_cart()

    assert [item.id for item in cart.items] == [42, 42]
    assert cart.items[0].key != cart.items[1].key
    assert cart.item_count == 2


@pytest.mark.asyncio
async def test_add_unknown_product_fails(mock_backend):
    with pytest.raises(BackendError) as exc_info:
        await mock_backend.add_item(999, 1)

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_update_and_remove_unknown_key_fail(mock_backend):
    with pytest.raises(BackendError):
        await mock_backend.update_item("missing", 2)
    with pytest.raises(BackendError):
        await mock_backend.remove_item("missing")


@pytest.mark.asyncio
async def test_list_products_single_page(mock_backend):
    page = await mock_backend.list_products(ProductQuery())

    assert len(page.products) == 7
    assert page.page_info.has_next_page is False
    assert page.page_info.has_previous_page is False
    assert page.page_info.end_cursor == "1"


@pytest.mark.asyncio
async def test_page_past_end_has_no_next_page(mock_backend):
    page = await mock_backend.list_products(ProductQuery(page=2))

    assert page.products == []
    assert page.page_info.has_next_page is False
    assert page.page_info.has_previous_page is True
    assert page.page_info.end_cursor == "2"


@pytest.mark.asyncio
async def test_pagination_across_pages(mock_backend):
    first = await mock_backend.list_products(ProductQuery(per_page=3))
    last = await mock_backend.list_products(ProductQuery(per_page=3, page=3))

    assert first.page_info.has_next_page is True
    assert len(last.products) == 1
    assert last.page_info.has_next_page is False


@pytest.mark.asyncio
async def test_price_sort_directions(mock_backend):
    asc = await mock_backend.list_products(ProductQuery(orderby="price", order="asc"))
    desc = await mock_backend.list_products(ProductQuery(orderby="price", order="desc"))

    assert asc.products[0].slug == "enamel-mug"
    assert desc.products[0].slug == "zip-hoodie"


@pytest.mark.asyncio
async def test_unknown_orderby_is_rejected(mock_backend):
    with pytest.raises(BackendError) as exc_info:
        await mock_backend.list_products(ProductQuery(orderby="PRICE"))

    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_filters(mock_backend):
    by_category = await mock_backend.list_products(ProductQuery(category="accessories"))
    by_tag = await mock_backend.list_products(ProductQuery(tag="sale"))
    by_search = await mock_backend.list_products(ProductQuery(search="HOODIE"))
    by_price = await mock_backend.list_products(ProductQuery(min_price="20", max_price="40"))

    assert {p.id for p in by_category.products} == {44, 45}
    assert {p.id for p in by_tag.products} == {43, 46}
    assert [p.id for p in by_search.products] == [43]
    assert {p.id for p in by_price.products} == {45, 47, 48}


@pytest.mark.asyncio
async def test_list_categories_counts_products(mock_backend):
    collections = await mock_backend.list_categories()
    counts = {c.slug: c.count for c in collections}

    assert counts == {"apparel": 3, "accessories": 2, "home": 3}


@pytest.mark.asyncio
async def test_returned_products_are_copies(mock_backend):
    product = await mock_backend.get_product_by_id(42)
    product.name = "Changed"

    again = await mock_backend.get_product_by_id(42)
    assert again.name == "Classic Tee"
