"""
Catalog client tests - browsing state transitions, session persistence, HTTP client and browser.
"""

import json
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport
from pydantic import ValidationError as PydanticValidationError

from app.client.browser import CatalogBrowser
from app.client.catalog_state import CatalogState, CatalogStateStore, ProductFilters
from app.client.product_client import ProductClient, ProductClientError
from app.config import get_settings


@pytest_asyncio.fixture
async def product_client(app):
    async with ProductClient(base_url="http://test/api/v1", transport=ASGITransport(app=app)) as pc:
        yield pc


# --- state ---


def test_state_defaults():
    state = CatalogState()
    assert state.sort == "newest"
    assert state.page == 1
    assert state.page_size == 12
    assert state.view_mode == "grid"
    assert state.to_query() == {"sort": "newest", "page": 1, "pageSize": 12}


def test_filters_and_sort_reset_page():
    state = CatalogState(page=4)
    state.set_filters(ProductFilters(category="quarto", available=True))
    assert state.page == 1
    state.set_page(3)
    state.set_sort("price-asc")
    assert state.page == 1


def test_page_size_keeps_first_visible_item():
    state = CatalogState(page=3, page_size=12)  # first item index 24
    state.set_page_size(24)
    assert (state.page, state.page_size) == (2, 24)
    state.set_page_size(48)
    assert state.page == 1


@pytest.mark.parametrize("page_size", [8, 20, 0, 100])
def test_page_size_outside_allowed_set_rejected(page_size):
    state = CatalogState(page=3, page_size=24)
    with pytest.raises(PydanticValidationError):
        state.set_page_size(page_size)
    assert (state.page, state.page_size) == (3, 24)

    with pytest.raises(PydanticValidationError):
        CatalogState(page_size=page_size)


def test_view_mode_resets_pagination():
    state = CatalogState(page=2, page_size=36)
    state.set_view_mode("list")
    assert (state.view_mode, state.page, state.page_size) == ("list", 1, 12)


def test_clear_filters():
    state = CatalogState(filters=ProductFilters(featured=True), page=2)
    state.clear_filters()
    assert state.filters == ProductFilters()
    assert state.page == 1


def test_to_query_encodes_flags_as_text():
    state = CatalogState(filters=ProductFilters(category="banheiro", available=False, featured=True))
    query = state.to_query()
    assert query["category"] == "banheiro"
    assert query["available"] == "false"
    assert query["featured"] == "true"


# --- store ---


def test_store_persists_only_session_fields(tmp_path):
    store = CatalogStateStore(tmp_path / "state.json")
    state = CatalogState(
        filters=ProductFilters(category="cozinha"),
        sort="name-desc",
        page=5,
        page_size=24,
        view_mode="list",
        scroll_position=800,
    )
    store.save(state)

    restored = store.load()
    assert restored.filters.category == "cozinha"
    assert restored.sort == "name-desc"
    assert restored.page_size == 24
    assert restored.view_mode == "list"
    assert restored.page == 1
    assert restored.scroll_position == 0


def test_store_missing_file_gives_defaults(tmp_path):
    assert CatalogStateStore(tmp_path / "nope.json").load() == CatalogState()


def test_store_default_path_comes_from_settings():
    assert CatalogStateStore().path == Path(get_settings().catalog_state_path)


def test_store_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{broken", encoding="utf-8")
    assert CatalogStateStore(path).load() == CatalogState()


def test_store_unsupported_page_size_gives_defaults(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"sort": "price-asc", "page_size": 20}), encoding="utf-8")
    assert CatalogStateStore(path).load() == CatalogState()


# --- HTTP client ---


@pytest.mark.asyncio
async def test_client_list_and_get(product_client, service, make_payload):
    created = service.create_product(make_payload(featured=True))
    service.create_product(make_payload(name="Cama Box"))

    listing = await product_client.list_products(sort="name-asc", pageSize=12)
    assert [item.name for item in listing.items] == ["Poltrona Charles", "Cama Box"]
    assert listing.pagination.total == 2

    product = await product_client.get_product(created.id)
    assert product == created


@pytest.mark.asyncio
async def test_client_error_envelope_raises(product_client):
    with pytest.raises(ProductClientError) as exc_info:
        await product_client.get_product(404)
    assert exc_info.value.status_code == 404
    assert exc_info.value.code == "NOT_FOUND"

    with pytest.raises(ProductClientError) as exc_info:
        await product_client.list_products(pageSize=20)
    assert exc_info.value.code == "VALIDATION_ERROR"
    assert exc_info.value.details[0]["field"] == "pageSize"


@pytest.mark.asyncio
async def test_client_non_json_response():
    transport = httpx.MockTransport(lambda request: httpx.Response(502, text="Bad Gateway"))
    async with ProductClient(base_url="http://test/api/v1", transport=transport) as pc:
        with pytest.raises(ProductClientError) as exc_info:
            await pc.list_products()
    assert exc_info.value.status_code == 502
    assert exc_info.value.code == "INVALID_RESPONSE"


# --- browser ---


@pytest.mark.asyncio
async def test_browser_state_changes_refetch(product_client, service, make_payload):
    for i in range(15):
        service.create_product(make_payload(name=f"Item {i:02d}", category="quarto" if i % 3 else "cozinha"))
    browser = CatalogBrowser(product_client)

    listing = await browser.refresh()
    assert listing.pagination.total == 15
    assert len(listing.items) == 12

    listing = await browser.next_page()
    assert browser.state.page == 2
    assert len(listing.items) == 3
    # already on the last page
    assert (await browser.next_page()) is listing

    listing = await browser.set_filters(ProductFilters(category="cozinha"))
    assert browser.state.page == 1
    assert listing.pagination.total == 5

    listing = await browser.set_sort("name-asc")
    assert [item.name for item in listing.items] == ["Item 00", "Item 03", "Item 06", "Item 09", "Item 12"]

    listing = await browser.clear_filters()
    assert listing.pagination.total == 15


@pytest.mark.asyncio
async def test_browser_persists_through_store(product_client, tmp_path):
    store = CatalogStateStore(tmp_path / "catalog.json")
    browser = CatalogBrowser(product_client, store=store)
    await browser.set_view_mode("list")
    await browser.set_sort("price-desc")

    restored = CatalogBrowser(product_client, store=store)
    assert restored.state.view_mode == "list"
    assert restored.state.sort == "price-desc"


@pytest.mark.asyncio
async def test_browser_rejected_page_size_is_not_saved(product_client, tmp_path):
    store = CatalogStateStore(tmp_path / "catalog.json")
    browser = CatalogBrowser(product_client, store=store)
    await browser.set_page_size(24)

    with pytest.raises(PydanticValidationError):
        await browser.set_page_size(20)

    assert store.load().page_size == 24
    listing = await CatalogBrowser(product_client, store=store).refresh()
    assert listing.pagination.page_size == 24
