"""
Catalog browser - drives list re-fetches from catalog state changes.
Design: Every state transition that changes the query refetches; scroll position does not.
"""

import structlog

from app.client.catalog_state import CatalogState, CatalogStateStore, ProductFilters, ViewMode
from app.client.product_client import ProductClient
from app.schemas.product import ProductListResponse, ProductResponse, SortOrder

logger = structlog.get_logger(__name__)


class CatalogBrowser:
    """Couples a ProductClient with a CatalogState and, optionally, its persistent store."""

    def __init__(
        self,
        client: ProductClient,
        state: CatalogState | None = None,
        store: CatalogStateStore | None = None,
    ):
        self.client = client
        self.store = store
        if state is None:
            state = store.load() if store else CatalogState()
        self.state = state
        self.listing: ProductListResponse | None = None

    def _persist(self) -> None:
        if self.store is not None:
            self.store.save(self.state)

    async def refresh(self) -> ProductListResponse:
        """Fetch the listing for the current state."""
        self.listing = await self.client.list_products(**self.state.to_query())
        logger.debug("Catalog refreshed", total=self.listing.pagination.total, page=self.state.page)
        return self.listing

    async def set_filters(self, filters: ProductFilters) -> ProductListResponse:
        self.state.set_filters(filters)
        self._persist()
        return await self.refresh()

    async def clear_filters(self) -> ProductListResponse:
        self.state.clear_filters()
        self._persist()
        return await self.refresh()

    async def set_sort(self, sort: SortOrder) -> ProductListResponse:
        self.state.set_sort(sort)
        self._persist()
        return await self.refresh()

    async def set_page(self, page: int) -> ProductListResponse:
        self.state.set_page(page)
        return await self.refresh()

    async def next_page(self) -> ProductListResponse:
        if self.listing is not None and not self.listing.pagination.has_next:
            return self.listing
        return await self.set_page(self.state.page + 1)

    async def previous_page(self) -> ProductListResponse:
        if self.state.page <= 1:
            return self.listing if self.listing is not None else await self.refresh()
        return await self.set_page(self.state.page - 1)

    async def set_page_size(self, page_size: int) -> ProductListResponse:
        self.state.set_page_size(page_size)
        self._persist()
        return await self.refresh()

    async def set_view_mode(self, view_mode: ViewMode) -> ProductListResponse:
        self.state.set_view_mode(view_mode)
        self._persist()
        return await self.refresh()

    def set_scroll_position(self, position: int) -> None:
        self.state.set_scroll_position(position)

    async def open_product(self, product_id: int) -> ProductResponse:
        return await self.client.get_product(product_id)
