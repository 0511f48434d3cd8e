"""
Catalog browsing state - what the shopper is looking at (filters, sort, page, view mode).
Challenge: Keep pagination sensible as filters, sort, page size and view mode change.
Design: Plain pydantic model with transition methods; persistence lives in CatalogStateStore.
"""

from pathlib import Path
from typing import Literal

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from app.config import get_settings
from app.db.models.product import ProductCategory
from app.schemas.product import DEFAULT_PAGE_SIZE, PAGE_SIZES, SortOrder

logger = structlog.get_logger(__name__)

ViewMode = Literal["grid", "list"]


class ProductFilters(BaseModel):
    category: ProductCategory | None = None
    available: bool | None = None
    featured: bool | None = None


class CatalogState(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    filters: ProductFilters = Field(default_factory=ProductFilters)
    sort: SortOrder = "newest"
    page: int = Field(default=1, ge=1)
    page_size: int = DEFAULT_PAGE_SIZE
    view_mode: ViewMode = "grid"
    scroll_position: int = 0

    @field_validator("page_size")
    @classmethod
    def _page_size_allowed(cls, value: int) -> int:
        # Same sizes the list endpoint accepts.
        if value not in PAGE_SIZES:
            raise ValueError("Page size must be 12, 24, 36, or 48")
        return value

    def set_filters(self, filters: ProductFilters) -> None:
        self.filters = filters.model_copy()
        self.page = 1

    def set_sort(self, sort: SortOrder) -> None:
        self.sort = sort
        self.page = 1

    def set_page(self, page: int) -> None:
        self.page = page

    def set_page_size(self, page_size: int) -> None:
        """Change page size, staying on the page that holds the first visible item."""
        first_item_index = (self.page - 1) * self.page_size
        self.page_size = page_size
        self.page = first_item_index // page_size + 1

    def set_view_mode(self, view_mode: ViewMode) -> None:
        self.view_mode = view_mode
        # Both layouts use the smallest page size the API accepts.
        self.page_size = DEFAULT_PAGE_SIZE
        self.page = 1

    def set_scroll_position(self, position: int) -> None:
        self.scroll_position = position

    def clear_filters(self) -> None:
        self.filters = ProductFilters()
        self.page = 1

    def reset_pagination(self) -> None:
        self.page = 1

    def to_query(self) -> dict[str, str | int]:
        """Query parameters for GET /products, encoded the way the API reads them."""
        query: dict[str, str | int] = {}
        if self.filters.category is not None:
            query["category"] = self.filters.category
        if self.filters.available is not None:
            query["available"] = "true" if self.filters.available else "false"
        if self.filters.featured is not None:
            query["featured"] = "true" if self.filters.featured else "false"
        query["sort"] = self.sort
        query["page"] = self.page
        query["pageSize"] = self.page_size
        return query


# Fields that survive between sessions; page and scroll position always start fresh.
PERSISTED_FIELDS = {"filters", "sort", "view_mode", "page_size"}


class CatalogStateStore:
    """JSON file persistence for the session-spanning part of CatalogState."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or get_settings().catalog_state_path)

    def load(self) -> CatalogState:
        """Restore saved state. A missing or unreadable file yields the defaults."""
        if not self.path.exists():
            return CatalogState()
        try:
            saved = CatalogState.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, PydanticValidationError) as exc:
            logger.warning("Discarding unreadable catalog state", path=str(self.path), error=str(exc))
            return CatalogState()
        return CatalogState(**saved.model_dump(include=PERSISTED_FIELDS))

    def save(self, state: CatalogState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(state.model_dump_json(include=PERSISTED_FIELDS), encoding="utf-8")
