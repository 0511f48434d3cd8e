"""
Product service - catalog use cases (SOLID: Single Responsibility).
Challenge: Turn untrusted query params, ids and bodies into validated reads and writes.
Design: Depends on an injected repository and clock; easy to test without HTTP.
"""

import math
import unicodedata
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import CapacityExceededError, NotFoundError, ValidationError
from app.core.metrics import PRODUCT_OPERATIONS, PRODUCTS_TOTAL
from app.db.models.product import Product
from app.db.repositories.product_repository import ProductRepository
from app.schemas.product import (
    MessageResponse,
    PaginationMeta,
    ProductCreate,
    ProductIdParams,
    ProductListItem,
    ProductListQuery,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
)

logger = structlog.get_logger(__name__)

DEFAULT_SORT = "newest"
NEW_PRODUCT_DAYS = 30


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _validate(schema: type[BaseModel], data: Any, message: str):
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        logger.info("Validation failed", schema=schema.__name__, errors=exc.error_count())
        raise ValidationError.from_pydantic(message, exc) from None


def _name_key(product: Product) -> tuple[str, str]:
    """Locale-style collation: accents and case only break ties."""
    decomposed = unicodedata.normalize("NFKD", product.name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), product.name


def sort_products(products: list[Product], sort: str = DEFAULT_SORT) -> list[Product]:
    """Featured first, then the chosen order. Null prices go last in both price orders."""
    if sort == "newest":
        ordered = sorted(products, key=lambda p: p.date_created, reverse=True)
    elif sort == "name-asc":
        ordered = sorted(products, key=_name_key)
    elif sort == "name-desc":
        ordered = sorted(products, key=_name_key, reverse=True)
    elif sort == "price-asc":
        ordered = sorted(products, key=lambda p: (p.price is None, p.price or 0))
    elif sort == "price-desc":
        ordered = sorted(products, key=lambda p: (p.price is None, -(p.price or 0)))
    else:
        ordered = list(products)
    # Python's sort is stable, so this keeps the secondary order within each group.
    return sorted(ordered, key=lambda p: not p.featured)


def paginate(items: list, page: int, page_size: int) -> tuple[list, PaginationMeta]:
    total = len(items)
    total_pages = math.ceil(total / page_size)
    offset = (page - 1) * page_size
    meta = PaginationMeta(
        page=page,
        page_size=page_size,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_previous=page > 1,
    )
    return items[offset : offset + page_size], meta


class ProductService:
    """Handles all product use cases: list, get, create, update, delete."""

    def __init__(
        self,
        repository: ProductRepository,
        clock: Callable[[], datetime] = utcnow,
        new_product_days: int = NEW_PRODUCT_DAYS,
    ):
        self.repository = repository
        self.clock = clock
        self.new_product_days = new_product_days

    def _parse_id(self, product_id: Any) -> int:
        return _validate(ProductIdParams, {"id": product_id}, "Invalid ID").id

    def _get_existing(self, product_id: int) -> Product:
        product = self.repository.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    def _is_new(self, date_created: datetime, now: datetime) -> bool:
        """New while no more than ``new_product_days`` whole days have elapsed."""
        return (now - date_created).days <= self.new_product_days

    def list_products(self, query: Mapping[str, Any]) -> ProductListResponse:
        """Filter, sort featured-first, paginate and project to list items."""
        filters = _validate(ProductListQuery, dict(query), "Invalid query parameters")

        products = self.repository.get_all()
        if filters.category is not None:
            products = [p for p in products if p.category == filters.category]
        if filters.available is not None:
            products = [p for p in products if p.available == filters.available]
        if filters.featured is not None:
            products = [p for p in products if p.featured == filters.featured]

        products = sort_products(products, filters.sort or DEFAULT_SORT)
        page_items, pagination = paginate(products, filters.page, filters.page_size)

        return ProductListResponse(
            items=[ProductListItem.model_validate(p) for p in page_items],
            pagination=pagination,
        )

    def get_product(self, product_id: Any) -> ProductResponse:
        product = self._get_existing(self._parse_id(product_id))
        return ProductResponse.model_validate(product)

    def create_product(self, payload: Any) -> ProductResponse:
        """Validate, assign the next id, stamp both dates and store. New products are always new."""
        data = _validate(ProductCreate, payload, "Validation failed")
        now = self.clock()

        product = Product(
            id=self.repository.next_id(),
            name=data.name,
            description=data.description,
            main_image=data.main_image,
            images=list(data.images),
            price=data.price,
            category=data.category,
            short_description=data.short_description,
            dimensions=data.dimensions,
            featured=data.featured,
            on_sale=data.on_sale,
            available=data.available,
            is_new=True,
            date_created=now,
            date_modified=now,
        )
        try:
            self.repository.add(product)
        except CapacityExceededError:
            PRODUCT_OPERATIONS.labels(operation="create", outcome="error").inc()
            raise

        PRODUCT_OPERATIONS.labels(operation="create", outcome="ok").inc()
        PRODUCTS_TOTAL.set(self.repository.count())
        logger.info("Product created", product_id=product.id, category=product.category)
        return ProductResponse.model_validate(product)

    def update_product(self, product_id: Any, payload: Any) -> ProductResponse:
        """Replace every mutable field. ``isNew`` is recomputed from the stored creation date."""
        id_ = self._parse_id(product_id)
        data = _validate(ProductUpdate, payload, "Validation failed")
        existing = self._get_existing(id_)
        now = self.clock()

        updated = self.repository.update(
            id_,
            name=data.name,
            description=data.description,
            main_image=data.main_image,
            images=list(data.images or existing.images),
            price=data.price,
            category=data.category,
            short_description=data.short_description,
            dimensions=data.dimensions,
            featured=data.featured,
            on_sale=data.on_sale,
            available=data.available,
            is_new=self._is_new(existing.date_created, now),
            date_modified=now,
        )
        PRODUCT_OPERATIONS.labels(operation="update", outcome="ok").inc()
        logger.info("Product updated", product_id=id_, is_new=updated.is_new)
        return ProductResponse.model_validate(updated)

    def delete_product(self, product_id: Any) -> MessageResponse:
        id_ = self._parse_id(product_id)
        if not self.repository.exists(id_):
            raise NotFoundError("Product not found")
        self.repository.delete(id_)
        PRODUCT_OPERATIONS.labels(operation="delete", outcome="ok").inc()
        PRODUCTS_TOTAL.set(self.repository.count())
        logger.info("Product deleted", product_id=id_)
        return MessageResponse(message="Product deleted successfully")
