"""Product request/response schemas - REST API contract (camelCase on the wire)."""

from datetime import datetime
from typing import Annotated, Generic, Literal, TypeVar

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from app.db.models.product import DEFAULT_AVAILABLE, DEFAULT_FEATURED, DEFAULT_ON_SALE, ProductCategory

NAME_MAX_LENGTH = 60
DESCRIPTION_MAX_LENGTH = 500
SHORT_DESCRIPTION_MAX_LENGTH = 150
DIMENSIONS_MAX_LENGTH = 50

PAGE_SIZES = (12, 24, 36, 48)
DEFAULT_PAGE_SIZE = 12

SortOrder = Literal["newest", "name-asc", "name-desc", "price-asc", "price-desc"]

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Accept any absolute URL but keep the caller's exact string (no normalization)."""
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Invalid url") from None
    return value


Url = Annotated[str, AfterValidator(_check_url)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductPayload(CamelModel):
    """Fields shared by create and update. JSON types are enforced (no "true" for true)."""

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(max_length=DESCRIPTION_MAX_LENGTH)
    main_image: Url
    price: Annotated[float, Field(gt=0, allow_inf_nan=False)] | None
    category: ProductCategory
    short_description: str | None = Field(max_length=SHORT_DESCRIPTION_MAX_LENGTH)
    dimensions: str | None = Field(max_length=DIMENSIONS_MAX_LENGTH)


class ProductCreate(ProductPayload):
    images: list[Url] = Field(default_factory=list)
    featured: bool = DEFAULT_FEATURED
    on_sale: bool = DEFAULT_ON_SALE
    available: bool = DEFAULT_AVAILABLE


class ProductUpdate(ProductPayload):
    # Omitted and [] both mean "keep the current images"
    images: list[Url] = Field(default_factory=list)
    featured: bool
    on_sale: bool
    available: bool


class ProductIdParams(BaseModel):
    id: int = Field(gt=0)


class ProductListQuery(CamelModel):
    """Untrusted list query. Query strings arrive as text and are coerced here."""

    model_config = ConfigDict(extra="ignore")

    category: ProductCategory | None = None
    sort: SortOrder | None = None
    page: int = Field(default=1, ge=1)
    page_size: int = DEFAULT_PAGE_SIZE
    available: bool | None = None
    featured: bool | None = None

    @field_validator("page_size")
    @classmethod
    def _page_size_allowed(cls, value: int) -> int:
        if value not in PAGE_SIZES:
            raise ValueError("Page size must be 12, 24, 36, or 48")
        return value

    @field_validator("available", "featured", mode="before")
    @classmethod
    def _wire_flag(cls, value):
        # On the wire only the literal "true" is true; any other string is false.
        if isinstance(value, str):
            return value == "true"
        return value


class ProductResponse(CamelModel):
    """Full product entity."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    main_image: str
    images: list[str]
    price: float | None
    category: str
    short_description: str | None
    dimensions: str | None
    featured: bool
    is_new: bool
    on_sale: bool
    available: bool
    date_created: datetime
    date_modified: datetime


class ProductListItem(CamelModel):
    """List projection: no long text, no extra images, no timestamps."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    main_image: str
    price: float | None
    category: str
    featured: bool
    is_new: bool
    on_sale: bool
    available: bool


class PaginationMeta(CamelModel):
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool


class ProductListResponse(CamelModel):
    items: list[ProductListItem]
    pagination: PaginationMeta


class MessageResponse(BaseModel):
    message: str


T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: ``{"success": true, "data": ...}``."""

    success: bool = True
    data: T
