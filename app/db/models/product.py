"""
Product model - the single catalog entity held by the in-memory store.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, get_args

# Wire-format values (Portuguese), not display labels; matched case-sensitively.
ProductCategory = Literal[
    "sala de estar",
    "quarto",
    "cozinha",
    "escritório",
    "banheiro",
    "área externa",
]
PRODUCT_CATEGORIES: tuple[str, ...] = get_args(ProductCategory)

DEFAULT_FEATURED = False
DEFAULT_ON_SALE = False
DEFAULT_AVAILABLE = True


@dataclass(frozen=True)
class Product:
    """Stored product record. Frozen: the repository swaps whole records on update."""

    id: int
    name: str
    description: str | None
    main_image: str
    price: float | None
    category: str
    short_description: str | None
    dimensions: str | None
    date_created: datetime
    date_modified: datetime
    images: list[str] = field(default_factory=list)
    featured: bool = DEFAULT_FEATURED
    on_sale: bool = DEFAULT_ON_SALE
    available: bool = DEFAULT_AVAILABLE
    is_new: bool = True

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name})>"
