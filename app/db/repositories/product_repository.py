"""
Product repository - authoritative storage of catalog products.
"""

from app.db.models.product import Product
from app.db.repositories.base_repository import BaseRepository

DEFAULT_MAX_RECORDS = 10000


class ProductRepository(BaseRepository[Product]):
    """Product store. Ordering and filtering belong to the service layer."""

    def __init__(self, max_records: int = DEFAULT_MAX_RECORDS):
        super().__init__(Product, max_records)
