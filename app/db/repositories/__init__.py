# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from app.db.repositories.base_repository import BaseRepository
from app.db.repositories.product_repository import ProductRepository

__all__ = ["BaseRepository", "ProductRepository"]
