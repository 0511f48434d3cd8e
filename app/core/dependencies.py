"""
FastAPI dependencies - injection of the catalog store and service (SOLID: Dependency Inversion).
Challenge: One repository per application instance, no module-level singleton.
"""

from typing import Annotated

from fastapi import Depends, Request

from app.db.repositories.product_repository import ProductRepository
from app.services.product_service import ProductService


def get_product_repository(request: Request) -> ProductRepository:
    """The repository created by create_app and owned by that app."""
    return request.app.state.product_repository


def get_product_service(
    request: Request,
    repository: Annotated[ProductRepository, Depends(get_product_repository)],
) -> ProductService:
    """Factory for service with repository injection."""
    return ProductService(repository, new_product_days=request.app.state.settings.new_product_days)


ProductRepositoryDep = Annotated[ProductRepository, Depends(get_product_repository)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
