"""
Product CRUD endpoints - RESTful resource (GET/POST/PUT/DELETE).
Challenge: Filtering, sorting, pagination, validation, 404 handling.
Design: Thin controller; raw input goes to the service, which validates it.
"""

from typing import Any

from fastapi import APIRouter, Body, Request, status

from app.core.dependencies import ProductServiceDep
from app.schemas.product import (
    ApiResponse,
    MessageResponse,
    ProductListResponse,
    ProductResponse,
)

router = APIRouter()


@router.get("", response_model=ApiResponse[ProductListResponse])
async def list_products(request: Request, svc: ProductServiceDep):
    """List catalog products. REST: GET /products?category=quarto&sort=price-asc&page=1&pageSize=12."""
    return ApiResponse[ProductListResponse](data=svc.list_products(request.query_params))


@router.get("/{product_id}", response_model=ApiResponse[ProductResponse])
async def get_product(product_id: str, svc: ProductServiceDep):
    """Get single product with every field."""
    return ApiResponse[ProductResponse](data=svc.get_product(product_id))


@router.post("", response_model=ApiResponse[ProductResponse], status_code=status.HTTP_201_CREATED)
async def create_product(svc: ProductServiceDep, payload: Any = Body(...)):
    """Create product. Defaults: featured=false, onSale=false, available=true, images=[]."""
    return ApiResponse[ProductResponse](data=svc.create_product(payload))


@router.put("/{product_id}", response_model=ApiResponse[ProductResponse])
async def update_product(product_id: str, svc: ProductServiceDep, payload: Any = Body(...)):
    """Full update: every mutable field is required except images."""
    return ApiResponse[ProductResponse](data=svc.update_product(product_id, payload))


@router.delete("/{product_id}", response_model=ApiResponse[MessageResponse])
async def delete_product(product_id: str, svc: ProductServiceDep):
    """Hard delete. The id is never handed out again."""
    return ApiResponse[MessageResponse](data=svc.delete_product(product_id))
