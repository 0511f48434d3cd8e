"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness reports the catalog store size.
"""

from fastapi import APIRouter

from app.config import get_settings
from app.core.dependencies import ProductRepositoryDep

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(repository: ProductRepositoryDep):
    """Readiness: the in-memory store is attached and answering."""
    return {"status": "ready", "products": repository.count()}
