"""
FastAPI application entry point.
Challenge: Mount routes, middleware (logging, Prometheus), error handlers, and the catalog store.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from app.api.v1.router import api_router
from app.config import Settings, get_settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import configure_logging
from app.core.metrics import PRODUCTS_TOTAL
from app.core.middleware import setup_middleware
from app.db.repositories.product_repository import ProductRepository
from app.services.product_service import ProductService
from app.services.seed import seed_catalog

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: optionally load the demo catalog. Shutdown: nothing to release (in-memory)."""
    settings: Settings = app.state.settings
    repository: ProductRepository = app.state.product_repository
    if settings.seed_demo_data and repository.count() == 0:
        seed_catalog(ProductService(repository, new_product_days=settings.new_product_days))
    PRODUCTS_TOTAL.set(repository.count())
    logger.info("Catalog ready", products=repository.count(), env=settings.environment)
    yield


def create_app(
    settings: Settings | None = None,
    repository: ProductRepository | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Furniture catalog: product CRUD with filtering, featured-first sorting and pagination.",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    # One store per app instance, handed to services through dependencies
    app.state.product_repository = repository or ProductRepository(settings.product_max_records)

    # CORS for the catalog frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_middleware(app)
    register_exception_handlers(app)

    # Prometheus metrics at /metrics
    app.mount("/metrics", make_asgi_app())

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
