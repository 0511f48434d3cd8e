"""
Pytest fixtures - fresh store, service, app and HTTP client per test (TDD/BDD support).
Challenge: Isolated tests; every test gets its own in-memory repository.
"""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.db.repositories.product_repository import ProductRepository
from app.main import create_app
from app.services.product_service import ProductService


class FrozenClock:
    """Deterministic clock for the service. Call to read, advance() to move forward."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def repository() -> ProductRepository:
    return ProductRepository()


@pytest.fixture
def service(repository: ProductRepository, clock: FrozenClock) -> ProductService:
    return ProductService(repository, clock=clock)


@pytest.fixture
def make_payload():
    """Build a valid create payload (camelCase, as sent over the wire)."""

    def _make(**overrides) -> dict:
        payload = {
            "name": "Poltrona Charles",
            "description": "Poltrona em couro com base giratória.",
            "mainImage": "https://images.example.com/poltrona.jpg",
            "images": ["https://images.example.com/poltrona-2.jpg"],
            "price": 1299.9,
            "category": "sala de estar",
            "shortDescription": "Poltrona giratória",
            "dimensions": "80 x 85 x 95 cm",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def app(repository: ProductRepository):
    return create_app(repository=repository)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
