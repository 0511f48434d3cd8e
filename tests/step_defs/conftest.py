"""
Shared BDD steps and fixtures (pytest-bdd): one fresh app per scenario, sync TestClient.
"""

import pytest
from fastapi.testclient import TestClient
from pytest_bdd import given, parsers, then, when

from app.db.repositories.product_repository import ProductRepository
from app.main import create_app


@pytest.fixture
def http() -> TestClient:
    return TestClient(create_app(repository=ProductRepository()))


@pytest.fixture
def response() -> dict:
    """Store last response for then steps."""
    return {}


@given(parsers.parse("a catalog of {count:d} products of which {featured:d} are featured"))
def catalog_of(http: TestClient, count: int, featured: int):
    marked = 0
    for i in range(1, count + 1):
        is_featured = marked < featured and i % 2 == 1
        marked += is_featured
        r = http.post(
            "/api/v1/products",
            json={
                "name": f"Móvel {i}",
                "description": None,
                "mainImage": f"https://images.example.com/movel-{i}.jpg",
                "price": 100.0 * i,
                "category": "sala de estar",
                "shortDescription": None,
                "dimensions": None,
                "featured": is_featured,
            },
        )
        assert r.status_code == 201


@given(parsers.parse("product {product_id:d} has no price"))
def product_without_price(http: TestClient, product_id: int):
    current = http.get(f"/api/v1/products/{product_id}").json()["data"]
    payload = {key: current[key] for key in (
        "name", "description", "mainImage", "images", "category",
        "shortDescription", "dimensions", "featured", "onSale", "available",
    )}
    payload["price"] = None
    assert http.put(f"/api/v1/products/{product_id}", json=payload).status_code == 200


@when(parsers.parse('I request "{method}" "{path}"'))
def request_path(http: TestClient, response: dict, method: str, path: str):
    r = http.request(method, path)
    response["status"] = r.status_code
    response["body"] = r.json()


@then(parsers.parse("the response status should be {status:d}"))
def response_status(response: dict, status: int):
    assert response["status"] == status


@then(parsers.parse('the response body should have "{key}" equals "{value}"'))
def body_field_equals(response: dict, key: str, value: str):
    assert response["body"].get(key) == value


@then(parsers.parse('the error code should be "{code}"'))
def error_code(response: dict, code: str):
    assert response["body"]["success"] is False
    assert response["body"]["error"]["code"] == code
