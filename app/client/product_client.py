"""
Product API client - talks to /api/v1/products over HTTP with httpx.
"""

from typing import Any

import httpx
import structlog

from app.schemas.product import ProductListResponse, ProductResponse

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api/v1"


class ProductClientError(Exception):
    """Error envelope returned by the API (or a non-JSON failure)."""

    def __init__(self, status_code: int, code: str, message: str, details: list | None = None):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details or []
        super().__init__(f"{status_code} {code}: {message}")


class ProductClient:
    """Async client for the catalog API. Use as ``async with ProductClient() as client``."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "ProductClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        response = await self._client.request(method, url, **kwargs)
        try:
            body = response.json()
        except ValueError:
            raise ProductClientError(response.status_code, "INVALID_RESPONSE", response.text[:200]) from None

        if response.is_error or not body.get("success", False):
            error = body.get("error") or {}
            logger.warning(
                "Catalog API error",
                method=method,
                url=url,
                status_code=response.status_code,
                code=error.get("code"),
            )
            raise ProductClientError(
                response.status_code,
                error.get("code", "UNKNOWN"),
                error.get("message", response.reason_phrase),
                error.get("details"),
            )
        return body["data"]

    async def list_products(self, **params: Any) -> ProductListResponse:
        """GET /products. Params use wire names: category, sort, page, pageSize, available, featured."""
        query = {key: value for key, value in params.items() if value is not None}
        data = await self._request("GET", "/products", params=query)
        return ProductListResponse.model_validate(data)

    async def get_product(self, product_id: int) -> ProductResponse:
        data = await self._request("GET", f"/products/{product_id}")
        return ProductResponse.model_validate(data)
