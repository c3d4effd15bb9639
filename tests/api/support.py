# Shared helpers for product endpoint tests.
# The fake store records every call so tests can assert that rejected
# requests never reach persistence.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from product_api.app.api.deps import get_product_store, get_token_validator
from product_api.app.core.errors import ProductNotFound
from product_api.app.core.security import TokenValidator
from product_api.app.main import create_app
from product_api.app.schemas.product import ProductData, ProductRead


class FakeProductStore:
    """In-memory product store seeded with product 1."""

    def __init__(self) -> None:
        self.products: dict[int, ProductRead] = {
            1: ProductRead(id=1, name="Kit", maker="CatWorld", price=5000),
        }
        self.calls: list[tuple[Any, ...]] = []
        self._next_id = 2

    def calls_to(self, method: str) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == method]

    async def list_products(self, limit: int = 100, offset: int = 0) -> list[ProductRead]:
        self.calls.append(("list_products", limit, offset))
        ordered = [self.products[key] for key in sorted(self.products)]
        return ordered[offset:offset + limit]

    async def get_product(self, product_id: int) -> ProductRead:
        self.calls.append(("get_product", product_id))
        if product_id not in self.products:
            raise ProductNotFound(product_id)
        return self.products[product_id]

    async def create_product(self, data: ProductData) -> ProductRead:
        self.calls.append(("create_product", data))
        product = ProductRead(id=self._next_id, **data.model_dump())
        self.products[product.id] = product
        self._next_id += 1
        return product

    async def update_product(self, product_id: int, data: ProductData) -> ProductRead:
        self.calls.append(("update_product", product_id, data))
        if product_id not in self.products:
            raise ProductNotFound(product_id)
        product = ProductRead(id=product_id, **data.model_dump())
        self.products[product_id] = product
        return product

    async def delete_product(self, product_id: int) -> None:
        self.calls.append(("delete_product", product_id))
        if product_id not in self.products:
            raise ProductNotFound(product_id)
        del self.products[product_id]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@contextmanager
def api_test_client(
    *,
    store: Any,
    token_validator: TokenValidator,
) -> Iterator[TestClient]:
    """Yield a TestClient for a fresh app with the store and validator overridden."""

    app = create_app()
    app.dependency_overrides[get_product_store] = lambda: store
    app.dependency_overrides[get_token_validator] = lambda: token_validator

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
