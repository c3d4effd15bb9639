"""
Dependency factories for the API routes.

The token validator is built once from ``settings`` and reused.  Tests
swap the store or the validator through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends

from product_api.app.core.config import TokenConfig, settings
from product_api.app.core.security import TokenValidator
from product_api.app.services.product_orchestrator import ProductOrchestrator, ProductStore
from product_api.app.services.product_service import ProductService


@lru_cache(maxsize=1)
def get_token_validator() -> TokenValidator:
    return TokenValidator(TokenConfig.from_settings(settings))


def get_product_store() -> ProductStore:
    return ProductService


def get_orchestrator(
    store: ProductStore = Depends(get_product_store),
    token_validator: TokenValidator = Depends(get_token_validator),
) -> ProductOrchestrator:
    return ProductOrchestrator(store, token_validator)
