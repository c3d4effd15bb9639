"""
Authorization-gated orchestration of product requests.

``ProductOrchestrator`` sits between the HTTP handlers and the product
store.  For mutating operations it checks the bearer token first, then
the payload, and only then makes exactly one store call.  Every call
returns an ``Outcome``; expected failures are never raised to the
caller.

Any valid token authorizes any mutation.  The token subject is logged
but not compared against the product, since products carry no owner.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Protocol, Union

from ..core import errors
from ..core.outcomes import (
    InvalidPayload,
    MissingToken,
    NotFound,
    Operation,
    Outcome,
    Success,
    Unauthorized,
)
from ..core.security import AuthSubject, TokenValidator, extract_bearer_token
from ..schemas.product import ProductData, ProductRead
from .request_validator import RequestValidator

logger = logging.getLogger(__name__)


class ProductStore(Protocol):
    async def list_products(self, limit: int = 100, offset: int = 0) -> List[ProductRead]: ...

    async def get_product(self, product_id: int) -> ProductRead: ...

    async def create_product(self, data: ProductData) -> ProductRead: ...

    async def update_product(self, product_id: int, data: ProductData) -> ProductRead: ...

    async def delete_product(self, product_id: int) -> None: ...


class ProductOrchestrator:
    """Coordinates token checks, payload validation and store calls."""

    def __init__(self, store: ProductStore, token_validator: TokenValidator) -> None:
        self._store = store
        self._token_validator = token_validator

    async def list(self, limit: int = 100, offset: int = 0) -> Outcome:
        products = await self._store.list_products(limit=limit, offset=offset)
        return Success(Operation.LIST, products)

    async def get(self, product_id: int) -> Outcome:
        try:
            product = await self._store.get_product(product_id)
        except errors.ProductNotFound:
            return NotFound(product_id)
        return Success(Operation.GET, product)

    async def create(self, authorization: Optional[str], payload: Any) -> Outcome:
        subject = self._authenticate(authorization)
        if not isinstance(subject, str):
            return subject
        data = self._validate_payload(payload)
        if isinstance(data, InvalidPayload):
            return data
        product = await self._store.create_product(data)
        logger.info("Subject %s created product %s", subject, product.id)
        return Success(Operation.CREATE, product)

    async def update(self, product_id: int, authorization: Optional[str], payload: Any) -> Outcome:
        subject = self._authenticate(authorization)
        if not isinstance(subject, str):
            return subject
        data = self._validate_payload(payload)
        if isinstance(data, InvalidPayload):
            return data
        try:
            product = await self._store.update_product(product_id, data)
        except errors.ProductNotFound:
            return NotFound(product_id)
        logger.info("Subject %s updated product %s", subject, product_id)
        return Success(Operation.UPDATE, product)

    async def delete(self, product_id: int, authorization: Optional[str]) -> Outcome:
        subject = self._authenticate(authorization)
        if not isinstance(subject, str):
            return subject
        try:
            await self._store.delete_product(product_id)
        except errors.ProductNotFound:
            return NotFound(product_id)
        logger.info("Subject %s deleted product %s", subject, product_id)
        return Success(Operation.DELETE)

    def _authenticate(self, authorization: Optional[str]) -> Union[AuthSubject, MissingToken, Unauthorized]:
        try:
            token = extract_bearer_token(authorization)
        except errors.MissingToken:
            return MissingToken()
        try:
            return self._token_validator.validate(token)
        except errors.InvalidToken as exc:
            logger.warning("Rejected access token: %s", exc.reason)
            return Unauthorized(exc.reason)

    @staticmethod
    def _validate_payload(payload: Any) -> Union[ProductData, InvalidPayload]:
        try:
            return RequestValidator.validate(payload)
        except errors.InvalidPayload as exc:
            logger.debug("Rejected product payload: %s", exc.fields)
            return InvalidPayload(exc.fields)
