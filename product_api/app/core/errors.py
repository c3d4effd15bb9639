"""
Error types raised by the lower layers of the product API.

The token validator, request validator and product store signal expected
failures with these exceptions.  ``ProductOrchestrator`` turns them into
outcomes; none of them is allowed to reach the client as a 500.
"""

from typing import Dict


class InvalidToken(Exception):
    """The bearer token is malformed, expired or wrongly signed."""

    def __init__(self, reason: str = "Invalid or expired token") -> None:
        super().__init__(reason)
        self.reason = reason


class MissingToken(Exception):
    """No usable ``Authorization: Bearer <token>`` header was supplied."""


class InvalidPayload(Exception):
    """One or more product fields failed structural validation."""

    def __init__(self, fields: Dict[str, str]) -> None:
        super().__init__(", ".join(sorted(fields)))
        self.fields = dict(fields)


class ProductNotFound(Exception):
    """No product exists with the requested id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id
