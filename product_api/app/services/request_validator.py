"""
Structural validation of product payloads.

``RequestValidator`` runs ``ProductData`` over the incoming body and
reports every failing field at once, so a single 400 response can list
all problems.  It never consults the store.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError

from ..core.errors import InvalidPayload
from ..schemas.product import ProductData

BODY_FIELD = "body"
_VALUE_ERROR_PREFIX = "Value error, "


class RequestValidator:
    """Validates product input for create and update requests."""

    @classmethod
    def validate(cls, payload: Any) -> ProductData:
        """Return the validated ``ProductData`` or raise ``InvalidPayload``.

        ``payload`` may be a mapping or the raw JSON body (``bytes`` or
        ``str``).  Problems that are not tied to a field, such as a body
        that is not a JSON object, are reported under ``"body"``.
        """
        try:
            if isinstance(payload, (bytes, bytearray, str)):
                return ProductData.model_validate_json(payload)
            return ProductData.model_validate(payload)
        except ValidationError as exc:
            raise InvalidPayload(cls._collect(exc)) from exc

    @staticmethod
    def _collect(exc: ValidationError) -> Dict[str, str]:
        fields: Dict[str, str] = {}
        for error in exc.errors():
            loc = error.get("loc") or ()
            name = str(loc[0]) if loc else BODY_FIELD
            message = error.get("msg", "invalid value")
            if message.startswith(_VALUE_ERROR_PREFIX):
                message = message[len(_VALUE_ERROR_PREFIX):]
            # first error per field wins
            fields.setdefault(name, message)
        return fields
