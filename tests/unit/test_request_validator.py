"""
Unit tests for product payload validation.
"""

from __future__ import annotations

import pytest

from product_api.app.core.errors import InvalidPayload
from product_api.app.services.request_validator import RequestValidator


def test_valid_mapping_is_accepted_unchanged() -> None:
    data = RequestValidator.validate({"name": "  Kit ", "maker": "CatWorld", "price": 5000})

    assert data.name == "  Kit "
    assert data.maker == "CatWorld"
    assert data.price == 5000


def test_valid_json_bytes_are_accepted() -> None:
    data = RequestValidator.validate(b'{"name":"Kit","maker":"CatWorld","price":5000}')

    assert data.model_dump() == {"name": "Kit", "maker": "CatWorld", "price": 5000}


def test_all_field_violations_are_collected() -> None:
    with pytest.raises(InvalidPayload) as exc_info:
        RequestValidator.validate({"name": "", "maker": "   ", "price": 0})

    fields = exc_info.value.fields
    assert set(fields) == {"name", "maker", "price"}
    assert fields["name"] == "must not be blank"
    assert fields["price"] == "must be greater than 0"


@pytest.mark.parametrize("price", [-1, 0, "5000", 12.5, True, None, 2 ** 63, 10 ** 20, -(10 ** 20)])
def test_price_must_be_positive_integer(price) -> None:
    with pytest.raises(InvalidPayload) as exc_info:
        RequestValidator.validate({"name": "Kit", "maker": "CatWorld", "price": price})

    assert set(exc_info.value.fields) == {"price"}


def test_missing_fields_are_reported() -> None:
    with pytest.raises(InvalidPayload) as exc_info:
        RequestValidator.validate({"name": "Kit"})

    assert set(exc_info.value.fields) == {"maker", "price"}


@pytest.mark.parametrize("payload", [b"", b"{broken", b"[1, 2]", "null", None, ["Kit"]])
def test_non_object_bodies_are_reported_under_body(payload) -> None:
    with pytest.raises(InvalidPayload) as exc_info:
        RequestValidator.validate(payload)

    assert "body" in exc_info.value.fields


def test_largest_sqlite_integer_price_is_accepted() -> None:
    data = RequestValidator.validate({"name": "Kit", "maker": "CatWorld", "price": 2 ** 63 - 1})

    assert data.price == 2 ** 63 - 1
