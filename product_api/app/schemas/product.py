"""
Pydantic models for product data.

``ProductData`` is the body accepted by create and update requests.  It
enforces the structural rules only: non-blank ``name`` and ``maker`` and
a strictly positive integer ``price`` that fits an SQLite INTEGER.
Values are stored exactly as sent; trimming only decides blankness.
``ProductRead`` is what the API returns.
"""

from pydantic import BaseModel, Field, field_validator

from ..core.db import SQLITE_MAX_INTEGER


class ProductData(BaseModel):
    """Schema for creating or replacing a product."""

    name: str = Field(..., examples=["Kit"])
    maker: str = Field(..., examples=["CatWorld"])
    price: int = Field(..., strict=True, le=SQLITE_MAX_INTEGER, examples=[5000])

    @field_validator("name", "maker")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("price")
    @classmethod
    def positive_price(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be greater than 0")
        return v


class ProductRead(ProductData):
    """Schema for reading a product from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
