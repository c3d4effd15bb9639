"""
Top-level router for version 1 of the API.

Domain routers are included here under their own prefix.  New domains
get a module in ``endpoints`` and a line below.
"""

from fastapi import APIRouter

from .endpoints import products

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
