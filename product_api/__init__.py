"""
Top-level package for the Product API.

All functionality lives in submodules under ``app``; importing
``product_api.app.main`` builds the FastAPI application.
"""

__all__ = []
