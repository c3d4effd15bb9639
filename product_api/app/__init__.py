"""
Application package initializer.

The API is split into ``core`` (settings, logging, security, outcome
mapping and the database), ``schemas`` (pydantic payloads), ``services``
(the product store and the request orchestrator) and ``api`` (versioned
FastAPI routers).
"""

from .main import app  # noqa: F401
