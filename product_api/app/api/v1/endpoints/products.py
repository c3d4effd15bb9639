"""
Product endpoints for API v1.

Reading products is public.  Creating, updating and deleting require an
``Authorization: Bearer <token>`` header.  The handlers only collect
the header and raw body, hand them to ``ProductOrchestrator`` and render
whatever outcome comes back; the status code always comes from
``status_for``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Header, Query, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from product_api.app.api.deps import get_orchestrator
from product_api.app.core.db import SQLITE_MAX_INTEGER
from product_api.app.core.outcomes import (
    InvalidPayload,
    MissingToken,
    NotFound,
    Outcome,
    Success,
    Unauthorized,
)
from product_api.app.core.status_mapper import status_for
from product_api.app.schemas.product import ProductRead
from product_api.app.services.product_orchestrator import ProductOrchestrator

router = APIRouter()

_AUTHENTICATE_HEADERS = {"WWW-Authenticate": "Bearer"}


def render_outcome(outcome: Outcome) -> Response:
    """Build the HTTP response for an orchestrator outcome."""
    status_code = status_for(outcome)
    if isinstance(outcome, Success):
        if outcome.value is None:
            return Response(status_code=status_code)
        return JSONResponse(status_code=status_code, content=jsonable_encoder(outcome.value))
    if isinstance(outcome, NotFound):
        content = {"detail": "Product not found", "id": outcome.product_id}
        return JSONResponse(status_code=status_code, content=content)
    if isinstance(outcome, InvalidPayload):
        content = {"detail": "Invalid product payload", "errors": outcome.fields}
        return JSONResponse(status_code=status_code, content=content)
    if isinstance(outcome, Unauthorized):
        return JSONResponse(
            status_code=status_code,
            content={"detail": "Invalid or expired token"},
            headers=_AUTHENTICATE_HEADERS,
        )
    if isinstance(outcome, MissingToken):
        return JSONResponse(
            status_code=status_code,
            content={"detail": "Not authenticated"},
            headers=_AUTHENTICATE_HEADERS,
        )
    raise TypeError(f"Unknown outcome: {outcome!r}")


@router.get("", response_model=List[ProductRead])
async def list_products(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0, le=SQLITE_MAX_INTEGER),
    orchestrator: ProductOrchestrator = Depends(get_orchestrator),
) -> Response:
    """Return a paginated list of products ordered by id.  Public."""
    return render_outcome(await orchestrator.list(limit=limit, offset=offset))


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: int,
    orchestrator: ProductOrchestrator = Depends(get_orchestrator),
) -> Response:
    """Retrieve a single product.  Returns 404 if it does not exist."""
    return render_outcome(await orchestrator.get(product_id))


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: Request,
    authorization: Optional[str] = Header(None),
    orchestrator: ProductOrchestrator = Depends(get_orchestrator),
) -> Response:
    """Create a product.  Requires a bearer token."""
    body = await request.body()
    return render_outcome(await orchestrator.create(authorization, body))


@router.patch("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: int,
    request: Request,
    authorization: Optional[str] = Header(None),
    orchestrator: ProductOrchestrator = Depends(get_orchestrator),
) -> Response:
    """Replace a product's name, maker and price.  Requires a bearer token."""
    body = await request.body()
    return render_outcome(await orchestrator.update(product_id, authorization, body))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    authorization: Optional[str] = Header(None),
    orchestrator: ProductOrchestrator = Depends(get_orchestrator),
) -> Response:
    """Delete a product.  Requires a bearer token."""
    return render_outcome(await orchestrator.delete(product_id, authorization))
