"""
Transfer API routes.

Route table lookups, line validation and pending request drafts.
"""

from fastapi import APIRouter, Query

from models.transfer import (
    RouteCheckResponse,
    TransferRequestCreate,
    TransferRequestDraft,
    TransferRoute,
    TransferValidationRequest,
)
from models.validation import TransferValidationResult
from services.transfer_service import get_transfer_service
from routes.errors import handle_error

router = APIRouter()


@router.get("/routes", response_model=list[TransferRoute])
async def list_routes():
    """Sanctioned flow edges, in flow order."""
    return get_transfer_service().list_routes()


@router.get("/routes/check", response_model=RouteCheckResponse)
async def check_route(
    from_location: str = Query(..., description="Source location code"),
    to_location: str = Query(..., description="Destination location code"),
):
    """Whether a transfer between two locations is allowed (case-sensitive)."""
    return get_transfer_service().check_route(from_location, to_location)


@router.post("/validate", response_model=TransferValidationResult)
async def validate_transfer(request: TransferValidationRequest):
    """Validate transfer lines, reporting every violation."""
    try:
        return get_transfer_service().validate(request.items)

    except Exception as e:
        return handle_error(e)


@router.post("/requests", response_model=TransferRequestDraft)
async def prepare_transfer_request(request: TransferRequestCreate):
    """
    Draft a pending transfer request.

    Raises:
        422: Route not allowed, or invalid lines
    """
    try:
        return get_transfer_service().prepare_request(request)

    except Exception as e:
        return handle_error(e)
