"""
Inventory count API routes.
"""

from fastapi import APIRouter

from models.inventory_count import (
    CountConfirmation,
    CountConfirmationRequest,
    CountRow,
    CountRowsRequest,
    CountValidationRequest,
)
from models.validation import CountValidationResult
from services.inventory_count_service import get_inventory_count_service
from routes.errors import handle_error

router = APIRouter()


@router.post("/rows", response_model=list[CountRow])
async def evaluate_count_rows(request: CountRowsRequest):
    """Compute differences and justification flags for counted values."""
    try:
        return get_inventory_count_service().evaluate(request.entries)

    except Exception as e:
        return handle_error(e)


@router.post("/validate", response_model=CountValidationResult)
async def validate_count(request: CountValidationRequest):
    """Validate a full count, reporting every row's violations."""
    try:
        return get_inventory_count_service().validate(request.rows)

    except Exception as e:
        return handle_error(e)


@router.post("/confirmation", response_model=CountConfirmation)
async def prepare_count_confirmation(request: CountConfirmationRequest):
    """
    Build the confirm_inventory_count payload.

    Raises:
        422: Invalid or unjustified rows
    """
    try:
        return get_inventory_count_service().prepare_confirmation(
            request.count_id,
            request.location_code,
            request.rows,
        )

    except Exception as e:
        return handle_error(e)
