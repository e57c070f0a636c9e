"""
Production API routes.

Calculation only: the confirmation endpoint returns the payload for the
external confirm_production procedure, it does not deduct stock.
"""

from fastapi import APIRouter

from models.production import (
    ProductionCalculationRequest,
    ProductionConfirmation,
    ProductionReview,
    ProductionReviewRequest,
    ProductionSummary,
)
from services.production_service import get_production_service
from routes.errors import handle_error

router = APIRouter()


@router.post("/calculate", response_model=ProductionSummary)
async def calculate_production(request: ProductionCalculationRequest):
    """
    Expand a formulation over N batches.

    Returns per-item ideal and packaging-adjusted quantities, rounding loss
    and stock sufficiency at the source location.
    """
    try:
        service = get_production_service()
        return service.calculate(
            request.formulation,
            request.items,
            request.batches,
            request.products,
            request.stock,
        )

    except Exception as e:
        return handle_error(e)


@router.post("/review", response_model=ProductionReview)
async def review_production(request: ProductionReviewRequest):
    """Check operator overrides against packaging, stock and justification rules."""
    try:
        service = get_production_service()
        return service.review(request.summary, request.overrides, request.justifications)

    except Exception as e:
        return handle_error(e)


@router.post("/confirmation", response_model=ProductionConfirmation)
async def prepare_production_confirmation(request: ProductionReviewRequest):
    """
    Build the confirm_production payload.

    Raises:
        422: Review has stock, packaging or justification problems
    """
    try:
        service = get_production_service()
        return service.prepare_confirmation(
            request.summary,
            request.overrides,
            request.justifications,
            request.notes,
        )

    except Exception as e:
        return handle_error(e)
