"""
Transfer service.

Converts operator entries into kg, checks them with the transfer engine
and drafts a pending transfer request. The request is stored and later
confirmed by the external system; no stock moves here.
"""

from collections.abc import Sequence
from typing import Optional
import structlog

from engine.packaging import convert_units_to_kg
from engine.transfer import (
    VALID_TRANSFER_ROUTES,
    get_route,
    is_valid_route,
    validate_transfer_items,
)
from models.transfer import (
    RouteCheckResponse,
    TransferLineInput,
    TransferLineRequest,
    TransferRequestCreate,
    TransferRequestDraft,
    TransferRequestItem,
    TransferRoute,
    TransferUnit,
)
from models.validation import TransferValidationResult
from exceptions import InvalidTransferRouteError, TransferValidationError

logger = structlog.get_logger(__name__)


class TransferService:
    """Transfer request workflow."""

    def list_routes(self) -> list[TransferRoute]:
        return list(VALID_TRANSFER_ROUTES)

    def check_route(self, from_location: str, to_location: str) -> RouteCheckResponse:
        """Report whether a pair of locations is a sanctioned edge."""
        route = get_route(from_location, to_location)
        return RouteCheckResponse(
            from_location=from_location,
            to_location=to_location,
            valid=is_valid_route(from_location, to_location),
            label=route.label if route else None,
        )

    def build_line(self, line: TransferLineRequest) -> TransferLineInput:
        """
        Express an operator entry in kg.

        Quantities entered in units are converted with the product's
        package data (bag weight, or unit weight).
        """
        product = line.product
        if line.unit == TransferUnit.UNITS:
            equivalent_kg = convert_units_to_kg(
                line.quantity,
                product.package_type,
                product.package_weight,
                product.unit_weight_kg,
            )
        else:
            equivalent_kg = line.quantity

        return TransferLineInput(
            product_id=product.id,
            product_name=product.name,
            quantity=line.quantity,
            unit=line.unit.value,
            available_kg=line.available_kg,
            equivalent_kg=equivalent_kg,
        )

    def validate(self, items: Sequence[TransferLineInput]) -> TransferValidationResult:
        """Validate transfer lines, logging the verdict."""
        result = validate_transfer_items(items)
        logger.info(
            "transfer_items_validated",
            items=len(items),
            valid=result.valid,
            errors=len(result.errors),
        )
        return result

    def prepare_request(self, request: TransferRequestCreate) -> TransferRequestDraft:
        """
        Draft a pending transfer after checking route and items.

        Raises:
            InvalidTransferRouteError: Pair is not a sanctioned edge
            TransferValidationError: One or more lines are invalid
        """
        route = get_route(request.from_location, request.to_location)
        if route is None:
            logger.warning(
                "transfer_request_invalid_route",
                from_location=request.from_location,
                to_location=request.to_location,
            )
            raise InvalidTransferRouteError(
                request.from_location,
                request.to_location,
                [r.label for r in VALID_TRANSFER_ROUTES],
            )

        lines = [self.build_line(line) for line in request.lines]
        result = self.validate(lines)
        if not result.valid:
            logger.warning(
                "transfer_request_rejected",
                route=route.label,
                errors=list(result.errors),
            )
            raise TransferValidationError(list(result.errors))

        items = [
            TransferRequestItem(
                product_id=line.product_id,
                requested_quantity=line.quantity,
                requested_unit=line.unit,
                equivalent_kg=line.equivalent_kg,
            )
            for line in lines
        ]

        logger.info(
            "transfer_request_prepared",
            route=route.label,
            items=len(items),
            requested_by=request.requested_by,
        )

        return TransferRequestDraft(
            from_location=route.from_location,
            to_location=route.to_location,
            route_label=route.label,
            requested_by=request.requested_by,
            requested_by_name=request.requested_by_name,
            items=items,
            total_kg=sum((item.equivalent_kg for item in items), 0.0),
            notes=request.notes,
        )


# Singleton instance for convenience
_transfer_service: Optional[TransferService] = None


def get_transfer_service() -> TransferService:
    """Get or create TransferService instance."""
    global _transfer_service
    if _transfer_service is None:
        _transfer_service = TransferService()
    return _transfer_service
