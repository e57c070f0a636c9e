"""
Inventory count service.

Evaluates counted values with the business justification threshold and
builds the payload for the external confirm_inventory_count procedure.
Storage re-reads the real balances on confirmation; the system values
here are only what the operator was shown.
"""

from collections.abc import Sequence
from typing import Optional
import structlog

from config import settings
from engine.inventory_count import (
    build_count_row,
    calculate_divergence_percent,
    validate_count_rows,
)
from models.inventory_count import (
    CountConfirmation,
    CountConfirmationItem,
    CountEntry,
    CountRow,
)
from models.validation import CountValidationResult
from exceptions import CountValidationError

logger = structlog.get_logger(__name__)


class InventoryCountService:
    """Inventory count workflow."""

    def __init__(self):
        self.justification_threshold = settings.justification_threshold_kg

    def evaluate(self, entries: Sequence[CountEntry]) -> list[CountRow]:
        """Turn operator entries into count rows."""
        rows = [
            build_count_row(
                entry.product_id,
                entry.system_total_kg,
                entry.counted_total_kg,
                self.justification_threshold,
                entry.justification,
            )
            for entry in entries
        ]

        logger.debug(
            "count_rows_evaluated",
            rows=len(rows),
            needs_justification=sum(1 for row in rows if row.needs_justification),
            threshold_kg=self.justification_threshold,
        )
        return rows

    def validate(self, rows: Sequence[CountRow]) -> CountValidationResult:
        """Validate a full count, logging the verdict."""
        result = validate_count_rows(rows)
        logger.info(
            "count_rows_validated",
            rows=len(rows),
            valid=result.valid,
            errors=len(result.errors),
        )
        return result

    def prepare_confirmation(
        self,
        count_id: str,
        location_code: str,
        rows: Sequence[CountRow],
    ) -> CountConfirmation:
        """
        Build the confirm_inventory_count payload.

        Raises:
            CountValidationError: Any row is invalid or unjustified
        """
        result = self.validate(rows)
        if not result.valid:
            logger.warning(
                "count_confirmation_rejected",
                count_id=count_id,
                location_code=location_code,
                errors=list(result.errors),
            )
            raise CountValidationError(list(result.errors))

        items = [
            CountConfirmationItem(
                product_id=row.product_id,
                system_total_kg=row.system_total_kg,
                counted_total_kg=row.counted_total_kg,
                difference_kg=row.difference_kg,
                divergence_percent=calculate_divergence_percent(
                    row.difference_kg, row.system_total_kg
                ),
                justification=row.justification if row.needs_justification else None,
            )
            for row in rows
        ]

        confirmation = CountConfirmation(
            count_id=count_id,
            location_code=location_code,
            items=items,
            total_difference_kg=sum((item.difference_kg for item in items), 0.0),
            rows_with_divergence=sum(1 for row in rows if row.needs_justification),
        )

        logger.info(
            "count_confirmation_prepared",
            count_id=count_id,
            location_code=location_code,
            items=len(items),
            rows_with_divergence=confirmation.rows_with_divergence,
        )
        return confirmation


# Singleton instance for convenience
_inventory_count_service: Optional[InventoryCountService] = None


def get_inventory_count_service() -> InventoryCountService:
    """Get or create InventoryCountService instance."""
    global _inventory_count_service
    if _inventory_count_service is None:
        _inventory_count_service = InventoryCountService()
    return _inventory_count_service
