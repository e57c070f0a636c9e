"""
Production service.

Feeds fresh reference data and stock into the production engine and turns
an accepted review into the payload for the external confirm_production
procedure. Stock deduction itself happens in storage, never here.
"""

from collections.abc import Mapping, Sequence
from typing import Optional, Union
import structlog

from config import settings
from config.flow import PRODUCTION_SOURCE_LOCATION
from engine.production import calculate_production, review_production
from models.formulation import Formulation, FormulationItem
from models.product import Product
from models.production import (
    ProductionConfirmation,
    ProductionConfirmationItem,
    ProductionReview,
    ProductionSummary,
)
from models.stock import StockSnapshot
from exceptions import ProductionNotConfirmableError

logger = structlog.get_logger(__name__)


class ProductionService:
    """
    Production calculation workflow.

    calculate -> review (operator overrides) -> prepare_confirmation
    """

    def __init__(self):
        self.source_location = PRODUCTION_SOURCE_LOCATION
        self.override_tolerance = settings.override_tolerance_kg

    def calculate(
        self,
        formulation: Formulation,
        items: Sequence[FormulationItem],
        batches: float,
        products: Sequence[Product],
        stock: Union[StockSnapshot, Mapping[str, float]],
    ) -> ProductionSummary:
        """
        Calculate requirements for N batches of a formulation.

        Args:
            formulation: Recipe header
            items: Recipe lines
            batches: Number of batches
            products: Product reference data
            stock: Snapshot of the source location, or product_id -> kg

        Returns:
            ProductionSummary
        """
        if isinstance(stock, StockSnapshot):
            if stock.location_code != self.source_location:
                logger.warning(
                    "production_stock_location_mismatch",
                    expected=self.source_location,
                    received=stock.location_code,
                )
            stock = stock.balances

        products_by_id = {product.id: product for product in products}

        missing = [item.product_id for item in items if item.product_id not in products_by_id]
        if missing:
            logger.warning(
                "formulation_products_missing",
                formulation_id=formulation.id,
                product_ids=missing,
            )

        summary = calculate_production(formulation, items, batches, products_by_id, stock)

        logger.info(
            "production_calculated",
            formulation_id=formulation.id,
            batches=batches,
            items=len(summary.items),
            total_compound_kg=summary.total_compound_kg,
            all_stock_sufficient=summary.all_stock_sufficient,
            total_rounding_loss_kg=summary.total_rounding_loss_kg,
        )
        return summary

    def review(
        self,
        summary: ProductionSummary,
        overrides: Optional[Mapping[str, float]] = None,
        justifications: Optional[Mapping[str, str]] = None,
    ) -> ProductionReview:
        """Apply operator overrides to a calculated summary."""
        review = review_production(
            summary,
            overrides or {},
            justifications or {},
            self.override_tolerance,
        )

        logger.info(
            "production_reviewed",
            formulation_id=summary.formulation.id,
            overrides=len(overrides or {}),
            valid=review.valid,
            errors=len(review.errors),
        )
        return review

    def prepare_confirmation(
        self,
        summary: ProductionSummary,
        overrides: Optional[Mapping[str, float]] = None,
        justifications: Optional[Mapping[str, str]] = None,
        notes: Optional[str] = None,
    ) -> ProductionConfirmation:
        """
        Build the confirm_production payload.

        Raises:
            ProductionNotConfirmableError: Formulation has no items, or the
                review reports stock, packaging or justification problems
        """
        formulation = summary.formulation

        if not summary.items:
            logger.warning("production_confirmation_empty", formulation_id=formulation.id)
            raise ProductionNotConfirmableError(formulation.id, ["Formulação sem itens"])

        review = self.review(summary, overrides, justifications)
        if not review.valid:
            logger.warning(
                "production_confirmation_rejected",
                formulation_id=formulation.id,
                errors=list(review.errors),
            )
            raise ProductionNotConfirmableError(formulation.id, list(review.errors))

        items = [
            ProductionConfirmationItem(
                product_id=calculated.product_id,
                ideal_quantity_kg=calculated.ideal_quantity_kg,
                adjusted_quantity_kg=reviewed.effective_adjusted_kg,
                difference_kg=reviewed.difference_kg,
                package_type=calculated.package_type,
                package_weight=calculated.package_weight,
                justification=reviewed.justification,
            )
            for calculated, reviewed in zip(summary.items, review.items)
        ]

        logger.info(
            "production_confirmation_prepared",
            formulation_id=formulation.id,
            batches=summary.batches,
            items=len(items),
        )

        return ProductionConfirmation(
            formulation_id=formulation.id,
            final_product=formulation.final_product,
            machine=formulation.machine,
            batches=summary.batches,
            weight_per_batch=formulation.weight_per_batch,
            total_compound_kg=summary.total_compound_kg,
            items=items,
            notes=notes or None,
        )


# Singleton instance for convenience
_production_service: Optional[ProductionService] = None


def get_production_service() -> ProductionService:
    """Get or create ProductionService instance."""
    global _production_service
    if _production_service is None:
        _production_service = ProductionService()
    return _production_service
