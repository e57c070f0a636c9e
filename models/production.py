"""
Production calculation schemas.

Summaries are derived, transient values: the engine never persists them.
The confirmation payload mirrors the fields of the external
confirm_production procedure.
"""

from pydantic import Field
from typing import Optional

from models.base import BaseSchema
from models.formulation import Formulation, FormulationItem
from models.product import PackageType, Product
from models.validation import ValidationResult


class PackagingAdjustment(BaseSchema):
    """Ideal quantity after the packaging rule."""

    adjusted_kg: float
    sacks_required: Optional[int] = None  # Only for sealed bags


class CalculatedItem(BaseSchema):
    """Requirement for one formulation item."""

    product_id: str
    product_name: str
    category: str

    # Quantities
    ideal_quantity_kg: float
    adjusted_quantity_kg: float
    difference_kg: float  # adjusted - ideal

    # Packaging
    package_type: PackageType
    package_weight: float
    sacks_required: Optional[int] = None
    rounding_loss_kg: float

    # Stock at the source location
    available_kg: float
    has_enough_stock: bool


class ProductionSummary(BaseSchema):
    """Result of expanding a formulation over N batches."""

    formulation: Formulation
    batches: float
    total_compound_kg: float
    items: list[CalculatedItem]
    all_stock_sufficient: bool
    total_rounding_loss_kg: float


# ===================
# REVIEW (manual overrides)
# ===================

class ReviewedItem(BaseSchema):
    """One item after applying an operator override, if any."""

    product_id: str
    product_name: str
    effective_adjusted_kg: float
    difference_kg: float  # effective - ideal
    is_manual_override: bool
    justification: Optional[str] = None
    quantity_error: Optional[str] = None
    package_error: Optional[str] = None
    justification_error: Optional[str] = None
    has_enough_stock: bool


class ProductionReview(ValidationResult):
    """Per-item review; valid only when every item can be dispensed."""

    items: list[ReviewedItem] = Field(default_factory=list)


# ===================
# CONFIRMATION PAYLOAD
# ===================

class ProductionConfirmationItem(BaseSchema):
    """Item line handed to the confirm_production procedure."""

    product_id: str
    ideal_quantity_kg: float
    adjusted_quantity_kg: float
    difference_kg: float
    package_type: PackageType
    package_weight: float
    justification: Optional[str] = None


class ProductionConfirmation(BaseSchema):
    """Fields for the external confirm_production procedure."""

    formulation_id: str
    final_product: str
    machine: str
    batches: float
    weight_per_batch: float
    total_compound_kg: float
    items: list[ProductionConfirmationItem]
    notes: Optional[str] = None


# ===================
# API REQUESTS
# ===================

class ProductionCalculationRequest(BaseSchema):
    """Inputs for a production calculation."""

    formulation: Formulation
    items: list[FormulationItem] = Field(default_factory=list)
    batches: int = Field(
        ...,
        ge=1,
        description="Number of batches to produce"
    )
    products: list[Product] = Field(default_factory=list)
    stock: dict[str, float] = Field(
        default_factory=dict,
        description="product_id -> available kg at the source location"
    )


class ProductionReviewRequest(BaseSchema):
    """A calculated summary plus operator overrides."""

    summary: ProductionSummary
    overrides: dict[str, float] = Field(
        default_factory=dict,
        description="product_id -> kg the operator will actually dispense"
    )
    justifications: dict[str, str] = Field(default_factory=dict)
    notes: Optional[str] = Field(None, max_length=500)
