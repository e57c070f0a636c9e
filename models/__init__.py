"""
Pydantic models for engine inputs, verdicts and API payloads.
"""

from models.base import BaseSchema
from models.product import PackageType, Product, UNKNOWN_PRODUCT_NAME
from models.formulation import Formulation, FormulationItem
from models.stock import StockBalance, StockSnapshot
from models.validation import (
    ValidationResult,
    TransferValidationResult,
    CountValidationResult,
)
from models.production import (
    PackagingAdjustment,
    CalculatedItem,
    ProductionSummary,
    ReviewedItem,
    ProductionReview,
    ProductionConfirmationItem,
    ProductionConfirmation,
    ProductionCalculationRequest,
    ProductionReviewRequest,
)
from models.transfer import (
    TransferUnit,
    TransferRoute,
    TransferLineInput,
    RouteCheckResponse,
    TransferLineRequest,
    TransferRequestItem,
    TransferRequestDraft,
    TransferValidationRequest,
    TransferRequestCreate,
)
from models.inventory_count import (
    CountRow,
    CountConfirmationItem,
    CountConfirmation,
    CountEntry,
    CountRowsRequest,
    CountValidationRequest,
    CountConfirmationRequest,
)

__all__ = [
    # Base
    "BaseSchema",

    # Reference data
    "PackageType",
    "Product",
    "UNKNOWN_PRODUCT_NAME",
    "Formulation",
    "FormulationItem",
    "StockBalance",
    "StockSnapshot",

    # Verdicts
    "ValidationResult",
    "TransferValidationResult",
    "CountValidationResult",

    # Production
    "PackagingAdjustment",
    "CalculatedItem",
    "ProductionSummary",
    "ReviewedItem",
    "ProductionReview",
    "ProductionConfirmationItem",
    "ProductionConfirmation",
    "ProductionCalculationRequest",
    "ProductionReviewRequest",

    # Transfers
    "TransferUnit",
    "TransferRoute",
    "TransferLineInput",
    "RouteCheckResponse",
    "TransferLineRequest",
    "TransferRequestItem",
    "TransferRequestDraft",
    "TransferValidationRequest",
    "TransferRequestCreate",

    # Inventory counts
    "CountRow",
    "CountConfirmationItem",
    "CountConfirmation",
    "CountEntry",
    "CountRowsRequest",
    "CountValidationRequest",
    "CountConfirmationRequest",
]
