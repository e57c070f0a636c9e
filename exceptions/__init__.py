"""
Custom exceptions module.

Raised by the service layer only; engines return verdicts.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ValidationError,

    # Transfers
    InvalidTransferRouteError,
    TransferValidationError,

    # Inventory counts
    CountValidationError,

    # Production
    ProductionNotConfirmableError,
)

__all__ = [
    # Base
    "AppError",
    "ValidationError",

    # Transfers
    "InvalidTransferRouteError",
    "TransferValidationError",

    # Inventory counts
    "CountValidationError",

    # Production
    "ProductionNotConfirmableError",
]
