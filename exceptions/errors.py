"""
Custom exception classes for the application.

The calculation engines never raise for bad input data; they return
verdicts. These errors are raised by the service layer when a caller
asks for a persistence payload that the verdict does not allow.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "TRANSFER_INVALID_ROUTE")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


# ===================
# TRANSFER ERRORS
# ===================

class InvalidTransferRouteError(ValidationError):
    """Route is not one of the sanctioned flow edges."""

    def __init__(self, from_location: str, to_location: str, valid_routes: list[str]):
        super().__init__(
            code="TRANSFER_INVALID_ROUTE",
            message=f"Cannot transfer from {from_location} to {to_location}",
            details={
                "from_location": from_location,
                "to_location": to_location,
                "valid": valid_routes,
            }
        )


class TransferValidationError(ValidationError):
    """Transfer line items failed validation."""

    def __init__(self, errors: list[str]):
        super().__init__(
            code="TRANSFER_VALIDATION_FAILED",
            message=f"Transfer validation failed with {len(errors)} errors",
            details={"errors": errors}
        )


# ===================
# INVENTORY COUNT ERRORS
# ===================

class CountValidationError(ValidationError):
    """Inventory count rows failed validation."""

    def __init__(self, errors: list[str]):
        super().__init__(
            code="INVENTORY_COUNT_VALIDATION_FAILED",
            message=f"Count validation failed with {len(errors)} errors",
            details={"errors": errors}
        )


# ===================
# PRODUCTION ERRORS
# ===================

class ProductionNotConfirmableError(ValidationError):
    """Production review has blocking problems."""

    def __init__(self, formulation_id: str, errors: list[str]):
        super().__init__(
            code="PRODUCTION_NOT_CONFIRMABLE",
            message=f"Production cannot be confirmed: {len(errors)} problems",
            details={"formulation_id": formulation_id, "errors": errors}
        )
