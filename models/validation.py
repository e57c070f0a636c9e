"""
Validation verdicts.

Validators collect every violation instead of stopping at the first one,
so the caller can show all of them at once.
"""

from pydantic import Field

from models.base import BaseSchema


class ValidationResult(BaseSchema):
    """Verdict plus ordered messages, one per violated rule."""

    valid: bool
    errors: tuple[str, ...] = Field(
        default=(),
        description="Messages in the order the inputs were supplied"
    )


class TransferValidationResult(ValidationResult):
    """Verdict for a set of transfer line items."""


class CountValidationResult(ValidationResult):
    """Verdict for a full inventory count submission."""
