"""
Inventory count schemas.

A count compares physically counted kg against the system balance for
every product at one location. Rows are validated together.
"""

from pydantic import Field
from typing import Optional

from models.base import BaseSchema


class CountRow(BaseSchema):
    """Counted vs. system value for one product."""

    product_id: str
    system_total_kg: float
    counted_total_kg: float  # May be NaN when the entry could not be parsed
    difference_kg: float
    needs_justification: bool
    justification: Optional[str] = None


class CountConfirmationItem(BaseSchema):
    """Item line handed to the confirm_inventory_count procedure."""

    product_id: str
    system_total_kg: float
    counted_total_kg: float
    difference_kg: float
    divergence_percent: float
    justification: Optional[str] = None


class CountConfirmation(BaseSchema):
    """Fields for the external confirm_inventory_count procedure."""

    count_id: str
    location_code: str
    items: list[CountConfirmationItem]
    total_difference_kg: float
    rows_with_divergence: int


# ===================
# API REQUESTS
# ===================

class CountEntry(BaseSchema):
    """Raw operator entry for one product."""

    product_id: str
    system_total_kg: float
    counted_total_kg: float
    justification: Optional[str] = None


class CountRowsRequest(BaseSchema):
    """Entries to evaluate into count rows."""

    entries: list[CountEntry] = Field(default_factory=list)


class CountValidationRequest(BaseSchema):
    """Rows to validate."""

    rows: list[CountRow] = Field(default_factory=list)


class CountConfirmationRequest(BaseSchema):
    """Inputs for a count confirmation payload."""

    count_id: str
    location_code: str
    rows: list[CountRow] = Field(default_factory=list)
