"""
Transfer schemas.

A transfer moves stock along one edge of the industrial flow. Requests
are created as pending; stock only moves when the external system
confirms them.
"""

from pydantic import Field
from typing import Optional
from enum import Enum

from models.base import BaseSchema
from models.product import Product


class TransferUnit(str, Enum):
    """Unit an operator enters a transfer quantity in."""
    KG = "kg"
    UNITS = "units"  # Bags or units, converted with the product's package data


class TransferRoute(BaseSchema):
    """One sanctioned (from, to) edge."""

    from_location: str
    to_location: str
    label: str


class TransferLineInput(BaseSchema):
    """One product line of a proposed transfer."""

    product_id: str
    product_name: str
    quantity: float = Field(..., description="Quantity as entered")
    unit: str = Field(default=TransferUnit.KG.value, description="Unit label of quantity")
    available_kg: float = Field(..., description="Available kg at the source location")
    equivalent_kg: float = Field(..., description="Requested quantity expressed in kg")


class RouteCheckResponse(BaseSchema):
    """Whether a pair of locations is a sanctioned edge."""

    from_location: str
    to_location: str
    valid: bool
    label: Optional[str] = None


# ===================
# REQUEST DRAFT
# ===================

class TransferLineRequest(BaseSchema):
    """Operator entry for one product, before kg conversion."""

    product: Product
    quantity: float
    unit: TransferUnit = TransferUnit.KG
    available_kg: float = Field(default=0, description="Available kg at the source location")


class TransferRequestItem(BaseSchema):
    """Item row of a pending transfer."""

    product_id: str
    requested_quantity: float
    requested_unit: str
    equivalent_kg: float
    status: str = "pending"


class TransferRequestDraft(BaseSchema):
    """Pending transfer ready to be stored by the caller."""

    from_location: str
    to_location: str
    route_label: str
    status: str = "pending"
    requested_by: str
    requested_by_name: Optional[str] = None
    items: list[TransferRequestItem]
    total_kg: float
    notes: Optional[str] = None


# ===================
# API REQUESTS
# ===================

class TransferValidationRequest(BaseSchema):
    """Line items to validate."""

    items: list[TransferLineInput] = Field(default_factory=list)


class TransferRequestCreate(BaseSchema):
    """Inputs for a pending transfer request."""

    from_location: str
    to_location: str
    lines: list[TransferLineRequest] = Field(default_factory=list)
    requested_by: str
    requested_by_name: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=500)
