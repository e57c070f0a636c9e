"""
Formulation schemas.

A formulation is the recipe for one compound on one machine: how many kg
of each component a single batch consumes.
"""

from pydantic import Field

from models.base import BaseSchema


class Formulation(BaseSchema):
    """Recipe header."""

    id: str = Field(..., description="Formulation UUID")
    name: str = Field(default="", description="Formulation name")
    final_product: str = Field(..., description="Compound produced")
    machine: str = Field(..., description="Mixer the formulation runs on")
    weight_per_batch: float = Field(
        ...,
        ge=0,
        description="kg of compound produced by one batch"
    )
    active: bool = True


class FormulationItem(BaseSchema):
    """One component line of a formulation."""

    product_id: str = Field(..., description="Component product UUID")
    quantity_per_batch: float = Field(
        ...,
        ge=0,
        description="kg of the component consumed by one batch"
    )
    unit: str = Field(default="kg", description="Unit the quantity is stored in")
