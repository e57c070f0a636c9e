"""
Product reference data.

Products are supplied by the caller; the engines never create or delete
them.
"""

from pydantic import Field, model_validator
from typing import Optional
from enum import Enum

from models.base import BaseSchema


UNKNOWN_PRODUCT_NAME = "Desconhecido"


class PackageType(str, Enum):
    """How a product is stored and dispensed."""
    BULK = "bulk"              # Loose material, any quantity can be dispensed
    UNIT = "unit"              # Counted units, dispensed by kg equivalent
    SEALED_BAG = "sealed_bag"  # Whole bags only, partial bags cannot be dispensed


class Product(BaseSchema):
    """
    Component or final product.

    Required: id, name
    Optional: category, package_type, package_weight, unit_weight_kg
    """

    id: str = Field(..., description="Product UUID")
    name: str = Field(..., description="Display name")
    category: str = Field(default="", description="Product category")
    package_type: PackageType = Field(
        default=PackageType.BULK,
        description="Packaging rule applied to required quantities"
    )
    package_weight: float = Field(
        default=0,
        ge=0,
        description="Weight of one sealed bag in kg"
    )
    unit_weight_kg: Optional[float] = Field(
        None,
        ge=0,
        description="Weight of one unit in kg (unit-packaged products)"
    )

    @model_validator(mode="after")
    def sealed_bag_needs_weight(self) -> "Product":
        """Sealed bags must declare how much one bag weighs."""
        if self.package_type == PackageType.SEALED_BAG and self.package_weight <= 0:
            raise ValueError("package_weight must be > 0 for sealed_bag products")
        return self

    @classmethod
    def placeholder(cls, product_id: str) -> "Product":
        """Default record for a reference that is missing from the product map."""
        return cls(
            id=product_id,
            name=UNKNOWN_PRODUCT_NAME,
            category="",
            package_type=PackageType.BULK,
            package_weight=0,
        )
