"""
Packaging rules.

Converts an ideal, continuous quantity into a quantity that can actually
be dispensed given how the product is packaged:

    bulk, unit  -> exact ideal quantity
    sealed_bag  -> rounded UP to whole bags (partial bags cannot be opened)

Also converts operator entries between package units and kg.
"""

import math
from typing import Optional

from models.product import PackageType
from models.production import PackagingAdjustment


def _is_sealed_bag(package_type: str, package_weight: float) -> bool:
    return package_type == PackageType.SEALED_BAG and package_weight > 0


def calculate_required_units(ideal_kg: float, package_weight: float) -> tuple[int, float, float]:
    """
    Whole bags needed to cover an ideal quantity.

    Args:
        ideal_kg: Exact quantity needed
        package_weight: Weight of one bag in kg

    Returns:
        (required_units, equivalent_kg, rounding_loss_kg)
        A non-positive bag weight yields (0, ideal_kg, 0).
    """
    if package_weight <= 0:
        return 0, ideal_kg, 0.0
    required_units = math.ceil(ideal_kg / package_weight)
    equivalent_kg = required_units * package_weight
    return required_units, equivalent_kg, equivalent_kg - ideal_kg


def adjust_for_packaging(
    ideal_kg: float,
    package_type: str,
    package_weight: float,
) -> PackagingAdjustment:
    """
    Apply the packaging rule to an ideal quantity.

    Sealed bags with a positive weight round up to whole bags, so the
    adjusted quantity is never below the ideal one. Every other case
    (including sealed bags without a usable weight) passes through.
    """
    if _is_sealed_bag(package_type, package_weight):
        sacks, adjusted, _ = calculate_required_units(ideal_kg, package_weight)
        return PackagingAdjustment(adjusted_kg=adjusted, sacks_required=sacks)
    return PackagingAdjustment(adjusted_kg=ideal_kg, sacks_required=None)


def validate_sealed_bag_multiple(
    adjusted_kg: float,
    package_weight: float,
    tolerance: float = 0.001,
) -> bool:
    """
    True when a quantity is a whole number of bags (within tolerance).

    The tolerance applies on both sides of a multiple, so 99.9995 kg of
    25 kg bags counts as 4 bags. Sign is ignored here.
    """
    if package_weight <= 0:
        return True
    remainder = math.fmod(abs(adjusted_kg), package_weight)
    return min(remainder, package_weight - remainder) <= tolerance


def convert_units_to_kg(
    quantity: float,
    package_type: str,
    package_weight: float,
    unit_weight_kg: Optional[float] = None,
) -> float:
    """
    Convert a quantity entered in package units to kg.

    Sealed bags use the bag weight; everything else uses the unit weight,
    treating a missing or zero unit weight as 1 kg per unit.
    """
    if _is_sealed_bag(package_type, package_weight):
        return quantity * package_weight
    return quantity * (unit_weight_kg or 1)


def convert_kg_to_units(
    kg: float,
    package_type: str,
    package_weight: float,
    unit_weight_kg: Optional[float] = None,
) -> float:
    """Convert kg to package units. Returns 0 when no weight is known."""
    if _is_sealed_bag(package_type, package_weight):
        return kg / package_weight
    if unit_weight_kg and unit_weight_kg > 0:
        return kg / unit_weight_kg
    return 0.0
