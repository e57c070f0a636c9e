"""
Calculation and validation engines.

Pure functions over their arguments: no I/O, no shared state, no settings.
Engines never call each other; composition happens in the service layer.
"""

from engine.packaging import (
    calculate_required_units,
    adjust_for_packaging,
    validate_sealed_bag_multiple,
    convert_units_to_kg,
    convert_kg_to_units,
)
from engine.production import (
    calculate_ideal_quantity,
    resolve_product,
    calculate_production,
    review_production,
)
from engine.transfer import (
    VALID_TRANSFER_ROUTES,
    is_valid_route,
    get_route,
    routes_from,
    validate_transfer_items,
)
from engine.inventory_count import (
    calculate_difference,
    requires_justification,
    calculate_divergence_percent,
    build_count_row,
    validate_count_rows,
)
from engine.validation import ErrorCollector

__all__ = [
    # Packaging
    "calculate_required_units",
    "adjust_for_packaging",
    "validate_sealed_bag_multiple",
    "convert_units_to_kg",
    "convert_kg_to_units",

    # Production
    "calculate_ideal_quantity",
    "resolve_product",
    "calculate_production",
    "review_production",

    # Transfers
    "VALID_TRANSFER_ROUTES",
    "is_valid_route",
    "get_route",
    "routes_from",
    "validate_transfer_items",

    # Inventory counts
    "calculate_difference",
    "requires_justification",
    "calculate_divergence_percent",
    "build_count_row",
    "validate_count_rows",

    # Shared
    "ErrorCollector",
]
