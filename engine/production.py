"""
Production calculation engine.

Expands a formulation over N batches into per-item requirements:

    ideal     = quantity_per_batch × batches
    adjusted  = packaging rule applied to ideal (see engine.packaging)
    loss      = adjusted - ideal   (sealed bags only)
    enough    = available >= adjusted

Every item is always evaluated so the caller gets the complete picture
even when some items are short. Pure functions: no I/O, no settings.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Optional

from engine.packaging import adjust_for_packaging, validate_sealed_bag_multiple
from engine.validation import ErrorCollector
from models.formulation import Formulation, FormulationItem
from models.product import PackageType, Product
from models.production import (
    CalculatedItem,
    ProductionReview,
    ProductionSummary,
    ReviewedItem,
)


def calculate_ideal_quantity(quantity_per_batch: float, batches: float) -> float:
    """Exact kg needed. Batch count validation is the caller's job."""
    return quantity_per_batch * batches


def resolve_product(products_by_id: Mapping[str, Product], product_id: str) -> Product:
    """Look up a product, falling back to the placeholder record."""
    product = products_by_id.get(product_id)
    if product is None:
        return Product.placeholder(product_id)
    return product


def calculate_item(
    item: FormulationItem,
    batches: float,
    product: Product,
    available_kg: float,
) -> CalculatedItem:
    """Requirement for a single formulation item."""
    ideal_kg = calculate_ideal_quantity(item.quantity_per_batch, batches)
    adjustment = adjust_for_packaging(ideal_kg, product.package_type, product.package_weight)
    adjusted_kg = adjustment.adjusted_kg

    if product.package_type == PackageType.SEALED_BAG and product.package_weight > 0:
        rounding_loss_kg = adjusted_kg - ideal_kg
    else:
        rounding_loss_kg = 0.0

    return CalculatedItem(
        product_id=item.product_id,
        product_name=product.name,
        category=product.category,
        ideal_quantity_kg=ideal_kg,
        adjusted_quantity_kg=adjusted_kg,
        difference_kg=adjusted_kg - ideal_kg,
        package_type=product.package_type,
        package_weight=product.package_weight,
        sacks_required=adjustment.sacks_required,
        rounding_loss_kg=rounding_loss_kg,
        available_kg=available_kg,
        has_enough_stock=available_kg >= adjusted_kg,
    )


def calculate_production(
    formulation: Formulation,
    items: Sequence[FormulationItem],
    batches: float,
    products_by_id: Mapping[str, Product],
    stock_by_product: Mapping[str, float],
) -> ProductionSummary:
    """
    Full production calculation.

    Args:
        formulation: Recipe header (weight_per_batch drives total compound)
        items: Recipe lines, in display order
        batches: Number of batches
        products_by_id: Product reference data; missing ids get a placeholder
        stock_by_product: Available kg at the source location (absent = 0)

    Returns:
        ProductionSummary with items in input order
    """
    calculated = [
        calculate_item(
            item,
            batches,
            resolve_product(products_by_id, item.product_id),
            stock_by_product.get(item.product_id, 0.0),
        )
        for item in items
    ]

    return ProductionSummary(
        formulation=formulation,
        batches=batches,
        total_compound_kg=batches * formulation.weight_per_batch,
        items=calculated,
        all_stock_sufficient=all(i.has_enough_stock for i in calculated),
        total_rounding_loss_kg=sum((i.rounding_loss_kg for i in calculated), 0.0),
    )


# ===================
# REVIEW
# ===================

def _format_kg(value: float) -> str:
    """Plain decimal, no exponent, no trailing zeros (25.0 -> '25')."""
    return f"{value:.6f}".rstrip("0").rstrip(".")


def review_item(
    item: CalculatedItem,
    override_kg: Optional[float],
    justification: Optional[str],
    tolerance: float = 0.001,
) -> ReviewedItem:
    """
    Apply an operator override to one calculated item.

    An override that is not a number, or is negative, dispenses nothing,
    does not count as a manual override and carries a quantity error.
    """
    effective_kg = item.adjusted_quantity_kg
    is_manual_override = False
    quantity_error = None
    package_error = None
    justification_error = None

    if override_kg is not None:
        if math.isnan(override_kg) or override_kg < 0:
            effective_kg = 0.0
            quantity_error = "Quantidade inválida"
        else:
            effective_kg = override_kg
            is_manual_override = abs(override_kg - item.adjusted_quantity_kg) > tolerance

            if (
                item.package_type == PackageType.SEALED_BAG
                and not validate_sealed_bag_multiple(override_kg, item.package_weight, tolerance)
            ):
                package_error = f"Deve ser múltiplo de {_format_kg(item.package_weight)}kg"

    has_justification = bool(justification and justification.strip())
    if is_manual_override and not has_justification:
        justification_error = "Justificativa obrigatória para ajuste manual"

    return ReviewedItem(
        product_id=item.product_id,
        product_name=item.product_name,
        effective_adjusted_kg=effective_kg,
        difference_kg=effective_kg - item.ideal_quantity_kg,
        is_manual_override=is_manual_override,
        justification=justification if is_manual_override and has_justification else None,
        quantity_error=quantity_error,
        package_error=package_error,
        justification_error=justification_error,
        has_enough_stock=item.available_kg >= effective_kg,
    )


def review_production(
    summary: ProductionSummary,
    overrides: Mapping[str, float],
    justifications: Mapping[str, str],
    tolerance: float = 0.001,
) -> ProductionReview:
    """
    Check a summary after the operator adjusted some quantities.

    Valid only when every item has stock for its effective quantity, no
    override is negative or NaN, every sealed-bag override is a whole
    number of bags and every manual override is justified.
    """
    errors = ErrorCollector()
    reviewed = []

    for item in summary.items:
        result = review_item(
            item,
            overrides.get(item.product_id),
            justifications.get(item.product_id),
            tolerance,
        )
        reviewed.append(result)

        if not result.has_enough_stock:
            errors.add(
                f"{item.product_name}: estoque insuficiente "
                f"({item.available_kg:.1f}kg disponível, "
                f"{result.effective_adjusted_kg:.1f}kg necessário)"
            )
        if result.quantity_error:
            errors.add(f"{item.product_name}: {result.quantity_error}")
        if result.package_error:
            errors.add(f"{item.product_name}: {result.package_error}")
        if result.justification_error:
            errors.add(f"{item.product_name}: {result.justification_error}")

    return errors.build(ProductionReview, items=reviewed)
