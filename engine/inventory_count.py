"""
Inventory count engine.

    difference  = counted - system    (positive = surplus, negative = shortage)
    justify     = |difference| > threshold
    divergence  = difference / system × 100

The default threshold of 0.001 kg absorbs floating-point noise from unit
conversions; callers pass a larger business threshold when they have one.
"""

import math
from collections.abc import Sequence
from typing import Optional

from engine.validation import ErrorCollector
from models.inventory_count import CountRow
from models.validation import CountValidationResult


DEFAULT_JUSTIFICATION_THRESHOLD_KG = 0.001

# Reported when the system holds nothing but something was counted
FULL_DIVERGENCE_PERCENT = 100.0


def calculate_difference(counted_kg: float, system_kg: float) -> float:
    return counted_kg - system_kg


def requires_justification(
    difference_kg: float,
    threshold: float = DEFAULT_JUSTIFICATION_THRESHOLD_KG,
) -> bool:
    return abs(difference_kg) > threshold


def calculate_divergence_percent(difference_kg: float, system_kg: float) -> float:
    """
    Relative divergence in percent.

    A zero system balance cannot be divided by; the result is capped at
    FULL_DIVERGENCE_PERCENT for any non-zero difference, and 0 otherwise.
    """
    if system_kg == 0:
        return 0.0 if difference_kg == 0 else FULL_DIVERGENCE_PERCENT
    return (difference_kg / system_kg) * 100


def build_count_row(
    product_id: str,
    system_kg: float,
    counted_kg: float,
    threshold: float = DEFAULT_JUSTIFICATION_THRESHOLD_KG,
    justification: Optional[str] = None,
) -> CountRow:
    """Evaluate one counted value against the system balance."""
    difference_kg = calculate_difference(counted_kg, system_kg)
    return CountRow(
        product_id=product_id,
        system_total_kg=system_kg,
        counted_total_kg=counted_kg,
        difference_kg=difference_kg,
        needs_justification=requires_justification(difference_kg, threshold),
        justification=justification,
    )


def validate_count_rows(rows: Sequence[CountRow]) -> CountValidationResult:
    """
    Validate a full count before submission.

    Every row is checked and every violation reported, numbered from 1.
    A row flagged for justification is only accepted once the caller's
    workflow has attached a non-blank justification.
    """
    errors = ErrorCollector()

    for index, row in enumerate(rows, start=1):
        if math.isnan(row.counted_total_kg):
            errors.add(f"Item {index}: contagem inválida")
        if row.counted_total_kg < 0:
            errors.add(f"Item {index}: contagem negativa não permitida")
        if row.needs_justification and not (row.justification and row.justification.strip()):
            errors.add(f"Item {index}: justificativa obrigatória")

    return errors.build(CountValidationResult)
