"""
Unit tests for the inventory count engine.

    difference = counted - system
    justify    = |difference| > threshold (default 0.001 kg)
    divergence = difference / system × 100, capped at 100 when system = 0
"""

import math

import pytest

from engine.inventory_count import (
    build_count_row,
    calculate_difference,
    calculate_divergence_percent,
    requires_justification,
    validate_count_rows,
)
from models.inventory_count import CountRow
from tests.factories import CountRowFactory


def make_row(**overrides) -> CountRow:
    return CountRow(**CountRowFactory.create(**overrides))


# ===================
# DIFFERENCE / JUSTIFICATION
# ===================

class TestDifference:

    def test_surplus_positive(self):
        assert calculate_difference(520, 500) == 20

    def test_shortage_negative(self):
        assert calculate_difference(480, 500) == -20


class TestRequiresJustification:

    def test_within_threshold(self):
        assert requires_justification(0.0005, 0.001) is False

    def test_above_threshold(self):
        assert requires_justification(0.002, 0.001) is True

    def test_shortage_uses_magnitude(self):
        assert requires_justification(-0.002) is True

    def test_threshold_is_exclusive(self):
        assert requires_justification(5, 5) is False

    def test_business_threshold(self):
        assert requires_justification(0.4, threshold=0.5) is False
        assert requires_justification(0.6, threshold=0.5) is True


# ===================
# DIVERGENCE
# ===================

class TestDivergencePercent:

    def test_zero_over_zero(self):
        assert calculate_divergence_percent(0, 0) == 0

    def test_difference_over_zero_is_capped(self):
        assert calculate_divergence_percent(5, 0) == 100
        assert calculate_divergence_percent(-5, 0) == 100

    def test_relative_divergence(self):
        assert calculate_divergence_percent(10, 100) == 10

    def test_shortage_negative(self):
        assert calculate_divergence_percent(-25, 200) == -12.5


class TestCountScenario:

    def test_float_noise_needs_no_justification(self):
        """system = 500 kg, counted = 500.0002 kg."""
        row = build_count_row("prod-1", 500, 500.0002)

        assert row.difference_kg == pytest.approx(0.0002)
        assert row.needs_justification is False
        assert calculate_divergence_percent(row.difference_kg, 500) == pytest.approx(0.00004, rel=1e-6)

    def test_build_row_flags_real_difference(self):
        row = build_count_row("prod-1", 500, 480, justification="Perda na descarga")

        assert row.difference_kg == -20
        assert row.needs_justification is True
        assert row.justification == "Perda na descarga"

    def test_build_row_business_threshold(self):
        row = build_count_row("prod-1", 500, 500.3, threshold=0.5)

        assert row.needs_justification is False


# ===================
# ROW VALIDATION
# ===================

class TestValidateCountRows:

    def test_clean_count_valid(self):
        result = validate_count_rows([make_row(), make_row(counted_total_kg=499.9995)])

        assert result.valid is True
        assert result.errors == ()

    def test_empty_count_valid(self):
        assert validate_count_rows([]).valid is True

    def test_nan_count(self):
        result = validate_count_rows([make_row(counted_total_kg=math.nan, needs_justification=False)])

        assert result.errors == ("Item 1: contagem inválida",)

    def test_negative_count(self):
        result = validate_count_rows([make_row(counted_total_kg=-1, needs_justification=False)])

        assert result.errors == ("Item 1: contagem negativa não permitida",)

    def test_unjustified_difference(self):
        result = validate_count_rows([make_row(counted_total_kg=450)])

        assert result.errors == ("Item 1: justificativa obrigatória",)

    def test_justified_difference_accepted(self):
        result = validate_count_rows([
            make_row(counted_total_kg=450, justification="Consumo não apontado"),
        ])

        assert result.valid is True

    def test_blank_justification_rejected(self):
        result = validate_count_rows([make_row(counted_total_kg=450, justification="   ")])

        assert result.errors == ("Item 1: justificativa obrigatória",)

    def test_every_row_and_violation_reported(self):
        """
        Row 1: fine
        Row 2: negative AND unjustified
        Row 3: NaN
        """
        result = validate_count_rows([
            make_row(),
            make_row(counted_total_kg=-10),
            make_row(counted_total_kg=math.nan, needs_justification=False),
        ])

        assert result.valid is False
        assert result.errors == (
            "Item 2: contagem negativa não permitida",
            "Item 2: justificativa obrigatória",
            "Item 3: contagem inválida",
        )
