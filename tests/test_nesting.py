"""
Tests for plate arc length and ring nesting (nesting.py).

Tests:
1.    Rings per stock piece, pieces, excess and waste
2.    Stock shorter than one ring
3.    Plate arc — thickness offset and tangents
4.    Open arcs are a fraction of the circle and don't nest
5.    Nesting a complete plate ring
6.    Non-finite lengths
"""

import math

import pytest

from rollplan.calculators.nesting import (
    arc_length, calculate_plate_arc, is_complete_ring, nest_rings, plan_nesting,
)
from rollplan.schemas import Infeasible, MeasureUnit, MeasurementInput, ReferencePoint


def _inside(value, unit=MeasureUnit.DIAMETER):
    return MeasurementInput(raw_value=value, unit=unit, reference_point=ReferencePoint.INSIDE)


def test_nest_rings_counts():
    """62.83" rings in 240" stock: 3/piece, 2 pieces for 5, one ring over."""
    plan = nest_rings(62.83, 240, 5)
    assert plan.rings_per_stock_piece == 3
    assert plan.stock_pieces_needed == 2
    assert plan.total_rings_produced == 6
    assert plan.excess_rings == 1
    assert plan.used_per_piece == pytest.approx(188.49)
    assert plan.waste_per_piece == pytest.approx(51.51)


def test_stock_shorter_than_ring():
    result = nest_rings(250, 240, 1)
    assert isinstance(result, Infeasible)
    assert nest_rings(0, 240, 1) is None
    assert nest_rings(62.83, 240, 0) is None


def test_plate_arc_full_circle():
    """48" ID in 1/4" plate rolls on a 48.25" effective diameter."""
    plate = calculate_plate_arc(0.25, _inside(48), tangent_allowance=6)
    assert plate.effective_diameter == pytest.approx(48.25)
    assert plate.arc_length == pytest.approx(48.25 * math.pi)
    assert plate.total_length == pytest.approx(48.25 * math.pi + 12)
    assert plate.is_complete_ring
    assert plate.angle_degrees is None


def test_open_arc():
    plate = calculate_plate_arc(0.25, _inside(24, MeasureUnit.RADIUS), angle_degrees=90)
    assert plate.arc_length == pytest.approx(48.25 * math.pi / 4)
    assert not plate.is_complete_ring
    assert plan_nesting(plate, 240, 4) is None

    assert is_complete_ring(None)
    assert is_complete_ring(360)
    assert not is_complete_ring(180)
    assert arc_length(0) is None
    assert calculate_plate_arc(0, _inside(48)) is None


def test_plan_nesting_for_plate_ring():
    plate = calculate_plate_arc(0.25, _inside(18))
    plan = plan_nesting(plate, 240, 5)
    # 18.25 × π ≈ 57.33 → 4 rings per 240" piece
    assert plan.rings_per_stock_piece == 4
    assert plan.stock_pieces_needed == 2
    assert plan.excess_rings == 3
    assert plan.arc_length == pytest.approx(plate.arc_length)


def test_non_finite_lengths():
    assert nest_rings(float("nan"), 240, 1) is None
    assert nest_rings(62.83, float("inf"), 1) is None
