"""
Tests for the chord/rise check (sagitta.py).

Tests:
1-2.  Ladder picks the largest chord that fits the radius
3.    Skipped at or below the minimum check diameter
4.    Rise for a known geometry
5.    Explicit chord that can't span the arc
6.    Rise shrinks as the radius grows
7.    Custom ladder
8.    Rise grows with the chord at a fixed radius
9.    Non-finite diameter
"""

import math

import pytest

from rollplan.calculators.sagitta import calculate_rise, check_sagitta, select_chord
from rollplan.schemas import Infeasible, SagittaCheck


def test_select_chord_largest_that_fits():
    assert select_chord(60) == 60
    assert select_chord(59.9) == 24
    assert select_chord(12) == 12
    assert select_chord(5) == 3


def test_select_chord_falls_back_to_smallest():
    assert select_chord(2) == 3


def test_no_check_at_or_below_min_diameter():
    assert check_sagitta(100) is None
    assert check_sagitta(54) is None

    check = check_sagitta(100.5)
    assert isinstance(check, SagittaCheck)
    assert check.chord_length == 24


def test_rise_for_120_inch_diameter():
    """CL 120 → R 60 → 60" chord, rise = 60 − √2700."""
    check = check_sagitta(120)
    assert check.chord_length == 60
    assert check.rise == pytest.approx(60 - math.sqrt(2700))
    assert check.rise == pytest.approx(8.0385, abs=1e-4)


def test_explicit_chord_longer_than_diameter():
    result = check_sagitta(120, chord=130)
    assert isinstance(result, Infeasible)
    assert result.reason == "Chord longer than diameter"
    assert calculate_rise(60, 120) is None


def test_rise_decreases_as_radius_grows():
    rises = [calculate_rise(r, 24) for r in (60, 100, 200, 500)]
    assert rises == sorted(rises, reverse=True)
    assert all(r > 0 for r in rises)


def test_custom_chord_ladder():
    check = check_sagitta(200, chords=[36, 12])
    assert check.chord_length == 36
    assert check_sagitta(200, min_diameter=250) is None


def test_rise_increases_with_chord():
    radius = 60.0
    rises = [calculate_rise(radius, c) for c in (3, 6, 12, 24, 60)]
    assert all(a < b for a, b in zip(rises, rises[1:]))
    assert all(0 < r < radius for r in rises)


def test_non_finite_diameter():
    assert check_sagitta(float("inf")) is None
    assert check_sagitta(float("nan")) is None
