"""
Tests for the measurement resolver (measurement.py).

Tests:
1-3.  Inside / outside / centerline offsets
4.    Radius callouts double before the offset
5-6.  Incomplete inputs resolve to None
7-8.  Diameter from a measured chord and rise
9.    Infinite roll value
"""

import pytest

from rollplan.calculators.measurement import (
    diameter_from_chord_rise, input_diameter, resolve_centerline_diameter, resolve_geometry,
)
from rollplan.calculators.sagitta import calculate_rise
from rollplan.schemas import MeasureUnit, MeasurementInput, ReferencePoint


def test_inside_diameter_adds_offset():
    """50" ID with a 4" section rolls to a 54" CL."""
    cl = resolve_centerline_diameter(50, MeasureUnit.DIAMETER, ReferencePoint.INSIDE, 4)
    assert cl == 54


def test_outside_radius_subtracts_offset():
    """25" OSR with a 4" section → 50 − 4 = 46" CL."""
    cl = resolve_centerline_diameter(25, MeasureUnit.RADIUS, ReferencePoint.OUTSIDE, 4)
    assert cl == 46


def test_centerline_ignores_offset():
    for offset in (0, 2, 12):
        cl = resolve_centerline_diameter(48, MeasureUnit.DIAMETER, ReferencePoint.CENTERLINE, offset)
        assert cl == 48


def test_radius_doubles():
    assert input_diameter(30, MeasureUnit.RADIUS) == 60
    assert input_diameter(30, MeasureUnit.DIAMETER) == 30

    geometry = resolve_geometry(
        MeasurementInput(raw_value=30, unit=MeasureUnit.RADIUS,
                         reference_point=ReferencePoint.INSIDE),
        2.0,
    )
    assert geometry.centerline_diameter == 62
    assert geometry.input_diameter == 60
    assert geometry.centerline_radius == 31


def test_blank_value_is_incomplete():
    assert resolve_geometry(MeasurementInput(), 4.0) is None


def test_offset_swallows_diameter_is_incomplete():
    """2" OD on a 4" section goes negative — not computable."""
    measurement = MeasurementInput(raw_value=2, reference_point=ReferencePoint.OUTSIDE)
    assert resolve_centerline_diameter(2, MeasureUnit.DIAMETER, ReferencePoint.OUTSIDE, 4) == -2
    assert resolve_geometry(measurement, 4.0) is None


def test_diameter_from_chord_rise():
    """24" chord with 1" rise → 24²/4 + 1 = 145" diameter."""
    assert diameter_from_chord_rise(24, 1) == 145
    # Rise back from the found diameter
    assert calculate_rise(145 / 2, 24) == pytest.approx(1.0)


def test_diameter_from_chord_rise_needs_both():
    assert diameter_from_chord_rise(0, 1) is None
    assert diameter_from_chord_rise(24, 0) is None


def test_infinite_value_is_incomplete():
    measurement = MeasurementInput(raw_value=float("inf"), reference_point=ReferencePoint.INSIDE)
    assert resolve_geometry(measurement, 4.0) is None
