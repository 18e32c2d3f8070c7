"""
Tests for the pitch / helix calculator (pitch.py).

Tests:
1.    Run & rise → angle
2.    Developed diameter for a 48" stair
3.    Degree and run & rise agree on the same helix
4-5.  Spacing input — center-to-center and between
6.    Back-filled spacing drops to None when the gap closes
7.    Degree out of range
8.    Incomplete inputs
9.    Developed diameter uses the diameter as entered
10.   Unknown input type
"""

import math

import pytest

from rollplan.calculators.pitch import (
    angle_from_run_rise, compute_pitch, developed_diameter, rise_from_angle,
)
from rollplan.schemas import (
    DegreeInput, HelixDirection, Infeasible, PitchMethod, ProfileGeometry, ProfileType,
    RunRiseInput, SpacingInput, SpacingType,
)


def test_run_rise_angle():
    assert angle_from_run_rise(12, 12) == pytest.approx(45.0)
    assert rise_from_angle(12, 45) == pytest.approx(12.0)
    assert angle_from_run_rise(12, 0) is None
    assert rise_from_angle(12, 90) is None


def test_developed_diameter_48_inch():
    """D=48, run 12, rise 3 → h = 6π, Dd = √(h² + 48²) ≈ 51.568."""
    dev = developed_diameter(48, 12, 3)
    assert dev == pytest.approx(math.sqrt((6 * math.pi) ** 2 + 48 ** 2))
    assert dev == pytest.approx(51.568, abs=1e-3)
    assert developed_diameter(48, 12, 0) is None


def test_degree_and_run_rise_agree():
    by_rise = compute_pitch(RunRiseInput(run=12, rise=3), 48)
    by_angle = compute_pitch(DegreeInput(run=12, angle_degrees=by_rise.angle_degrees), 48)

    assert by_rise.method == PitchMethod.RUN_RISE
    assert by_angle.method == PitchMethod.DEGREE
    assert by_angle.axial_rise_per_run == pytest.approx(3.0)
    assert by_angle.rise_per_revolution == pytest.approx(by_rise.rise_per_revolution)
    assert by_angle.developed_diameter == pytest.approx(by_rise.developed_diameter)
    # One revolution climbs circumference × rise / run
    assert by_rise.rise_per_revolution == pytest.approx(48 * math.pi * 3 / 12)


def test_spacing_center_to_center():
    state = compute_pitch(
        SpacingInput(spacing=10, spacing_type=SpacingType.CENTER), 48, offset_dimension=2)
    assert state.angle_degrees == pytest.approx(math.degrees(math.atan(10 / (48 * math.pi))))
    assert state.rise_per_revolution == pytest.approx(10)
    assert state.spacing_center_to_center == pytest.approx(10)
    assert state.spacing_between == pytest.approx(8)


def test_spacing_between_adds_section():
    state = compute_pitch(
        SpacingInput(spacing=8, spacing_type=SpacingType.BETWEEN), 48, offset_dimension=2)
    assert state.rise_per_revolution == pytest.approx(10)
    assert state.spacing_between == pytest.approx(8)


def test_between_none_when_coils_touch():
    """0.26" climb per rev on a 1" section leaves no gap."""
    state = compute_pitch(RunRiseInput(run=12, rise=0.1), 10, offset_dimension=1)
    assert state.spacing_center_to_center == pytest.approx(10 * math.pi * 0.1 / 12)
    assert state.spacing_center_to_center < 1
    assert state.spacing_between is None


def test_degree_out_of_range():
    result = compute_pitch(DegreeInput(angle_degrees=90), 48)
    assert isinstance(result, Infeasible)
    assert "less than 90" in result.reason
    assert compute_pitch(DegreeInput(angle_degrees=0), 48) is None


def test_incomplete_inputs():
    assert compute_pitch(RunRiseInput(run=12, rise=0), 48) is None
    # Spacing needs a diameter to turn into an angle
    assert compute_pitch(SpacingInput(spacing=10), 0) is None

    # Run & rise without a diameter still gives the angle
    state = compute_pitch(RunRiseInput(run=12, rise=12), 0)
    assert state.angle_degrees == pytest.approx(45)
    assert state.circumference is None
    assert state.rise_per_revolution is None
    assert state.developed_diameter is None


def test_developed_diameter_uses_entered_diameter():
    """48" ID on a 2" section: CL is 50 but the developed figure starts from 48."""
    state = compute_pitch(RunRiseInput(run=12, rise=3, direction=HelixDirection.COUNTERCLOCKWISE),
                          50, input_diameter=48, offset_dimension=2)
    assert state.input_diameter == 48
    assert state.developed_diameter == pytest.approx(developed_diameter(48, 12, 3))
    assert state.circumference == pytest.approx(50 * math.pi)
    assert state.direction == HelixDirection.COUNTERCLOCKWISE

    # No entered diameter → centerline
    state = compute_pitch(RunRiseInput(run=12, rise=3), 50)
    assert state.developed_diameter == pytest.approx(developed_diameter(50, 12, 3))


def test_zero_run_uses_default():
    state = compute_pitch(RunRiseInput(run=0, rise=3), 48, default_run=12)
    assert state.run_length == 12
    assert state.angle_degrees == pytest.approx(math.degrees(math.atan(3 / 12)))


def test_unknown_pitch_input():
    with pytest.raises(ValueError):
        compute_pitch(ProfileGeometry(profile_type=ProfileType.PIPE, offset_dimension=2), 48)
