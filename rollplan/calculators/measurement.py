"""
Measurement resolver — operator's roll-to value → centerline diameter.

The operator can call out a diameter or a radius, measured to the inside,
outside, or centerline of the section. Everything downstream works on the
centerline diameter:

    diameter   = value × 2 if radius else value
    CL diameter = diameter + offset  (inside)
                = diameter − offset  (outside)
                = diameter           (centerline)

The offset is the section size facing the rolls (leg, depth, OD, plate
thickness). Which dimension that is for a given profile and roll
orientation is the caller's decision.
"""

import math
from typing import Optional

from ..schemas import MeasureUnit, MeasurementInput, ReferencePoint, ResolvedGeometry


def input_diameter(value: float, unit: MeasureUnit) -> float:
    """Raw diameter as entered (no centerline offset)."""
    if unit == MeasureUnit.RADIUS:
        return value * 2
    return value


def resolve_centerline_diameter(value: float, unit: MeasureUnit,
                                reference_point: ReferencePoint,
                                offset_dimension: float) -> float:
    """
    Total over its domain. May return zero or a negative number when the
    inputs are incomplete; callers treat <= 0 as "not computable yet".
    """
    diameter = input_diameter(value, unit)
    if reference_point == ReferencePoint.INSIDE:
        return diameter + offset_dimension
    if reference_point == ReferencePoint.OUTSIDE:
        return diameter - offset_dimension
    return diameter


def resolve_geometry(measurement: MeasurementInput,
                     offset_dimension: float) -> Optional[ResolvedGeometry]:
    """ResolvedGeometry, or None while there is no usable roll value."""
    if measurement.raw_value <= 0 or not math.isfinite(measurement.raw_value):
        return None
    cl_dia = resolve_centerline_diameter(
        measurement.raw_value, measurement.unit,
        measurement.reference_point, offset_dimension,
    )
    if cl_dia <= 0:
        return None
    return ResolvedGeometry(
        centerline_diameter=cl_dia,
        input_diameter=input_diameter(measurement.raw_value, measurement.unit),
    )


def diameter_from_chord_rise(chord: float, rise: float) -> Optional[float]:
    """
    Diameter of the arc through a measured chord and rise (sagitta).

    D = c² / (4h) + h
    """
    if chord <= 0 or rise <= 0:
        return None
    return (chord ** 2) / (4 * rise) + rise
