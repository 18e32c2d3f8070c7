"""
Plate arc length and ring nesting.

Plate is rolled to an effective (centerline) diameter using the plate
thickness as the offset. Arc length is that circumference, or the fraction
of it for an open arc. Tangents add straight length at both ends.

Complete rings can be nested several to a piece of stock:

    rings/piece  = floor(stock / ring length)
    pieces       = ceil(quantity / rings per piece)
    excess rings = pieces × rings per piece − quantity
    waste/piece  = stock − rings per piece × ring length
"""

import logging
import math
from typing import Optional, Union

from ..schemas import Infeasible, MeasurementInput, NestingPlan, PlateArc
from .measurement import resolve_centerline_diameter

logger = logging.getLogger(__name__)


def arc_length(effective_diameter: float, angle_degrees: Optional[float] = None) -> Optional[float]:
    """Full circumference, or the arc for angle_degrees when one is set."""
    if effective_diameter <= 0:
        return None
    circumference = effective_diameter * math.pi
    if angle_degrees is not None and angle_degrees > 0:
        return circumference / 360 * angle_degrees
    return circumference


def is_complete_ring(angle_degrees: Optional[float]) -> bool:
    return not angle_degrees or angle_degrees <= 0 or angle_degrees == 360


def calculate_plate_arc(thickness: float, measurement: MeasurementInput,
                        angle_degrees: Optional[float] = None,
                        tangent_allowance: float = 0.0) -> Optional[PlateArc]:
    """Arc and cut length for a rolled plate. None until value and thickness are in."""
    if measurement.raw_value <= 0 or thickness <= 0:
        return None
    effective = resolve_centerline_diameter(
        measurement.raw_value, measurement.unit, measurement.reference_point, thickness,
    )
    arc = arc_length(effective, angle_degrees)
    if arc is None:
        return None

    tangent = tangent_allowance if tangent_allowance and tangent_allowance > 0 else 0.0
    return PlateArc(
        effective_diameter=effective,
        arc_length=arc,
        total_length=arc + 2 * tangent,
        tangent_allowance=tangent,
        angle_degrees=angle_degrees if angle_degrees and angle_degrees > 0 else None,
        is_complete_ring=is_complete_ring(angle_degrees),
    )


def nest_rings(ring_length: float, stock_length: float, quantity: int,
               arc: Optional[float] = None) -> Optional[Union[NestingPlan, Infeasible]]:
    """Pack complete rings of ring_length into fixed stock pieces."""
    if not (math.isfinite(ring_length) and math.isfinite(stock_length)):
        return None
    if ring_length <= 0 or stock_length <= 0 or quantity < 1:
        return None

    rings_per_piece = math.floor(stock_length / ring_length)
    if rings_per_piece < 1:
        logger.debug("Stock %.2f shorter than one ring %.2f", stock_length, ring_length)
        return Infeasible(reason="Stock shorter than one ring")

    pieces = math.ceil(quantity / rings_per_piece)
    produced = pieces * rings_per_piece
    used = ring_length * rings_per_piece
    return NestingPlan(
        arc_length=arc if arc is not None else ring_length,
        ring_length=ring_length,
        stock_length=stock_length,
        quantity=quantity,
        rings_per_stock_piece=rings_per_piece,
        stock_pieces_needed=pieces,
        total_rings_produced=produced,
        excess_rings=produced - quantity,
        used_per_piece=used,
        waste_per_piece=stock_length - used,
    )


def plan_nesting(plate_arc: Optional[PlateArc], stock_length: float,
                 quantity: int) -> Optional[Union[NestingPlan, Infeasible]]:
    """Nesting for a plate arc. Only complete rings nest."""
    if plate_arc is None or not plate_arc.is_complete_ring:
        return None
    return nest_rings(plate_arc.total_length, stock_length, quantity, arc=plate_arc.arc_length)
