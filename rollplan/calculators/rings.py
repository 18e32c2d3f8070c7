"""
Complete-ring planner — how many sticks for N rings.

Usable stick = stock length − tangent at each end. Then one of two modes:

  Multi ring per stick (circumference <= usable):
      rings/stick = floor(usable / circumference)
      sticks      = ceil(rings / rings per stick)

  Single ring per splice (circumference > usable):
      segments/ring = ceil(circumference / usable)
      sticks        = segments × rings   (segments are never shared)

A ring whose circumference exactly equals the usable length is one ring per
stick, not a splice.
"""

import logging
import math
from typing import Optional, Union

from ..schemas import Infeasible, RingMode, RingPlan

logger = logging.getLogger(__name__)


def plan_rings(centerline_diameter: float, stock_length: float,
               tangent_allowance: float = 0.0,
               rings_needed: int = 1) -> Optional[Union[RingPlan, Infeasible]]:
    """
    RingPlan for the given stick length, Infeasible when tangents eat the
    whole stick, None while the diameter, length, or ring count is missing.
    """
    if not all(map(math.isfinite, (centerline_diameter, stock_length, tangent_allowance))):
        return None
    if centerline_diameter <= 0 or stock_length <= 0 or rings_needed < 1:
        return None
    tangent = max(tangent_allowance, 0.0)

    circumference = math.pi * centerline_diameter
    usable = stock_length - 2 * tangent
    if usable <= 0:
        logger.debug("Stock %.2f too short for %.2f tangents", stock_length, tangent)
        return Infeasible(reason="Length too short after tangents")

    if circumference <= usable:
        rings_per_stock = math.floor(usable / circumference)
        if rings_per_stock >= 1:
            return RingPlan(
                mode=RingMode.MULTI_RING_PER_STOCK,
                circumference=circumference,
                usable_length=usable,
                tangent_allowance=tangent,
                rings_needed=rings_needed,
                rings_per_stock=rings_per_stock,
                stock_pieces_needed=math.ceil(rings_needed / rings_per_stock),
            )

    segments_per_ring = max(math.ceil(circumference / usable), 1)
    return RingPlan(
        mode=RingMode.SINGLE_RING_PER_SPLICE,
        circumference=circumference,
        usable_length=usable,
        tangent_allowance=tangent,
        rings_needed=rings_needed,
        segments_per_ring=segments_per_ring,
        stock_pieces_needed=segments_per_ring * rings_needed,
    )
