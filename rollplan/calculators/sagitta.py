"""
Chord / rise check for verifying a rolled radius with a straightedge.

Sagitta formula: h = R − sqrt(R² − (c/2)²)

The check chord is the largest tape-friendly length from the ladder
(60", 24", 12", 6", 3") that does not exceed the CL radius. Tight parts
(CL diameter at or under 100") are verified against a template instead,
so no check is produced for them.
"""

import logging
import math
from typing import Optional, Sequence, Union

from ..schemas import Infeasible, SagittaCheck

logger = logging.getLogger(__name__)

CHORD_LADDER = (60.0, 24.0, 12.0, 6.0, 3.0)
MIN_CHECK_DIAMETER = 100.0


def calculate_rise(radius: float, chord: float) -> Optional[float]:
    """Rise of the arc over a chord, or None if the chord doesn't fit the radius."""
    if not radius or radius <= 0 or chord <= 0:
        return None
    half_chord = chord / 2
    if half_chord >= radius:
        return None
    return radius - math.sqrt(radius * radius - half_chord * half_chord)


def select_chord(radius: float, chords: Sequence[float] = CHORD_LADDER) -> float:
    """Largest ladder chord <= radius; the smallest rung when none fits."""
    ladder = sorted(chords, reverse=True)
    for chord in ladder:
        if radius >= chord:
            return chord
    return ladder[-1]


def check_sagitta(centerline_diameter: float, chord: Optional[float] = None,
                  chords: Sequence[float] = CHORD_LADDER,
                  min_diameter: float = MIN_CHECK_DIAMETER,
                  ) -> Optional[Union[SagittaCheck, Infeasible]]:
    """
    Chord/rise pair for a CL diameter.

    With no chord given, one is picked from the ladder and the result is
    None whenever a check isn't meaningful. An explicit chord that is as
    long as the diameter can never span the arc and comes back Infeasible.
    """
    radius = centerline_diameter / 2
    if not math.isfinite(radius) or radius <= 0:
        return None

    if chord is not None:
        if chord / 2 >= radius:
            logger.debug("Chord %.2f does not fit CL radius %.4f", chord, radius)
            return Infeasible(reason="Chord longer than diameter")
        rise = calculate_rise(radius, chord)
        if rise is None or rise <= 0:
            return None
        return SagittaCheck(chord_length=chord, rise=rise)

    if centerline_diameter <= min_diameter:
        return None
    picked = select_chord(radius, chords)
    rise = calculate_rise(radius, picked)
    if rise is None or rise <= 0:
        return None
    return SagittaCheck(chord_length=picked, rise=rise)
