"""
Pitch / helix calculator — spiral stair stringers, handrails, coils.

The operator describes the climb one of three ways; all of them land on the
same canonical PitchState:

  Run & Rise:  angle = atan(rise / run)
  Degree:      rise  = run × tan(angle)                  (0° < angle < 90°)
  Spacing:     rise/rev = C-to-C spacing, or gap + section size
               angle    = atan(rise per rev / CL circumference)

Once the angle is known the rest is back-filled the same way for every
method, so the other two readings can always be shown alongside:

  rise per rev = CL circumference × tan(angle)
  C-to-C       = rise per rev
  between      = rise per rev − section size

Developed (pitch) diameter — what the rolls are actually set to so the
helix lands on the floor-plan diameter once it is stretched out:

  h  = (π × D × rise) / (2 × run)
  Dd = sqrt(h² + D²)

D is the diameter as the operator entered it (ID stays ID, OD stays OD),
not the centerline diameter. Carried over from the shop's TI-83 program.
"""

import logging
import math
from typing import Optional, Union

from ..schemas import (
    DegreeInput, Infeasible, PitchInput, PitchMethod, PitchState,
    RunRiseInput, SpacingInput, SpacingType,
)

logger = logging.getLogger(__name__)

DEFAULT_RUN = 12.0


def angle_from_run_rise(run: float, rise: float) -> Optional[float]:
    """Pitch angle in degrees from run and rise."""
    if run <= 0 or rise <= 0:
        return None
    return math.degrees(math.atan(rise / run))


def rise_from_angle(run: float, angle_degrees: float) -> Optional[float]:
    """Rise over the run for a pitch angle. Angle must be strictly between 0° and 90°."""
    if run <= 0 or not (0 < angle_degrees < 90):
        return None
    return run * math.tan(math.radians(angle_degrees))


def developed_diameter(diameter: float, run: float, rise: float) -> Optional[float]:
    """Roll-setting diameter corrected for pitch. None unless all inputs are positive."""
    if diameter <= 0 or run <= 0 or rise <= 0:
        return None
    h = (math.pi * diameter * rise) / (2 * run)
    return math.sqrt(h * h + diameter * diameter)


def compute_pitch(pitch_input: PitchInput, centerline_diameter: float,
                  input_diameter: float = 0.0, offset_dimension: float = 0.0,
                  default_run: float = DEFAULT_RUN,
                  ) -> Optional[Union[PitchState, Infeasible]]:
    """
    Normalize one pitch input into a PitchState.

    centerline_diameter drives the circumference and spacing figures;
    input_diameter (raw, as entered) drives the developed diameter and
    falls back to the centerline diameter when not supplied.
    """
    if not isinstance(pitch_input, (RunRiseInput, DegreeInput, SpacingInput)):
        raise ValueError(f"Unknown pitch input: {pitch_input!r}")

    od = max(offset_dimension, 0.0)
    circumference = math.pi * centerline_diameter if centerline_diameter > 0 else None
    run = pitch_input.run if pitch_input.run > 0 else default_run
    dev_input = input_diameter if input_diameter > 0 else max(centerline_diameter, 0.0)

    if isinstance(pitch_input, RunRiseInput):
        rise = pitch_input.rise
        angle = angle_from_run_rise(run, rise)
        if angle is None:
            return None

    elif isinstance(pitch_input, DegreeInput):
        angle = pitch_input.angle_degrees
        if angle <= 0:
            return None
        if angle >= 90:
            logger.debug("Pitch angle %.3f out of range", angle)
            return Infeasible(reason="Pitch angle must be less than 90°")
        rise = rise_from_angle(run, angle)

    else:
        spacing = pitch_input.spacing
        if spacing <= 0 or circumference is None:
            return None
        if pitch_input.spacing_type == SpacingType.CENTER:
            rise_per_rev = spacing
        else:
            rise_per_rev = spacing + od
        angle = math.degrees(math.atan(rise_per_rev / circumference))
        rise = (rise_per_rev / circumference) * run

    rise_per_rev = None
    center = None
    between = None
    if circumference is not None:
        rise_per_rev = circumference * math.tan(math.radians(angle))
        center = rise_per_rev
        between = rise_per_rev - od
        if between <= 0:
            between = None

    return PitchState(
        method=PitchMethod(pitch_input.method),
        direction=pitch_input.direction,
        angle_degrees=angle,
        run_length=run,
        axial_rise_per_run=rise,
        rise_per_revolution=rise_per_rev,
        spacing_between=between,
        spacing_center_to_center=center,
        circumference=circumference,
        offset_dimension=od,
        input_diameter=dev_input,
        developed_diameter=developed_diameter(dev_input, run, rise),
    )
