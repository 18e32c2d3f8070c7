"""
Pipe / tube / solid round bar roll calculator.

OD sets the CL offset: catalog OD for a listed size, else the OD typed in.
Round sections are the only profile with a minimum-diameter check, using
the admin roll-limit rules and mandrel dies passed in with the fields:

    fields["material"]      grade text, e.g. "304 S/S"
    fields["roll_limits"]   list of RollLimitRule (or dicts)
    fields["mandrel_dies"]  list of MandrelDie (or dicts)
"""

from typing import Optional

from ..schemas import (
    MandrelDie, MeasurementInput, ProfileType, ReferencePoint, ResolvedGeometry, RollLimitRule,
)
from .base import BaseRollCalculator
from .roll_limits import check_roll_limit


class PipeRollCalculator(BaseRollCalculator):

    PROFILE_TYPE = ProfileType.PIPE
    DEFAULT_MEASURE_POINT = ReferencePoint.CENTERLINE
    ORIENTATION_CODES = {}

    def offset_dimension(self, fields: dict) -> float:
        entry = self.size_entry(fields)
        if entry is not None:
            return entry.offset_dimension
        return max(self.parse_number(fields.get("outer_diameter")), 0.0)

    def plan_material(self, fields: dict, measurement: MeasurementInput,
                      geometry: Optional[ResolvedGeometry], offset: float) -> dict:
        planned = super().plan_material(fields, measurement, geometry, offset)
        if geometry is None or offset <= 0:
            return planned

        factors = {
            "steel": self.config.MIN_ROLL_FACTOR_STEEL,
            "stainless": self.config.MIN_ROLL_FACTOR_STAINLESS,
            "aluminum": self.config.MIN_ROLL_FACTOR_ALUMINUM,
        }
        planned["roll_limit"] = check_roll_limit(
            geometry.centerline_diameter,
            offset,
            grade=fields.get("material"),
            rules=[RollLimitRule.model_validate(r) for r in fields.get("roll_limits") or []],
            mandrel_dies=[MandrelDie.model_validate(d) for d in fields.get("mandrel_dies") or []],
            factors=factors,
        )
        return planned
