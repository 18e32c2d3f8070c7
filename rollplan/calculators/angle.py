"""
Angle roll calculator.

The larger leg faces the rolls and sets the CL offset. Unequal-leg angle
notes which leg is out (easy way) or in (hard way).
"""

from typing import Optional

from ..schemas import ProfileType, RollType
from ..units import format_number, parse_number
from .base import BaseRollCalculator
from .catalog import parse_angle_size


class AngleRollCalculator(BaseRollCalculator):

    PROFILE_TYPE = ProfileType.ANGLE

    def offset_dimension(self, fields: dict) -> float:
        entry = self.size_entry(fields)
        return entry.offset_dimension if entry else 0.0

    def orientation_note(self, fields: dict) -> Optional[str]:
        code = super().orientation_note(fields)
        if code is None:
            return None
        label = fields.get("size") or fields.get("custom_size")
        legs = parse_angle_size(label)
        leg = parse_number(fields.get("leg_orientation"))
        if legs and legs["leg1"] != legs["leg2"] and leg > 0:
            side = "out" if self.parse_roll_type(fields) == RollType.EASY_WAY else "in"
            return '%s (%s" leg %s)' % (code, format_number(leg), side)
        return code
