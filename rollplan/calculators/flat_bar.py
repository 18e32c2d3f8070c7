"""
Flat bar roll calculator.

Easy way (on edge) rolls across the thickness, hard way (flat way) across
the width, so the CL offset follows the orientation. No orientation selected
reads as easy way.
"""

from ..schemas import ProfileType, RollType
from .base import BaseRollCalculator
from .catalog import parse_flat_bar_size


class FlatBarRollCalculator(BaseRollCalculator):

    PROFILE_TYPE = ProfileType.FLAT_BAR

    def offset_dimension(self, fields: dict) -> float:
        label = fields.get("size")
        if not label or label == "Custom":
            label = fields.get("custom_size")
        bar = parse_flat_bar_size(label)
        if bar is None:
            return 0.0
        if self.parse_roll_type(fields) == RollType.HARD_WAY:
            return bar["width"]
        return bar["thickness"]
