"""
Beam roll calculator — W and S shapes.

Depth sets the CL offset. Easy way bends with the web horizontal, hard way
with the web vertical.
"""

from typing import Optional

from ..schemas import ProfileType, RollType
from .base import BaseRollCalculator


class BeamRollCalculator(BaseRollCalculator):

    PROFILE_TYPE = ProfileType.BEAM

    WEB_NOTES = {
        RollType.EASY_WAY: "web horizontal",
        RollType.HARD_WAY: "web vertical",
    }

    def offset_dimension(self, fields: dict) -> float:
        entry = self.size_entry(fields)
        return entry.offset_dimension if entry else 0.0

    def orientation_note(self, fields: dict) -> Optional[str]:
        code = super().orientation_note(fields)
        if code is None:
            return None
        return "%s (%s)" % (code, self.WEB_NOTES[self.parse_roll_type(fields)])
