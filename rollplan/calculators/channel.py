"""Channel roll calculator — C and MC shapes. Depth sets the CL offset."""

from typing import Optional

from ..schemas import ProfileType, RollType
from .base import BaseRollCalculator


class ChannelRollCalculator(BaseRollCalculator):

    PROFILE_TYPE = ProfileType.CHANNEL

    ORIENTATION_CODES = {
        RollType.EASY_WAY: "EW",
        RollType.HARD_WAY: "HW",
        RollType.ON_EDGE: "OE",
    }
    FLANGE_NOTES = {
        RollType.EASY_WAY: "flanges out",
        RollType.HARD_WAY: "flanges in",
        RollType.ON_EDGE: "on edge",
    }

    def offset_dimension(self, fields: dict) -> float:
        entry = self.size_entry(fields)
        return entry.offset_dimension if entry else 0.0

    def orientation_note(self, fields: dict) -> Optional[str]:
        code = super().orientation_note(fields)
        if code is None:
            return None
        return "%s (%s)" % (code, self.FLANGE_NOTES[self.parse_roll_type(fields)])
