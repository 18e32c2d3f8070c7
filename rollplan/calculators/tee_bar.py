"""Tee roll calculator — WT and ST shapes. Depth sets the CL offset."""

from typing import Optional

from ..schemas import ProfileType, RollType
from .base import BaseRollCalculator


class TeeBarRollCalculator(BaseRollCalculator):

    PROFILE_TYPE = ProfileType.TEE_BAR

    ORIENTATION_CODES = {
        RollType.EASY_WAY: "SO",
        RollType.HARD_WAY: "SI",
        RollType.ON_EDGE: "SU",
    }
    STEM_NOTES = {
        RollType.EASY_WAY: "stem out",
        RollType.HARD_WAY: "stem in",
        RollType.ON_EDGE: "stem up",
    }

    def offset_dimension(self, fields: dict) -> float:
        entry = self.size_entry(fields)
        return entry.offset_dimension if entry else 0.0

    def orientation_note(self, fields: dict) -> Optional[str]:
        code = super().orientation_note(fields)
        if code is None:
            return None
        return "%s (%s)" % (code, self.STEM_NOTES[self.parse_roll_type(fields)])
