"""
Plate roll calculator — cylinders, shells and open arcs.

Plate thickness sets the CL offset. Instead of sticks, plate plans the cut
length of the arc (plus tangents) and, for complete rings, how many rings
nest in a piece of stock.

Extra fields:
    thickness         "3/8\"", "11 ga", ... (falls back to size)
    nesting_enabled   bool
    stock_length      length of the stock piece
    quantity          rings needed
"""

from typing import Optional

from ..schemas import MeasurementInput, ProfileType, ResolvedGeometry
from ..units import thickness_to_decimal
from .base import BaseRollCalculator
from .nesting import calculate_plate_arc, plan_nesting


class PlateRollCalculator(BaseRollCalculator):

    PROFILE_TYPE = ProfileType.PLATE

    def offset_dimension(self, fields: dict) -> float:
        thickness = thickness_to_decimal(fields.get("thickness") or fields.get("size"))
        return max(thickness, 0.0)

    def orientation_note(self, fields: dict) -> Optional[str]:
        return "EW"

    def plan_material(self, fields: dict, measurement: MeasurementInput,
                      geometry: Optional[ResolvedGeometry], offset: float) -> dict:
        arc = self.parse_number(fields.get("arc_degrees"))
        plate_arc = calculate_plate_arc(
            offset,
            measurement,
            angle_degrees=arc if arc > 0 else None,
            tangent_allowance=self.parse_number(fields.get("tangent_length")),
        )
        planned = {"plate_arc": plate_arc}
        if self.parse_bool(fields.get("nesting_enabled")):
            planned["nesting"] = plan_nesting(
                plate_arc,
                self.parse_length(fields.get("stock_length")),
                self.parse_int(fields.get("quantity"), default=1),
            )
        return planned
