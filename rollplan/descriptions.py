"""
Rolling Description Builder — the text block that rides on the traveler.

The line formats below are read by the order and quote documents, so the
wording and decimal places are fixed: 4 places for rise and diameters,
5 for the pitch angle, values the operator typed are echoed as typed.
"""

from typing import List, Optional

from .schemas import (
    DegreeInput, HelixDirection, Infeasible, MeasureUnit, NestingPlan, PitchState,
    ReferencePoint, RingPlan, RollToMethod, RollingResult, RunRiseInput,
    SpacingInput, SpacingType,
)
from .units import format_number

_SPEC_LABELS = {
    (ReferencePoint.INSIDE, MeasureUnit.DIAMETER): "ID",
    (ReferencePoint.INSIDE, MeasureUnit.RADIUS): "ISR",
    (ReferencePoint.OUTSIDE, MeasureUnit.DIAMETER): "OD",
    (ReferencePoint.OUTSIDE, MeasureUnit.RADIUS): "OSR",
    (ReferencePoint.CENTERLINE, MeasureUnit.DIAMETER): "CLD",
    (ReferencePoint.CENTERLINE, MeasureUnit.RADIUS): "CLR",
}


def spec_label(unit: MeasureUnit, reference_point: ReferencePoint) -> str:
    """'ID', 'OSR', 'CLD', ... for the roll-to line."""
    return _SPEC_LABELS[(reference_point, unit)]


class RollingDescriptionBuilder:
    """
    Builds the rolling description from a RollingResult.

    Lines, in order: roll-to, chord/rise, arc, rings or nesting, pitch.
    Template and print jobs get a single fixed line.
    """

    TEMPLATE_TEXT = "Roll Per Template / Sample"
    PRINT_TEXT = "Roll per print"

    def build(self, result: RollingResult) -> str:
        if result.roll_to_method == RollToMethod.TEMPLATE:
            return self.TEMPLATE_TEXT
        if result.roll_to_method == RollToMethod.PRINT:
            return self.PRINT_TEXT
        if result.measurement.raw_value <= 0:
            return ""

        lines = [self.roll_to_line(result)]
        if result.sagitta is not None:
            lines.append('Chord: %s" Rise: %.4f"' % (
                format_number(result.sagitta.chord_length), result.sagitta.rise))
        if result.arc_degrees:
            lines.append("Arc: %s°" % format_number(result.arc_degrees))
        if isinstance(result.ring_plan, RingPlan):
            lines.extend(self.ring_lines(result.ring_plan))
        if isinstance(result.nesting, NestingPlan):
            lines.append(self.nesting_line(result.nesting))
        if result.pitch_input is not None:
            lines.extend(self.pitch_lines(result))
        return "\n".join(lines)

    def roll_to_line(self, result: RollingResult) -> str:
        m = result.measurement
        line = 'Roll to %s" %s' % (format_number(m.raw_value), spec_label(m.unit, m.reference_point))
        if result.orientation_note:
            line += " " + result.orientation_note
        return line

    def pitch_lines(self, result: RollingResult) -> List[str]:
        lines = []
        pitch_input = result.pitch_input
        state: Optional[PitchState] = result.pitch if isinstance(result.pitch, PitchState) else None

        if state is not None:
            lines.append("Pitch to %.5f°" % state.angle_degrees)

        if isinstance(pitch_input, RunRiseInput):
            lines.append('Run: %s" Rise: %s"' % (
                format_number(pitch_input.run), format_number(pitch_input.rise)))
        elif isinstance(pitch_input, DegreeInput):
            lines.append("Pitch Angle: %s°" % format_number(pitch_input.angle_degrees))
        elif isinstance(pitch_input, SpacingInput):
            kind = "Center-to-Center" if pitch_input.spacing_type == SpacingType.CENTER else "Between"
            lines.append('%s Spacing: %s"' % (kind, format_number(pitch_input.spacing)))

        if state is not None and state.developed_diameter:
            m = result.measurement
            label = spec_label(m.unit, m.reference_point)
            if m.unit == MeasureUnit.RADIUS:
                lines.append('Developed Radius: %.4f" %s' % (state.developed_radius, label))
            else:
                lines.append('Developed Diameter: %.4f" %s' % (state.developed_diameter, label))

        if isinstance(result.pitch, Infeasible):
            lines.append("Pitch: %s" % result.pitch.reason)

        direction = ("Clockwise" if pitch_input.direction == HelixDirection.CLOCKWISE
                     else "Counter-Clockwise")
        lines.append("Direction: %s (going up)" % direction)
        return lines

    def ring_lines(self, plan: RingPlan) -> List[str]:
        if plan.is_spliced:
            middle = "%d segments/ring" % plan.segments_per_ring
        else:
            middle = "%d rings/stick" % plan.rings_per_stock
        return [
            "Complete Ring — %d ring(s), %s, %d stick(s) needed" % (
                plan.rings_needed, middle, plan.stock_pieces_needed),
            'Tangents: %s" each end' % format_number(plan.tangent_allowance),
        ]

    def nesting_line(self, plan: NestingPlan) -> str:
        return 'Complete Rings: %d/pc from %s" stock, %d lengths' % (
            plan.rings_per_stock_piece, format_number(plan.stock_length), plan.stock_pieces_needed)
