"""
Abstract base class for all profile roll calculators.

Input: form fields dict (strings as typed by the estimator)
Output: RollingResult with the rolling description filled in

Each profile only decides which section dimension faces the rolls
(offset_dimension) and how its orientation reads on the traveler. The math
is the same shared pipeline for every profile:

    measurement → CL diameter → chord/rise → rings | arc + nesting → pitch

Recognized fields:
    roll_to_method     "" | "template" | "print"
    roll_value         number entered on the roll-to line
    measure_type       "diameter" | "radius"
    measure_point      "inside" | "outside" | "centerline"
    size               catalog size label ("W12x26", "2 x 1/4", '2" Pipe')
    roll_type          "easy_way" | "hard_way" | "on_edge"
    length             stick length ("20'", "240")
    arc_degrees        open arc, blank for a full circle
    complete_rings     bool — plan sticks for closed rings
    rings_needed       int
    tangent_length     straight length left on each end
    pitch_enabled      bool — helix
    pitch_method       "runrise" | "degree" | "space"
    pitch_run, pitch_rise, pitch_angle
    pitch_space_type   "between" | "center"
    pitch_space_value
    pitch_direction    "clockwise" | "counterclockwise"
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..config import Settings, settings
from ..descriptions import RollingDescriptionBuilder
from ..schemas import (
    DegreeInput, HelixDirection, MeasureUnit, MeasurementInput, ProfileGeometry, ProfileType,
    ReferencePoint, ResolvedGeometry, RollToMethod, RollType, RollingResult,
    RunRiseInput, SpacingInput, SpacingType,
)
from ..units import parse_int, parse_length_inches, parse_number
from .catalog import SectionCatalog
from .measurement import resolve_geometry
from .pitch import compute_pitch
from .rings import plan_rings
from .sagitta import check_sagitta

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "y", "on")

_default_catalog = None


def get_default_catalog() -> SectionCatalog:
    """Shared catalog built from settings on first use."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = SectionCatalog(overrides_path=settings.SECTION_SIZES_PATH)
    return _default_catalog


class BaseRollCalculator(ABC):
    """All profile roll calculators inherit from this."""

    PROFILE_TYPE: ProfileType
    DEFAULT_MEASURE_POINT = ReferencePoint.INSIDE

    # Orientation codes for the roll-to line, per roll type
    ORIENTATION_CODES = {
        RollType.EASY_WAY: "EW",
        RollType.HARD_WAY: "HW",
    }

    def __init__(self, catalog: Optional[SectionCatalog] = None,
                 config: Optional[Settings] = None):
        self.catalog = catalog or get_default_catalog()
        self.config = config or settings

    @abstractmethod
    def offset_dimension(self, fields: dict) -> float:
        """
        Section size facing the rolls, in inches, for this profile and the
        chosen roll orientation. 0.0 when the size isn't selected yet.
        """
        pass

    def orientation_note(self, fields: dict) -> Optional[str]:
        """Text that follows the roll-to line, e.g. 'EW' or 'HW'."""
        roll_type = self.parse_roll_type(fields)
        if roll_type is None:
            return None
        return self.ORIENTATION_CODES.get(roll_type)

    # --- Pipeline ---

    def calculate(self, fields: dict) -> RollingResult:
        measurement = self.parse_measurement(fields)
        offset = self.offset_dimension(fields)
        profile = ProfileGeometry(
            profile_type=self.PROFILE_TYPE,
            offset_dimension=max(offset, 0.0),
            label=fields.get("size") or fields.get("custom_size"),
        )
        geometry = resolve_geometry(measurement, offset)

        sagitta = None
        if geometry is not None:
            sagitta = check_sagitta(
                geometry.centerline_diameter,
                chords=self.config.SAGITTA_CHORDS,
                min_diameter=self.config.SAGITTA_MIN_DIAMETER,
            )

        pitch_input = self.parse_pitch_input(fields)
        pitch = None
        if pitch_input is not None:
            pitch = compute_pitch(
                pitch_input,
                geometry.centerline_diameter if geometry else 0.0,
                input_diameter=geometry.input_diameter if geometry else 0.0,
                offset_dimension=offset,
                default_run=self.config.DEFAULT_RUN_INCHES,
            )

        arc = self.parse_number(fields.get("arc_degrees"))
        result = RollingResult(
            profile_type=self.PROFILE_TYPE,
            roll_to_method=self.parse_roll_to_method(fields),
            measurement=measurement,
            roll_type=self.parse_roll_type(fields),
            profile=profile,
            offset_dimension=offset,
            orientation_note=self.orientation_note(fields),
            arc_degrees=arc if arc > 0 else None,
            geometry=geometry,
            sagitta=sagitta,
            pitch_input=pitch_input,
            pitch=pitch,
            **self.plan_material(fields, measurement, geometry, offset),
        )
        result.description = RollingDescriptionBuilder().build(result)
        if result.warnings:
            logger.debug("%s roll warnings: %s", self.PROFILE_TYPE.value, result.warnings)
        return result

    def plan_material(self, fields: dict, measurement: MeasurementInput,
                      geometry: Optional[ResolvedGeometry], offset: float) -> dict:
        """
        Stock planning results keyed by RollingResult field name.
        Section profiles plan complete rings; plate overrides with arc nesting.
        """
        if not self.parse_bool(fields.get("complete_rings")) or geometry is None:
            return {}
        return {
            "ring_plan": plan_rings(
                geometry.centerline_diameter,
                self.stock_length_inches(fields),
                tangent_allowance=self.parse_number(
                    fields.get("tangent_length"), default=self.config.DEFAULT_TANGENT_INCHES),
                rings_needed=self.parse_int(fields.get("rings_needed")) or 1,
            ),
        }

    # --- Helper methods for all calculators ---

    def size_entry(self, fields: dict):
        """Catalog entry for the selected size, or for a custom size typed in."""
        label = fields.get("size")
        if not label or label == "Custom":
            label = fields.get("custom_size")
        return self.catalog.lookup(self.PROFILE_TYPE, label)

    def stock_length_inches(self, fields: dict) -> float:
        """Stick length from the length field, else the catalog default for the size."""
        length = self.parse_length(fields.get("length"))
        if length > 0:
            return length
        entry = self.size_entry(fields)
        if entry is not None and entry.default_stock_length:
            return entry.default_stock_length
        return 0.0

    def parse_measurement(self, fields: dict) -> MeasurementInput:
        value = self.parse_number(fields.get("roll_value"))
        return MeasurementInput(
            raw_value=value if value > 0 else 0.0,
            unit=self._enum(MeasureUnit, fields.get("measure_type"), MeasureUnit.DIAMETER),
            reference_point=self._enum(ReferencePoint, fields.get("measure_point"),
                                       self.DEFAULT_MEASURE_POINT),
        )

    def parse_roll_to_method(self, fields: dict) -> RollToMethod:
        return self._enum(RollToMethod, fields.get("roll_to_method"), RollToMethod.DIMENSION)

    def parse_roll_type(self, fields: dict) -> Optional[RollType]:
        return self._enum(RollType, fields.get("roll_type"), None)

    def parse_pitch_input(self, fields: dict):
        """One of the three pitch input variants, or None when pitch is off."""
        if not self.parse_bool(fields.get("pitch_enabled")):
            return None
        run = self.parse_number(fields.get("pitch_run"), default=self.config.DEFAULT_RUN_INCHES)
        direction = self._enum(HelixDirection, fields.get("pitch_direction"),
                               HelixDirection.CLOCKWISE)
        method = str(fields.get("pitch_method") or "runrise").strip().lower()

        if method == "degree":
            return DegreeInput(run=run, direction=direction,
                               angle_degrees=self.parse_number(fields.get("pitch_angle")))
        if method == "space":
            return SpacingInput(
                run=run, direction=direction,
                spacing=self.parse_number(fields.get("pitch_space_value")),
                spacing_type=self._enum(SpacingType, fields.get("pitch_space_type"),
                                        SpacingType.BETWEEN),
            )
        return RunRiseInput(run=run, direction=direction,
                            rise=self.parse_number(fields.get("pitch_rise")))

    def parse_number(self, value, default: float = 0.0) -> float:
        return parse_number(value, default)

    def parse_int(self, value, default: int = 0) -> int:
        return parse_int(value, default)

    def parse_length(self, value, default: float = 0.0) -> float:
        return parse_length_inches(value, default)

    def parse_bool(self, value) -> bool:
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().lower() in _TRUE_VALUES

    @staticmethod
    def _enum(enum_cls, value, default):
        if value is None or value == "":
            return default
        try:
            return enum_cls(str(value).strip().lower())
        except ValueError:
            return default
