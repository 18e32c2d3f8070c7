"""
Data contracts for the rolling engine.

Every calculator returns one of these models, ``Infeasible`` when the
geometry cannot be made, or ``None`` when inputs are not complete yet.
All lengths are inches.
"""

import enum
import math
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


# --- Enums ---

class ProfileType(str, enum.Enum):
    ANGLE = "angle"
    BEAM = "beam"
    CHANNEL = "channel"
    FLAT_BAR = "flat_bar"
    PIPE = "pipe"
    PLATE = "plate"
    TEE_BAR = "tee_bar"


class MeasureUnit(str, enum.Enum):
    DIAMETER = "diameter"
    RADIUS = "radius"


class ReferencePoint(str, enum.Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"
    CENTERLINE = "centerline"


class RollType(str, enum.Enum):
    EASY_WAY = "easy_way"
    HARD_WAY = "hard_way"
    ON_EDGE = "on_edge"


class RollToMethod(str, enum.Enum):
    DIMENSION = "dimension"
    TEMPLATE = "template"
    PRINT = "print"


class RingMode(str, enum.Enum):
    MULTI_RING_PER_STOCK = "multi_ring_per_stock"
    SINGLE_RING_PER_SPLICE = "single_ring_per_splice"


class PitchMethod(str, enum.Enum):
    RUN_RISE = "runrise"
    DEGREE = "degree"
    SPACING = "space"


class SpacingType(str, enum.Enum):
    BETWEEN = "between"
    CENTER = "center"


class HelixDirection(str, enum.Enum):
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


# --- Inputs ---

class ProfileGeometry(BaseModel):
    """Cross-section size facing the rolls. Built by the caller, never mutated."""
    profile_type: ProfileType
    offset_dimension: float = Field(ge=0)
    label: Optional[str] = None

    class Config:
        frozen = True


class MeasurementInput(BaseModel):
    """Exactly what the operator dials in on the roll machine."""
    raw_value: float = Field(default=0.0, ge=0)
    unit: MeasureUnit = MeasureUnit.DIAMETER
    reference_point: ReferencePoint = ReferencePoint.CENTERLINE

    class Config:
        frozen = True


class _PitchInputBase(BaseModel):
    run: float = 12.0
    direction: HelixDirection = HelixDirection.CLOCKWISE

    class Config:
        frozen = True


class RunRiseInput(_PitchInputBase):
    method: Literal["runrise"] = "runrise"
    rise: float = 0.0


class DegreeInput(_PitchInputBase):
    method: Literal["degree"] = "degree"
    angle_degrees: float = 0.0


class SpacingInput(_PitchInputBase):
    method: Literal["space"] = "space"
    spacing: float = 0.0
    spacing_type: SpacingType = SpacingType.BETWEEN


PitchInput = Annotated[
    Union[RunRiseInput, DegreeInput, SpacingInput],
    Field(discriminator="method"),
]


class RollLimitRule(BaseModel):
    """Admin rule: smallest CL diameter a given OD can be rolled to."""
    od: float
    material_category: str = Field(default="all", alias="materialCategory")
    min_diameter: float = Field(alias="minDiameter")

    class Config:
        populate_by_name = True


class MandrelDie(BaseModel):
    """Admin settings export keys (camelCase, "label") are accepted as-is."""
    name: str = Field(default="", alias="label")
    od: float
    min_diameter: float = Field(alias="minDiameter")

    class Config:
        populate_by_name = True


# --- Results ---

class Infeasible(BaseModel):
    """Geometry that cannot be produced as entered. Surface as a warning."""
    reason: str


class ResolvedGeometry(BaseModel):
    centerline_diameter: float
    input_diameter: float

    @property
    def centerline_radius(self) -> float:
        return self.centerline_diameter / 2

    @property
    def circumference(self) -> float:
        return math.pi * self.centerline_diameter


class SagittaCheck(BaseModel):
    chord_length: float
    rise: float


class RingPlan(BaseModel):
    mode: RingMode
    circumference: float
    usable_length: float
    tangent_allowance: float
    rings_needed: int
    rings_per_stock: Optional[int] = None
    segments_per_ring: Optional[int] = None
    stock_pieces_needed: int

    @property
    def is_spliced(self) -> bool:
        return self.mode == RingMode.SINGLE_RING_PER_SPLICE


class PitchState(BaseModel):
    """Canonical helix description, whichever input method produced it."""
    method: PitchMethod
    direction: HelixDirection = HelixDirection.CLOCKWISE
    angle_degrees: float
    run_length: float
    axial_rise_per_run: float
    rise_per_revolution: Optional[float] = None
    spacing_between: Optional[float] = None
    spacing_center_to_center: Optional[float] = None
    circumference: Optional[float] = None
    offset_dimension: float = 0.0
    input_diameter: float = 0.0
    developed_diameter: Optional[float] = None

    @property
    def developed_radius(self) -> Optional[float]:
        if self.developed_diameter is None:
            return None
        return self.developed_diameter / 2


class PlateArc(BaseModel):
    effective_diameter: float
    arc_length: float
    total_length: float
    tangent_allowance: float = 0.0
    angle_degrees: Optional[float] = None
    is_complete_ring: bool = True


class NestingPlan(BaseModel):
    arc_length: float
    ring_length: float
    stock_length: float
    quantity: int
    rings_per_stock_piece: int
    stock_pieces_needed: int
    total_rings_produced: int
    excess_rings: int
    used_per_piece: float
    waste_per_piece: float


class RollLimitCheck(BaseModel):
    centerline_diameter: float
    min_roll_diameter: float
    is_below_min: bool
    material_category: str
    matched_rule: Optional[RollLimitRule] = None
    available_dies: List[MandrelDie] = []


class CatalogEntry(BaseModel):
    profile_type: ProfileType
    label: str
    offset_dimension: float
    default_stock_length: Optional[float] = None
    kind: Optional[str] = None
    nominal: Optional[str] = None


class RollingResult(BaseModel):
    """Everything one profile calculator derives for a rolled part."""
    profile_type: ProfileType
    roll_to_method: RollToMethod = RollToMethod.DIMENSION
    measurement: MeasurementInput = MeasurementInput()
    roll_type: Optional[RollType] = None
    profile: Optional[ProfileGeometry] = None
    offset_dimension: float = 0.0
    orientation_note: Optional[str] = None
    arc_degrees: Optional[float] = None
    geometry: Optional[ResolvedGeometry] = None
    sagitta: Optional[SagittaCheck] = None
    ring_plan: Optional[Union[RingPlan, Infeasible]] = None
    pitch_input: Optional[PitchInput] = None
    pitch: Optional[Union[PitchState, Infeasible]] = None
    plate_arc: Optional[PlateArc] = None
    nesting: Optional[Union[NestingPlan, Infeasible]] = None
    roll_limit: Optional[RollLimitCheck] = None
    description: str = ""

    @property
    def warnings(self) -> List[str]:
        found = []
        for part in (self.ring_plan, self.pitch, self.nesting):
            if isinstance(part, Infeasible):
                found.append(part.reason)
        if self.roll_limit is not None and self.roll_limit.is_below_min:
            found.append(
                'Below minimum roll diameter (%.2f" CL)' % self.roll_limit.min_roll_diameter
            )
        return found
