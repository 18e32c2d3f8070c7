"""
Calculator registry — maps profile types to roll calculator classes.

Each profile supplies only its offset-dimension strategy; the math is the
shared pipeline in BaseRollCalculator.
"""

from typing import Union

from ..schemas import ProfileType
from .angle import AngleRollCalculator
from .base import BaseRollCalculator
from .beam import BeamRollCalculator
from .channel import ChannelRollCalculator
from .flat_bar import FlatBarRollCalculator
from .pipe import PipeRollCalculator
from .plate import PlateRollCalculator
from .tee_bar import TeeBarRollCalculator

CALCULATOR_REGISTRY: dict = {
    ProfileType.ANGLE: AngleRollCalculator,
    ProfileType.BEAM: BeamRollCalculator,
    ProfileType.CHANNEL: ChannelRollCalculator,
    ProfileType.FLAT_BAR: FlatBarRollCalculator,
    ProfileType.PIPE: PipeRollCalculator,
    ProfileType.PLATE: PlateRollCalculator,
    ProfileType.TEE_BAR: TeeBarRollCalculator,
}


def _profile_key(profile_type: Union[ProfileType, str]):
    try:
        return ProfileType(profile_type)
    except ValueError:
        return None


def get_calculator(profile_type: Union[ProfileType, str], **kwargs) -> BaseRollCalculator:
    """Returns an instance of the calculator for a profile type, or raises ValueError."""
    key = _profile_key(profile_type)
    if key not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for profile type: {profile_type}. "
            f"Available: {list_calculators()}"
        )
    return CALCULATOR_REGISTRY[key](**kwargs)


def has_calculator(profile_type: Union[ProfileType, str]) -> bool:
    """Check if a calculator exists for a profile type."""
    return _profile_key(profile_type) in CALCULATOR_REGISTRY


def list_calculators() -> list:
    """List all registered profile types."""
    return [p.value for p in CALCULATOR_REGISTRY]
