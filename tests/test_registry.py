"""
Tests for the calculator registry and settings.

Tests:
1.    Every profile type has a calculator
2.    Lookup by string or enum
3.    Unknown profile types
4.    Settings defaults and environment overrides
"""

import pytest

from rollplan.calculators.base import BaseRollCalculator
from rollplan.calculators.pipe import PipeRollCalculator
from rollplan.calculators.registry import get_calculator, has_calculator, list_calculators
from rollplan.config import Settings
from rollplan.schemas import ProfileType


def test_all_profiles_registered():
    calcs = list_calculators()
    for profile in ProfileType:
        assert profile.value in calcs, f"{profile.value} not in registry"
        assert has_calculator(profile)


def test_get_calculator(catalog):
    calc = get_calculator("pipe", catalog=catalog)
    assert isinstance(calc, PipeRollCalculator)
    assert isinstance(calc, BaseRollCalculator)
    assert calc.catalog is catalog

    assert get_calculator(ProfileType.FLAT_BAR).PROFILE_TYPE == ProfileType.FLAT_BAR


def test_unknown_profile():
    assert not has_calculator("square_tube")
    with pytest.raises(ValueError):
        get_calculator("square_tube")


def test_settings(monkeypatch):
    config = Settings(_env_file=None)
    assert config.DEFAULT_RUN_INCHES == 12.0
    assert config.SAGITTA_CHORDS == [60.0, 24.0, 12.0, 6.0, 3.0]
    assert config.MIN_ROLL_FACTOR_ALUMINUM == 12.0

    monkeypatch.setenv("DEFAULT_TANGENT_INCHES", "6")
    assert Settings(_env_file=None).DEFAULT_TANGENT_INCHES == 6.0
