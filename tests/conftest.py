"""
Shared test fixtures — a defaults-only section catalog and settings that
ignore any local .env file.
"""

import pytest

from rollplan.calculators.catalog import SectionCatalog
from rollplan.config import Settings


@pytest.fixture
def catalog():
    return SectionCatalog(overrides={})


@pytest.fixture
def config():
    return Settings(_env_file=None)
