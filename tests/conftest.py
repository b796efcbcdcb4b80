from __future__ import annotations

import random
import sys
from pathlib import Path

import numpy as np
import pytest
from hypothesis import settings

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lcs_linkage.utils.io_utils import MIN_LENGTH_ENV, load_settings  # noqa: E402

# ---- Deterministic Testing Configuration ---------------------

# Global deterministic seed
DETERMINISTIC_SEED = 42


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "hypothesis: property-based tests")


@pytest.fixture(autouse=True)
def set_deterministic_seed():
    """Set deterministic seed for all tests"""
    random.seed(DETERMINISTIC_SEED)
    np.random.seed(DETERMINISTIC_SEED)
    yield
    # Reset after test
    random.seed()
    np.random.seed()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep env overrides and the settings cache from leaking between tests."""
    monkeypatch.delenv(MIN_LENGTH_ENV, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


# Hypothesis settings for all property-based tests
settings.register_profile(
    "deterministic",
    deadline=None,
    max_examples=200,
    database=None,
)
settings.load_profile("deterministic")
