"""Hypothesis profiles and shared pytest fixtures for bigmath.

The profile is chosen by the HYPOTHESIS_PROFILE environment variable
("dev" by default, "ci" for the longer run).
"""

from __future__ import annotations

import os

import pytest
from hypothesis import HealthCheck, settings

from bigmath.functions.constants import LibraryConstants

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def constants() -> LibraryConstants:
    """A private constants holder with empty caches."""
    return LibraryConstants()
