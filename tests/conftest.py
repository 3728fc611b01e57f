"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

from safeint import IntBounds

# Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def int8_bounds() -> IntBounds:
    """Узкий знаковый 8-битный диапазон для проверки переполнений"""
    return IntBounds.signed(8)
