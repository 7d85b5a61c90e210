"""Pytest configuration and fixtures."""

import random

import pytest

from decimals import DecimalConfig, DecimalEngine, RoundingMode


@pytest.fixture
def engine() -> DecimalEngine:
    """Engine with the default (unbounded) configuration."""
    return DecimalEngine()


@pytest.fixture
def bounded_engine() -> DecimalEngine:
    """Engine limited to 5-digit coefficients."""
    return DecimalEngine(DecimalConfig(max_digits=5))


@pytest.fixture
def half_even_engine() -> DecimalEngine:
    """Engine rounding half-even at scale 2 by default."""
    return DecimalEngine(DecimalConfig(default_rounding=RoundingMode.HALF_EVEN, default_scale=2))


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so generated operands are the same on every run."""
    return random.Random(20150127)
