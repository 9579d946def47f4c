# tests/helpers/__init__.py
"""Shared test utilities for the propcheck test suite.

Usage:
    >>> from tests.helpers import expect_falsified, sample_n
    >>> falsified = expect_falsified(prop.run(10, 10, SimpleRNG(42)))
    >>> values = sample_n(Gen.choose(0, 10), SimpleRNG(42), 100)
"""

from __future__ import annotations

from tests.helpers.constants import (
    DEFAULT_SEED,
    SEEDS,
    STATISTICAL_SAMPLES,
    WEIGHTED_TOLERANCE,
)
from tests.helpers.result_utils import expect_falsified, expect_passed, expect_proved, sample_n

__all__ = [
    # Result unwrapping
    "expect_falsified",
    "expect_passed",
    "expect_proved",
    "sample_n",
    # Constants
    "DEFAULT_SEED",
    "SEEDS",
    "STATISTICAL_SAMPLES",
    "WEIGHTED_TOLERANCE",
]
