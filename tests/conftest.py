# tests/conftest.py
"""Global PyTest fixtures for the test-suite.

Every fixture hands out fresh immutable RNG states; tests that need a
specific seed build their own.
"""

from __future__ import annotations

import pytest

from propcheck.rng import RNG, PhiloxRNG, SimpleRNG
from tests.helpers.constants import DEFAULT_SEED


@pytest.fixture(params=["simple", "philox"])
def rng(request: pytest.FixtureRequest) -> RNG:
    """Initial RNG state for each implementation of the port."""
    match request.param:
        case "simple":
            return SimpleRNG(DEFAULT_SEED)
        case "philox":
            return PhiloxRNG(key=DEFAULT_SEED)
        case other:
            raise AssertionError(f"Unknown RNG kind: {other!r}")


@pytest.fixture
def simple_rng() -> RNG:
    return SimpleRNG(DEFAULT_SEED)
