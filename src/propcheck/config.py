"""Validated run configuration for property checks."""

from __future__ import annotations

import time
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from propcheck.rng import RNG, RNGKind, seeded_rng, time_seeded_rng


__all__: list[str] = ["RunConfig", "DEFAULT_MAX_SIZE", "DEFAULT_TEST_CASES"]

DEFAULT_MAX_SIZE: int = 100
DEFAULT_TEST_CASES: int = 100


class RunConfig(BaseModel):
    """Parameters for one property run.

    Attributes
    ----------
    max_size
        Largest size handed to sized generators (>= 1).
    test_cases
        Trial budget (>= 0).
    seed
        Non-negative seed for deterministic replay; ``None`` seeds from the
        clock.
    rng_kind
        Which RNG implementation to seed.

    Notes
    -----
    Validation is declarative via Pydantic Field constraints.
    """

    max_size: Annotated[int, Field(ge=1, description="Largest generator size")] = (
        DEFAULT_MAX_SIZE
    )
    test_cases: Annotated[int, Field(ge=0, description="Number of trials")] = DEFAULT_TEST_CASES
    seed: Annotated[int, Field(ge=0, description="Seed for the initial RNG")] | None = None
    rng_kind: RNGKind = "simple"

    model_config = ConfigDict(frozen=True, extra="forbid")

    def with_resolved_seed(self) -> RunConfig:
        """Return a copy whose seed is fixed, drawing one from the clock if unset."""
        if self.seed is not None:
            return self
        return self.model_copy(update={"seed": time.time_ns()})

    def rng(self) -> RNG:
        """Initial RNG state for this configuration."""
        if self.seed is None:
            return time_seeded_rng(self.rng_kind)
        return seeded_rng(self.seed, self.rng_kind)
