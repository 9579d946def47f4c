# src/propcheck/runner.py
"""Run properties against a :class:`RunConfig` and render their results."""

from __future__ import annotations

import logging

from propcheck.config import RunConfig
from propcheck.errors import PropertyFalsifiedError
from propcheck.prop import Prop
from propcheck.result import Falsified, Passed, Proved, Result, TestCases


__all__: list[str] = ["run", "format_result", "assert_property"]

logger = logging.getLogger(__name__)


def run(prop: Prop, config: RunConfig | None = None) -> Result:
    """Run *prop* once with the budget and seed from *config*.

    A missing seed is resolved before the run so it can be logged for replay.
    """
    cfg = (config or RunConfig()).with_resolved_seed()
    logger.debug(
        "Running property: max_size=%d test_cases=%d seed=%s rng=%s",
        cfg.max_size,
        cfg.test_cases,
        cfg.seed,
        cfg.rng_kind,
    )
    result = prop.run(cfg.max_size, cfg.test_cases, cfg.rng())
    match result:
        case Falsified(failure, successes):
            logger.warning(
                "Property falsified after %d passed tests (seed=%s): %s",
                successes,
                cfg.seed,
                failure,
            )
        case Passed():
            logger.info("Property passed %d tests (seed=%s)", cfg.test_cases, cfg.seed)
        case Proved():
            logger.info("Property proved")
    return result


def format_result(result: Result, test_cases: TestCases) -> str:
    """Human-readable summary of *result*."""
    match result:
        case Falsified(failure, successes):
            return f"Falsified after {successes} passed tests: {failure}"
        case Passed():
            return f"OK, passed {test_cases} tests."
        case Proved():
            return "OK, proved property."


def assert_property(prop: Prop, config: RunConfig | None = None) -> Passed | Proved:
    """Run *prop* and raise if it is falsified; intended for use inside tests.

    Raises:
        PropertyFalsifiedError: With the report and the seed to replay it.
    """
    cfg = (config or RunConfig()).with_resolved_seed()
    match run(prop, cfg):
        case Falsified() as falsified:
            message = f"{format_result(falsified, cfg.test_cases)}\n(seed={cfg.seed})"
            raise PropertyFalsifiedError(falsified, message)
        case Passed() | Proved() as ok:
            return ok
