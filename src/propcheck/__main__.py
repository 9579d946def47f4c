# src/propcheck/__main__.py
"""CLI for running a property defined in an importable module.

Usage:
    python -m propcheck MODULE:ATTR [--max-size N] [--test-cases N] [--seed N]
                        [--rng {simple,philox}] [--verbose]

Examples:
    # Run with defaults (100 sizes, 100 test cases, clock seed)
    python -m propcheck examples.lists:reverse_twice

    # Replay a failure deterministically
    python -m propcheck examples.lists:reverse_once --seed 42 --test-cases 500

Exit codes:
    0: Property passed or was proved
    1: Property falsified
    2: Usage, import or configuration error
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Never, Sequence

from pydantic import ValidationError

from propcheck.config import DEFAULT_MAX_SIZE, DEFAULT_TEST_CASES, RunConfig
from propcheck.errors import PropcheckError
from propcheck.prop import Prop
from propcheck.result import Falsified, Passed, Proved
from propcheck.runner import format_result, run


logger = logging.getLogger("propcheck")


def assert_never(value: Never) -> Never:
    """Exhaustiveness check for pattern matching."""
    raise AssertionError(f"Unhandled case: {value!r}")


def load_prop(target: str) -> Prop:
    """Import ``module:attr`` and return the :class:`Prop` it names.

    Raises:
        ValueError: If *target* is malformed or does not name a Prop.
        ImportError: If the module cannot be imported.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected MODULE:ATTR, got {target!r}")

    obj: object = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        if not hasattr(obj, attr):
            raise ValueError(f"{module_name!r} has no attribute {attr_path!r}")
        obj = getattr(obj, attr)

    if not isinstance(obj, Prop):
        raise ValueError(f"{target} is a {type(obj).__name__}, not a Prop")
    return obj


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="propcheck",
        description="Run a property-based test and report the first counterexample.",
    )
    parser.add_argument("target", help="Property to run, as MODULE:ATTR")
    parser.add_argument(
        "--max-size",
        type=int,
        default=DEFAULT_MAX_SIZE,
        help=f"Largest size for sized generators (default: {DEFAULT_MAX_SIZE})",
    )
    parser.add_argument(
        "--test-cases",
        type=int,
        default=DEFAULT_TEST_CASES,
        help=f"Number of trials (default: {DEFAULT_TEST_CASES})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for deterministic replay")
    parser.add_argument(
        "--rng",
        choices=("simple", "philox"),
        default="simple",
        help="RNG implementation (default: simple)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def cmd_run(target: str, config: RunConfig) -> int:
    """
    Run the property named by *target*.

    Returns:
        Exit code:
            0: Passed or proved
            1: Falsified
            2: Import or configuration error
    """
    try:
        prop = load_prop(target)
    except (ImportError, ValueError) as exc:
        print(f"✗ Error: {exc}", file=sys.stderr)
        return 2

    config = config.with_resolved_seed()
    try:
        result = run(prop, config)
    except PropcheckError as exc:
        print(f"✗ Configuration error: {exc}", file=sys.stderr)
        return 2

    report = format_result(result, config.test_cases)
    match result:
        case Falsified():
            print(f"✗ {report}", file=sys.stderr)
            print(f"  Replay with --seed {config.seed}", file=sys.stderr)
            return 1
        case Passed() | Proved():
            print(f"✓ {report}")
            return 0
        case _:
            assert_never(result)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RunConfig(
            max_size=args.max_size,
            test_cases=args.test_cases,
            seed=args.seed,
            rng_kind=args.rng,
        )
    except ValidationError as exc:
        print(f"✗ Invalid run configuration:\n{exc}", file=sys.stderr)
        return 2

    logger.debug("Loaded configuration: %s", config)
    return cmd_run(args.target, config)


if __name__ == "__main__":
    sys.exit(main())
