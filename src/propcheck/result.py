"""
Outcome ADT for a single property run.

Every run of a :class:`propcheck.prop.Prop` yields exactly one of three
terminal variants. Falsification is ordinary data and travels through the
property combinators as a return value.

Type Safety:
    - All variants are frozen dataclasses (immutable)
    - Literal ``kind`` discriminators enable exhaustive pattern matching
    - ``Result`` is a closed union; there are no transitions between variants

Usage:
    >>> match prop.run(100, 100, SimpleRNG(42)):
    ...     case Falsified(failure, successes):
    ...         print(f"Falsified after {successes} passed tests: {failure}")
    ...     case Passed():
    ...         print("OK")
    ...     case Proved():
    ...         print("OK, proved")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

FailedCase: TypeAlias = str
SuccessCount: TypeAlias = int
TestCases: TypeAlias = int
MaxSize: TypeAlias = int


@dataclass(frozen=True)
class Passed:
    """Every sampled trial satisfied the predicate."""

    kind: Literal["Passed"] = "Passed"

    def is_falsified(self) -> bool:
        return False


@dataclass(frozen=True)
class Proved:
    """The predicate was checked once, without sampling, and held."""

    kind: Literal["Proved"] = "Proved"

    def is_falsified(self) -> bool:
        return False


@dataclass(frozen=True)
class Falsified:
    """A counterexample was found.

    Attributes:
        failure: Printable description of the failing case (and any tags).
        successes: Number of trials that passed before the failing one.
    """

    failure: FailedCase
    successes: SuccessCount
    kind: Literal["Falsified"] = "Falsified"

    def is_falsified(self) -> bool:
        return True


Result = Passed | Proved | Falsified


__all__ = [
    "FailedCase",
    "SuccessCount",
    "TestCases",
    "MaxSize",
    "Passed",
    "Proved",
    "Falsified",
    "Result",
]
