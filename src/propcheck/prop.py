# src/propcheck/prop.py
"""
propcheck.prop
==============
Properties: generators bound to predicates, run for a budget of trials.

A :class:`Prop` is a single immutable wrapper around its run function
``(max_size, test_cases, rng) -> Result``. The combinators ``&``, ``|``
and :meth:`Prop.tag` build new properties that close over their operands'
run functions; nothing is mutated and nothing is retained between runs.

Design overview
---------------
1. **Plain sampling** - :func:`for_all` threads one RNG chain through an
   unbounded lazy stream of samples, takes ``test_cases`` of them and
   returns the first falsification in trial order.
2. **Sized sampling** - :func:`for_all_sizes` and :func:`for_all_sized`
   spread the budget over sizes ``0 .. min(test_cases, max_size)`` with
   ``ceil(test_cases / max_size)`` trials per size, checked in increasing order.
   The first failing size is the smallest one, which stands in for
   shrinking a counterexample.
3. **Proofs** - :func:`check` evaluates a statement once, without
   randomness, and reports :class:`Proved`.

A predicate that raises is caught per trial and reported as
:class:`Falsified`; configuration errors propagate to the caller.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from functools import cache
from itertools import count
from typing import Callable, TypeAlias, TypeVar

from propcheck.errors import InvalidMaxSize, NegativeTestCases
from propcheck.gen import Gen
from propcheck.result import Falsified, MaxSize, Passed, Proved, Result, TestCases
from propcheck.rng import RNG
from propcheck.sgen import SGen
from propcheck.stream import find_first, take


__all__: list[str] = [
    "Prop",
    "RunFn",
    "for_all",
    "for_all_sizes",
    "for_all_sized",
    "check",
]

A = TypeVar("A")

RunFn: TypeAlias = Callable[[MaxSize, TestCases, RNG], Result]


@dataclass(frozen=True)
class Prop:
    """A verifiable statement.

    Attributes:
        run: ``(max_size, test_cases, rng) -> Result``.
    """

    run: RunFn

    def tag(self, message: str) -> Prop:
        """Prefix *message* (newline-joined) to any failure description."""

        def run(max_size: MaxSize, n: TestCases, rng: RNG) -> Result:
            match self.run(max_size, n, rng):
                case Falsified(failure, successes):
                    return Falsified(f"{message}\n{failure}", successes)
                case passed:
                    return passed

        return Prop(run)

    def __and__(self, other: Prop) -> Prop:
        """Both must hold. *other* is not run once self falsifies."""

        def run(max_size: MaxSize, n: TestCases, rng: RNG) -> Result:
            match self.run(max_size, n, rng):
                case Passed() | Proved():
                    return other.run(max_size, n, rng)
                case falsified:
                    return falsified

        return Prop(run)

    def __or__(self, other: Prop) -> Prop:
        """Either may hold. A double failure reports both descriptions."""

        def run(max_size: MaxSize, n: TestCases, rng: RNG) -> Result:
            match self.run(max_size, n, rng):
                case Falsified(failure, _):
                    return other.tag(failure).run(max_size, n, rng)
                case passed:
                    return passed

        return Prop(run)


# --------------------------------------------------------------------------- #
# Trial evaluation                                                            #
# --------------------------------------------------------------------------- #


def _exception_message(value: object, exc: Exception) -> str:
    stack = "".join(traceback.format_exception(exc))
    return f"test case: {value!r}\ngenerated an exception: {exc!r}\nstack trace:\n{stack}"


def _trial(value: A, index: int, predicate: Callable[[A], bool]) -> Result:
    """Evaluate one sampled value; exceptions become falsifications."""
    try:
        holds = predicate(value)
    except Exception as exc:
        return Falsified(_exception_message(value, exc), index)
    return Passed() if holds else Falsified(repr(value), index)


# --------------------------------------------------------------------------- #
# Constructors                                                                #
# --------------------------------------------------------------------------- #


def for_all(gen: Gen[A] | SGen[A], predicate: Callable[[A], bool]) -> Prop:
    """Property that *predicate* holds for every value sampled from *gen*.

    A sized generator is delegated to :func:`for_all_sized`.

    Raises (at run time):
        NegativeTestCases: If run with ``test_cases < 0``.
    """
    if isinstance(gen, SGen):
        return for_all_sized(gen, predicate)
    plain: Gen[A] = gen

    def run(max_size: MaxSize, n: TestCases, rng: RNG) -> Result:
        if n < 0:
            raise NegativeTestCases(n)
        trials = take(n, zip(plain.samples(rng), count()))
        outcomes = (_trial(value, index, predicate) for value, index in trials)
        match find_first(outcomes, lambda outcome: outcome.is_falsified()):
            case None:
                return Passed()
            case falsified:
                return falsified

    return Prop(run)


def for_all_sizes(size_to_gen: Callable[[int], Gen[A]], predicate: Callable[[A], bool]) -> Prop:
    """Property over a generator family indexed by size.

    Sizes ``0 .. min(test_cases, max_size)`` are each exercised with
    ``ceil(test_cases / max_size)`` trials, in increasing order, and the
    first failing size wins. Every size sees the same initial RNG.

    Raises (at run time):
        InvalidMaxSize: If run with ``max_size < 1``.
        NegativeTestCases: If run with ``test_cases < 0``.
    """

    def run(max_size: MaxSize, n: TestCases, rng: RNG) -> Result:
        if max_size < 1:
            raise InvalidMaxSize(max_size)
        if n < 0:
            raise NegativeTestCases(n)
        cases_per_size = -(-n // max_size)
        outcomes = (
            for_all(size_to_gen(size), predicate).run(max_size, cases_per_size, rng)
            for size in range(min(n, max_size) + 1)
        )
        match find_first(outcomes, lambda outcome: outcome.is_falsified()):
            case None:
                return Passed()
            case falsified:
                return falsified

    return Prop(run)


def for_all_sized(sgen: SGen[A], predicate: Callable[[A], bool]) -> Prop:
    """Property over a sized generator; see :func:`for_all_sizes`."""
    return for_all_sizes(sgen, predicate)


def check(statement: bool | Callable[[], bool]) -> Prop:
    """Property proved by a single evaluation of *statement*.

    The run parameters are ignored. A callable is evaluated lazily, on the
    first run, and its outcome is memoised for every later run. A statement
    that raises is falsified with the exception and its traceback.
    """

    @cache
    def evaluate() -> Result:
        try:
            holds = statement() if callable(statement) else statement
        except Exception as exc:
            return Falsified(_exception_message((), exc), 0)
        return Proved() if holds else Falsified("()", 0)

    def run(max_size: MaxSize, n: TestCases, rng: RNG) -> Result:
        return evaluate()

    return Prop(run)
