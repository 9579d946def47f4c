# src/propcheck/gen.py
"""
propcheck.gen
=============
Composable, purely functional recipes for sampling random values.

A :class:`Gen` is not a value; it wraps a :class:`propcheck.state.State`
action over an :class:`propcheck.rng.RNG`. Sampling consumes one RNG state
and returns the value with exactly one successor state, so the same seed
always replays the same values.

Typical usage
-------------
Example::

    from propcheck.gen import Gen
    from propcheck.rng import SimpleRNG

    small = Gen.choose(0, 100)
    pairs = small ** Gen.boolean()
    lists = small.list_of_n(Gen.choose(0, 10))

    value, next_rng = lists.run(SimpleRNG(42))

Configuration errors (:class:`propcheck.errors.InvalidRange`,
:class:`propcheck.errors.InvalidWeights`,
:class:`propcheck.errors.NegativeCount`) are raised when the generator is
built, before anything is sampled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, Iterator, TypeVar

from propcheck import rng as rng_ops
from propcheck.errors import InvalidRange, InvalidWeights, NegativeCount
from propcheck.rng import RNG
from propcheck.state import State
from propcheck.stream import unfold

if TYPE_CHECKING:
    from propcheck.sgen import SGen


__all__: list[str] = ["Gen"]

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Gen(Generic[A]):
    """Recipe for sampling a value of type ``A`` from an RNG state.

    Attributes:
        sample: State action ``RNG -> (A, RNG)``.
    """

    sample: State[RNG, A]

    # ------------------------------------------------------------------ #
    # Primitives                                                         #
    # ------------------------------------------------------------------ #

    @staticmethod
    def unit(a: A) -> Gen[A]:
        """Always generate *a*; the RNG passes through untouched."""
        return Gen(State.unit(a))

    @staticmethod
    def choose(start: int, stop_exclusive: int) -> Gen[int]:
        """Ints in ``[start, stop_exclusive)``.

        Raises:
            InvalidRange: If ``stop_exclusive <= start``.
        """
        if stop_exclusive <= start:
            raise InvalidRange(start, stop_exclusive)
        span = stop_exclusive - start
        return Gen(State(rng_ops.non_negative_int).map(lambda n: start + n % span))

    @staticmethod
    def boolean() -> Gen[bool]:
        return Gen(State(rng_ops.boolean))

    @staticmethod
    def double() -> Gen[float]:
        """Floats in ``[0.0, 1.0)``."""
        return Gen(State(rng_ops.double))

    # ------------------------------------------------------------------ #
    # Choice                                                             #
    # ------------------------------------------------------------------ #

    @staticmethod
    def union(g1: Gen[A], g2: Gen[A]) -> Gen[A]:
        """Pull from *g1* or *g2* with equal likelihood."""
        return Gen.boolean().flat_map(lambda b: g1 if b else g2)

    @staticmethod
    def weighted(g1: tuple[Gen[A], float], g2: tuple[Gen[A], float]) -> Gen[A]:
        """Pull from each generator with probability proportional to its weight.

        The threshold is ``|w1| / (|w1| + |w2|)``; a double below it selects
        the first generator.

        Raises:
            InvalidWeights: If both weights are zero.
        """
        (gen1, w1), (gen2, w2) = g1, g2
        total = abs(w1) + abs(w2)
        if total == 0:
            raise InvalidWeights(w1, w2)
        threshold = abs(w1) / total
        return Gen.double().flat_map(lambda d: gen1 if d < threshold else gen2)

    # ------------------------------------------------------------------ #
    # Combinators                                                        #
    # ------------------------------------------------------------------ #

    def map(self, f: Callable[[A], B]) -> Gen[B]:
        return Gen(self.sample.map(f))

    def flat_map(self, f: Callable[[A], Gen[B]]) -> Gen[B]:
        """Sample self, then sample the generator *f* picks for that value."""
        return Gen(self.sample.flat_map(lambda a: f(a).sample))

    def map2(self, other: Gen[B], f: Callable[[A, B], C]) -> Gen[C]:
        """Sample self, then *other* from self's successor, and combine."""
        return Gen(self.sample.map2(other.sample, f))

    def __pow__(self, other: Gen[B]) -> Gen[tuple[A, B]]:
        """Pair two generators: ``g1 ** g2``."""
        return self.map2(other, lambda a, b: (a, b))

    def list_of_n(self, n: int | Gen[int]) -> Gen[list[A]]:
        """Lists of exactly *n* samples, or of a length drawn from *n*.

        Raises:
            NegativeCount: If a fixed *n* is negative.
        """
        if isinstance(n, Gen):
            return n.flat_map(self.list_of_n)
        if n < 0:
            raise NegativeCount(n)
        return Gen(State.sequence([self.sample] * n))

    def unsized(self) -> SGen[A]:
        """Lift into a sized generator that ignores the size."""
        from propcheck.sgen import SGen

        return SGen(lambda _: self)

    # ------------------------------------------------------------------ #
    # Sampling                                                           #
    # ------------------------------------------------------------------ #

    def run(self, rng: RNG) -> tuple[A, RNG]:
        """Sample once, returning the value and the successor RNG."""
        return self.sample.run(rng)

    def samples(self, rng: RNG) -> Iterator[A]:
        """Unbounded lazy stream of samples threaded from *rng*."""
        return unfold(rng, self.sample.run)
