"""
Sized generators: a size knob mapped to a :class:`propcheck.gen.Gen`.

The size lets a property grow its inputs as testing proceeds. By
convention, larger sizes never produce simpler values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from propcheck.errors import NegativeSize
from propcheck.gen import Gen


__all__: list[str] = ["SGen"]

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class SGen(Generic[A]):
    """Total function from a non-negative size to a generator.

    Attributes:
        for_size: Builds the generator used at a given size.
    """

    for_size: Callable[[int], Gen[A]]

    def __call__(self, n: int) -> Gen[A]:
        """Generator for size *n*.

        Raises:
            NegativeSize: If ``n < 0``.
        """
        if n < 0:
            raise NegativeSize(n)
        return self.for_size(n)

    def apply(self, n: int) -> Gen[A]:
        return self(n)

    def map(self, f: Callable[[A], B]) -> SGen[B]:
        return SGen(lambda n: self(n).map(f))

    def flat_map(self, f: Callable[[A], SGen[B]]) -> SGen[B]:
        """Chain sized generators, holding the size fixed on both sides."""
        return SGen(lambda n: self(n).flat_map(lambda a: f(a)(n)))

    def __pow__(self, other: SGen[B]) -> SGen[tuple[A, B]]:
        """Pair size-wise: ``s1 ** s2`` at size n is ``s1(n) ** s2(n)``."""
        return SGen(lambda n: self(n) ** other(n))

    @staticmethod
    def list_of(g: Gen[A]) -> SGen[list[A]]:
        """Lists whose length equals the size."""
        return SGen(lambda n: g.list_of_n(n))

    @staticmethod
    def non_empty_list_of(g: Gen[A]) -> SGen[list[A]]:
        """Like :meth:`list_of`, but size 0 still yields one element."""
        return SGen(lambda n: g.list_of_n(max(n, 1)))
