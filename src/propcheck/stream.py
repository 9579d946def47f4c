"""Lazy, pull-based sequences driven by pure step functions."""

from __future__ import annotations

from itertools import islice
from typing import Callable, Iterable, Iterator, TypeVar


S = TypeVar("S")
A = TypeVar("A")

__all__: list[str] = ["unfold", "take", "find_first"]


def unfold(seed: S, step: Callable[[S], tuple[A, S]]) -> Iterator[A]:
    """Unbounded iterator of values produced by repeatedly applying *step*.

    Each successor state feeds the next step. The iterator is single-use;
    calling ``unfold`` again with the same *seed* replays the same values.
    """
    state = seed
    while True:
        value, state = step(state)
        yield value


def take(n: int, items: Iterable[A]) -> Iterator[A]:
    """First *n* elements of *items*, pulled lazily."""
    if n < 0:
        raise ValueError(f"Cannot take a negative number of elements: {n}")
    return islice(items, n)


def find_first(items: Iterable[A], predicate: Callable[[A], bool]) -> A | None:
    """First element satisfying *predicate*, or ``None`` when exhausted."""
    return next((item for item in items if predicate(item)), None)
