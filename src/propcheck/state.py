"""
State transitions ``S -> (A, S)`` threaded without mutation.

:class:`State` is the action that :class:`propcheck.gen.Gen` wraps: running
it consumes one state value and returns a result plus exactly one successor.
Composition is purely structural; nothing runs until ``run`` is called.

Type Safety:
    - ``State`` is a frozen dataclass (immutable)
    - Generic parameters preserve state and value types through composition
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar


S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class State(Generic[S, A]):
    """A state action producing a value of type ``A``.

    Attributes:
        run: Transition from a state to ``(value, successor_state)``.
    """

    run: Callable[[S], tuple[A, S]]

    @staticmethod
    def unit(a: A) -> State[S, A]:
        """Return *a* and leave the state untouched."""
        return State(lambda s: (a, s))

    def map(self, f: Callable[[A], B]) -> State[S, B]:
        def step(s: S) -> tuple[B, S]:
            a, s1 = self.run(s)
            return f(a), s1

        return State(step)

    def flat_map(self, f: Callable[[A], State[S, B]]) -> State[S, B]:
        """Run self, then run the action chosen by its value on the successor."""

        def step(s: S) -> tuple[B, S]:
            a, s1 = self.run(s)
            return f(a).run(s1)

        return State(step)

    def map2(self, other: State[S, B], f: Callable[[A, B], C]) -> State[S, C]:
        """Run self then *other* on self's successor, combining with *f*."""
        return self.flat_map(lambda a: other.map(lambda b: f(a, b)))

    @staticmethod
    def sequence(actions: Sequence[State[S, A]]) -> State[S, list[A]]:
        """Run *actions* left to right, collecting their values in order."""

        def step(s: S) -> tuple[list[A], S]:
            values: list[A] = []
            current = s
            for action in actions:
                value, current = action.run(current)
                values.append(value)
            return values, current

        return State(step)


__all__ = ["State"]
