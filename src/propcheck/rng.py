# src/propcheck/rng.py
"""
propcheck.rng
=============
Immutable, purely functional random number generators.

Every generator in :mod:`propcheck.gen` consumes one RNG state and hands
exactly one successor state to the next step. Nothing is mutated in place,
so re-running with the same state always replays the same values.

Public API
----------
* :class:`RNG` - the port: ``next_int() -> (int, RNG)``.
* :class:`SimpleRNG` - 48-bit linear congruential generator.
* :class:`PhiloxRNG` - NumPy's counter-based Philox, addressed by
  ``(key, counter)`` so each state is a plain value.
* :func:`non_negative_int`, :func:`double`, :func:`boolean`, :func:`ints` -
  derived draws built on ``next_int``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from functools import lru_cache
from typing import Final, Literal, Protocol, TypeAlias

import numpy as np


__all__: list[str] = [
    "RNG",
    "RNGKind",
    "SimpleRNG",
    "PhiloxRNG",
    "non_negative_int",
    "double",
    "boolean",
    "ints",
    "seeded_rng",
    "time_seeded_rng",
]

# --------------------------------------------------------------------------- #
# Constants                                                                   #
# --------------------------------------------------------------------------- #

_LCG_MULTIPLIER: Final[int] = 0x5DEECE66D
_LCG_INCREMENT: Final[int] = 0xB
_LCG_MASK: Final[int] = (1 << 48) - 1

_INT32_SPAN: Final[int] = 1 << 32
_INT32_MAX: Final[int] = (1 << 31) - 1

_PHILOX_KEY_LIMIT: Final[int] = 1 << 128  # exclusive
_PHILOX_COUNTER_LIMIT: Final[int] = 1 << 256  # exclusive
_PHILOX_BLOCK_WORDS: Final[int] = 4  # 64-bit words per Philox4x64 block
_PHILOX_LANES: Final[int] = 2 * _PHILOX_BLOCK_WORDS  # 32-bit draws per block
_PHILOX_CACHE_BLOCKS: Final[int] = 4096

RNGKind: TypeAlias = Literal["simple", "philox"]


def _to_int32(value: int) -> int:
    """Reinterpret the low 32 bits of *value* as a signed integer."""
    value &= _INT32_SPAN - 1
    return value - _INT32_SPAN if value > _INT32_MAX else value


@lru_cache(maxsize=_PHILOX_CACHE_BLOCKS)
def _philox_block(key: int, counter: int) -> tuple[int, ...]:
    """The four raw 64-bit words Philox produces at ``(key, counter)``."""
    bit_generator = np.random.Philox(key=key, counter=counter)
    return tuple(int(word) for word in bit_generator.random_raw(_PHILOX_BLOCK_WORDS))


# --------------------------------------------------------------------------- #
# Port                                                                        #
# --------------------------------------------------------------------------- #


class RNG(Protocol):
    """Pure source of 32-bit signed integers.

    Implementations must be deterministic (the same state always yields the
    same value and successor) and total.
    """

    def next_int(self) -> tuple[int, RNG]: ...


# --------------------------------------------------------------------------- #
# Implementations                                                             #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class SimpleRNG:
    """Linear congruential generator over a 48-bit seed.

    Attributes:
        seed: Current generator state. Only the low 48 bits are significant.
    """

    seed: int

    def next_int(self) -> tuple[int, RNG]:
        new_seed = (self.seed * _LCG_MULTIPLIER + _LCG_INCREMENT) & _LCG_MASK
        return _to_int32(new_seed >> 16), SimpleRNG(new_seed)


@dataclass(frozen=True)
class PhiloxRNG:
    """Counter-based generator backed by :class:`numpy.random.Philox`.

    The state is the ``(key, counter, lane)`` triple. Each block of four
    64-bit words is computed once per ``(key, counter)`` and cached; its eight
    32-bit halves are handed out lane by lane before the counter advances.
    No live NumPy state is ever shared between two RNG values.

    Attributes:
        key: Philox key in ``[0, 2**128)``.
        counter: Block counter in ``[0, 2**256)``.
        lane: Index of the next 32-bit half within the block, in ``[0, 8)``.
    """

    key: int
    counter: int = 0
    lane: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.key < _PHILOX_KEY_LIMIT:
            raise ValueError(f"Philox key must be in [0, 2**128), got {self.key}")
        if not 0 <= self.counter < _PHILOX_COUNTER_LIMIT:
            raise ValueError(f"Philox counter must be in [0, 2**256), got {self.counter}")
        if not 0 <= self.lane < _PHILOX_LANES:
            raise ValueError(f"Philox lane must be in [0, 8), got {self.lane}")

    def next_int(self) -> tuple[int, RNG]:
        word = _philox_block(self.key, self.counter)[self.lane // 2]
        value = word >> 32 if self.lane % 2 == 0 else word
        if self.lane + 1 < _PHILOX_LANES:
            successor = PhiloxRNG(key=self.key, counter=self.counter, lane=self.lane + 1)
        else:
            successor = PhiloxRNG(
                key=self.key, counter=(self.counter + 1) % _PHILOX_COUNTER_LIMIT
            )
        return _to_int32(value), successor


# --------------------------------------------------------------------------- #
# Derived draws                                                               #
# --------------------------------------------------------------------------- #


def non_negative_int(rng: RNG) -> tuple[int, RNG]:
    """Draw an int in ``[0, 2**31 - 1]``.

    Negative draws ``i`` map to ``-(i + 1)`` so ``-2**31`` has a partner.
    """
    i, next_rng = rng.next_int()
    return (i if i >= 0 else -(i + 1)), next_rng


def double(rng: RNG) -> tuple[float, RNG]:
    """Draw a float in ``[0.0, 1.0)``."""
    i, next_rng = non_negative_int(rng)
    return i / (_INT32_MAX + 1), next_rng


def boolean(rng: RNG) -> tuple[bool, RNG]:
    i, next_rng = non_negative_int(rng)
    return i % 2 == 0, next_rng


def ints(count: int, rng: RNG) -> tuple[list[int], RNG]:
    """Draw *count* successive ints, threading the state left to right."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    values: list[int] = []
    current = rng
    for _ in range(count):
        value, current = current.next_int()
        values.append(value)
    return values, current


# --------------------------------------------------------------------------- #
# Factories                                                                   #
# --------------------------------------------------------------------------- #


def seeded_rng(seed: int, kind: RNGKind = "simple") -> RNG:
    """Build an initial RNG state of the requested *kind* from *seed*."""
    match kind:
        case "simple":
            return SimpleRNG(seed)
        case "philox":
            return PhiloxRNG(key=seed % _PHILOX_KEY_LIMIT)


def time_seeded_rng(kind: RNGKind = "simple") -> RNG:
    """Seed from the wall clock in nanoseconds."""
    return seeded_rng(time.time_ns(), kind)
