# tests/test_gen.py
"""
Tests for :class:`propcheck.gen.Gen`.

Generator laws (determinism, ``unit``, ``map`` identity, ``list_of_n``
length, ``choose`` range) are checked both directly and, where a law
quantifies over inputs, as propcheck properties run with a fixed seed.
"""

from __future__ import annotations

import numpy as np
import pytest

from propcheck.errors import InvalidRange, InvalidWeights, NegativeCount
from propcheck.gen import Gen
from propcheck.prop import for_all
from propcheck.result import Passed
from propcheck.rng import RNG, SimpleRNG
from propcheck.sgen import SGen
from tests.helpers import STATISTICAL_SAMPLES, WEIGHTED_TOLERANCE, expect_passed, sample_n


# --------------------------------------------------------------------------- #
# Constants                                                                   #
# --------------------------------------------------------------------------- #

_SEED_GEN: Gen[int] = Gen.choose(0, 2**31 - 1)

_GENERATORS: tuple[tuple[str, Gen[object]], ...] = (
    ("choose", Gen.choose(-5, 5).map(lambda x: x)),
    ("boolean", Gen.boolean().map(lambda b: b)),
    ("double", Gen.double().map(lambda d: d)),
    ("pair", (Gen.choose(0, 3) ** Gen.boolean()).map(lambda p: p)),
    ("list", Gen.choose(0, 9).list_of_n(Gen.choose(0, 6)).map(lambda xs: xs)),
)


# --------------------------------------------------------------------------- #
# Laws                                                                        #
# --------------------------------------------------------------------------- #


@pytest.mark.parametrize(("name", "gen"), _GENERATORS)
def test_sampling_is_deterministic(name: str, gen: Gen[object], rng: RNG) -> None:
    """Sampling twice from one state yields identical value and successor."""
    assert gen.run(rng) == gen.run(rng), name


@pytest.mark.parametrize("value", [0, "a", (1, 2), None, [3, 4]])
def test_unit_returns_value_and_same_state(value: object, rng: RNG) -> None:
    assert Gen.unit(value).run(rng) == (value, rng)


@pytest.mark.parametrize(("name", "gen"), _GENERATORS)
def test_map_identity(name: str, gen: Gen[object], rng: RNG) -> None:
    assert gen.map(lambda x: x).run(rng) == gen.run(rng), name


def test_samples_are_replayable(rng: RNG) -> None:
    gen = Gen.choose(0, 1000)
    assert sample_n(gen, rng, 50) == sample_n(gen, rng, 50)


# --------------------------------------------------------------------------- #
# choose / boolean / double                                                   #
# --------------------------------------------------------------------------- #


def test_choose_range_property() -> None:
    """For every valid ``lo < hi`` and seed, samples stay in ``[lo, hi)``."""
    bounds = Gen.choose(-1000, 1000).map2(Gen.choose(1, 500), lambda lo, span: (lo, lo + span))

    def in_range(case: tuple[tuple[int, int], int]) -> bool:
        (lo, hi), seed = case
        return all(lo <= v < hi for v in sample_n(Gen.choose(lo, hi), SimpleRNG(seed), 50))

    prop = for_all(bounds ** _SEED_GEN, in_range)
    expect_passed(prop.run(100, 200, SimpleRNG(7)))


def test_choose_single_value_range(rng: RNG) -> None:
    assert set(sample_n(Gen.choose(3, 4), rng, 20)) == {3}


def test_choose_covers_range(rng: RNG) -> None:
    assert set(sample_n(Gen.choose(0, 5), rng, 200)) == {0, 1, 2, 3, 4}


@pytest.mark.parametrize(("start", "stop"), [(0, 0), (5, 1), (-1, -2)])
def test_choose_invalid_range_raises(start: int, stop: int) -> None:
    with pytest.raises(InvalidRange) as excinfo:
        Gen.choose(start, stop)
    assert (excinfo.value.start, excinfo.value.stop_exclusive) == (start, stop)


def test_double_in_unit_interval(rng: RNG) -> None:
    values = np.array(sample_n(Gen.double(), rng, STATISTICAL_SAMPLES), dtype=np.float64)
    assert np.all((values >= 0.0) & (values < 1.0))


# --------------------------------------------------------------------------- #
# Combinators                                                                 #
# --------------------------------------------------------------------------- #


def test_flat_map_threads_state(rng: RNG) -> None:
    """The second generator samples from the first one's successor."""
    first = Gen.choose(1, 10)
    n, after_first = first.run(rng)
    expected = Gen.choose(0, 100).list_of_n(n).run(after_first)
    assert first.flat_map(lambda k: Gen.choose(0, 100).list_of_n(k)).run(rng) == expected


def test_map2_samples_self_first(rng: RNG) -> None:
    left, right = Gen.choose(0, 1000), Gen.double()
    a, after_left = left.run(rng)
    b, after_right = right.run(after_left)
    assert left.map2(right, lambda x, y: (x, y)).run(rng) == ((a, b), after_right)


def test_pow_pairs(rng: RNG) -> None:
    left, right = Gen.boolean(), Gen.choose(0, 10)
    assert (left**right).run(rng) == left.map2(right, lambda a, b: (a, b)).run(rng)


def test_list_of_n_length_property() -> None:
    """``list_of_n(n)`` always has exactly ``n`` elements."""

    def has_length(case: tuple[int, int]) -> bool:
        n, seed = case
        values, _ = Gen.choose(0, 10).list_of_n(n).run(SimpleRNG(seed))
        return len(values) == n

    prop = for_all(Gen.choose(0, 60) ** _SEED_GEN, has_length)
    expect_passed(prop.run(100, 100, SimpleRNG(11)))


def test_list_of_n_zero_is_empty(rng: RNG) -> None:
    assert Gen.double().list_of_n(0).run(rng) == ([], rng)


def test_list_of_n_negative_raises() -> None:
    with pytest.raises(NegativeCount):
        Gen.boolean().list_of_n(-1)


def test_list_of_n_dynamic_size(rng: RNG) -> None:
    lengths = {len(xs) for xs in sample_n(Gen.unit(0).list_of_n(Gen.choose(2, 5)), rng, 100)}
    assert lengths == {2, 3, 4}


def test_union_pulls_from_both(rng: RNG) -> None:
    values = set(sample_n(Gen.union(Gen.unit("a"), Gen.unit("b")), rng, 100))
    assert values == {"a", "b"}


def test_weighted_bias(rng: RNG) -> None:
    """Weights 3:1 select the first generator about 75% of the time."""
    gen = Gen.weighted((Gen.unit(1), 3.0), (Gen.unit(2), 1.0))
    values = np.array(sample_n(gen, rng, STATISTICAL_SAMPLES), dtype=np.int64)
    assert set(values.tolist()) <= {1, 2}
    assert abs(float(np.mean(values == 1)) - 0.75) < WEIGHTED_TOLERANCE


def test_weighted_uses_absolute_weights(rng: RNG) -> None:
    gen = Gen.weighted((Gen.unit(1), -1.0), (Gen.unit(2), 0.0))
    assert set(sample_n(gen, rng, 50)) == {1}


def test_weighted_zero_weights_raise() -> None:
    with pytest.raises(InvalidWeights):
        Gen.weighted((Gen.unit(1), 0.0), (Gen.unit(2), 0.0))


def test_unsized_ignores_size(rng: RNG) -> None:
    gen = Gen.choose(0, 100)
    sgen = gen.unsized()
    assert isinstance(sgen, SGen)
    assert all(sgen(size).run(rng) == gen.run(rng) for size in (0, 1, 50))


def test_gen_usable_in_property() -> None:
    prop = for_all(Gen.choose(0, 10), lambda x: 0 <= x < 10)
    assert prop.run(10, 50, SimpleRNG(3)) == Passed()
