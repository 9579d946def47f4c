"""propcheck: property-based testing with pure generators.

Build a :class:`Gen` (or a sized :class:`SGen`), bind it to a predicate with
:func:`for_all`, compose properties with ``&`` and ``|``, then run them:

    >>> from propcheck import Gen, SGen, for_all, run, RunConfig
    >>> ints = Gen.choose(0, 100)
    >>> reverse_twice = for_all(SGen.list_of(ints), lambda xs: xs[::-1][::-1] == xs)
    >>> run(reverse_twice, RunConfig(seed=42))
    Passed(kind='Passed')
"""

from propcheck.config import RunConfig
from propcheck.errors import (
    GenConfigurationError,
    InvalidMaxSize,
    InvalidRange,
    InvalidWeights,
    NegativeCount,
    NegativeSize,
    NegativeTestCases,
    PropcheckError,
    PropConfigurationError,
    PropertyFalsifiedError,
)
from propcheck.gen import Gen
from propcheck.prop import Prop, check, for_all, for_all_sized, for_all_sizes
from propcheck.result import Falsified, Passed, Proved, Result
from propcheck.rng import RNG, PhiloxRNG, SimpleRNG
from propcheck.runner import assert_property, format_result, run
from propcheck.sgen import SGen

__all__ = [
    # Generators
    "Gen",
    "SGen",
    # Properties
    "Prop",
    "for_all",
    "for_all_sizes",
    "for_all_sized",
    "check",
    # Results
    "Result",
    "Passed",
    "Proved",
    "Falsified",
    # RNG
    "RNG",
    "SimpleRNG",
    "PhiloxRNG",
    # Running
    "RunConfig",
    "run",
    "format_result",
    "assert_property",
    # Errors
    "PropcheckError",
    "GenConfigurationError",
    "InvalidRange",
    "InvalidWeights",
    "NegativeCount",
    "NegativeSize",
    "PropConfigurationError",
    "InvalidMaxSize",
    "NegativeTestCases",
    "PropertyFalsifiedError",
]
