# src/propcheck/errors.py
"""Exception hierarchy for generator and property configuration errors.

Only API misuse is raised. A property that does not hold is reported as
:class:`propcheck.result.Falsified` data, never as an exception.
"""

from __future__ import annotations

from propcheck.result import Falsified


class PropcheckError(Exception):
    """Base exception for all propcheck configuration errors."""

    pass


class GenConfigurationError(PropcheckError):
    """A generator was built or applied with invalid parameters."""

    pass


class InvalidRange(GenConfigurationError):
    """``choose`` was given an empty or inverted interval."""

    def __init__(self, start: int, stop_exclusive: int) -> None:
        self.start = start
        self.stop_exclusive = stop_exclusive
        super().__init__(
            f"Invalid range: stop_exclusive ({stop_exclusive}) must be greater "
            f"than start ({start})"
        )


class InvalidWeights(GenConfigurationError):
    """``weighted`` was given weights whose absolute sum is zero."""

    def __init__(self, first: float, second: float) -> None:
        self.first = first
        self.second = second
        super().__init__(f"Invalid weights: |{first}| + |{second}| must be non-zero")


class NegativeCount(GenConfigurationError):
    """``list_of_n`` was asked for a negative number of elements."""

    def __init__(self, n: int) -> None:
        self.n = n
        super().__init__(f"List length must be non-negative, got {n}")


class NegativeSize(GenConfigurationError):
    """A sized generator was applied to a negative size."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"Size must be non-negative, got {size}")


class PropConfigurationError(PropcheckError):
    """A property was run with invalid run parameters."""

    pass


class InvalidMaxSize(PropConfigurationError):
    """Sized properties need at least one size to spread test cases over."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        super().__init__(f"max_size must be at least 1, got {max_size}")


class NegativeTestCases(PropConfigurationError):
    """Requested a negative number of test cases."""

    def __init__(self, test_cases: int) -> None:
        self.test_cases = test_cases
        super().__init__(f"test_cases must be non-negative, got {test_cases}")


class PropertyFalsifiedError(AssertionError):
    """Raised by :func:`propcheck.runner.assert_property` on falsification."""

    def __init__(self, result: Falsified, message: str) -> None:
        self.result = result
        super().__init__(message)


__all__ = [
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
