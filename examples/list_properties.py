#!/usr/bin/env python3
"""
List properties example.

Demonstrates:
- Building sized list generators
- Composing properties with & and |
- Proving a fixed statement with check
- Replaying a failure from its seed

Run directly, or one property at a time through the CLI:

    python -m propcheck examples.list_properties:max_is_upper_bound --seed 1
"""

from __future__ import annotations

from propcheck import Gen, RunConfig, SGen, check, for_all, format_result, run

small_ints = Gen.choose(-10, 10)
int_lists = SGen.list_of(small_ints)
non_empty_int_lists = SGen.non_empty_list_of(small_ints)

reverse_twice = for_all(int_lists, lambda xs: list(reversed(list(reversed(xs)))) == xs).tag(
    "reverse is an involution"
)

reverse_once = for_all(int_lists, lambda xs: list(reversed(xs)) == xs).tag(
    "reverse is the identity"
)

max_is_upper_bound = for_all(non_empty_int_lists, lambda xs: all(x <= max(xs) for x in xs))

# Sorting is idempotent and yields a non-decreasing list.
sorted_is_ordered = for_all(
    int_lists, lambda xs: all(a <= b for a, b in zip(sorted(xs), sorted(xs)[1:]))
) & for_all(int_lists, lambda xs: sorted(sorted(xs)) == sorted(xs))

# Biased toward short lists, but long ones still appear.
mostly_short = Gen.weighted(
    (small_ints.list_of_n(Gen.choose(0, 3)), 3.0),
    (small_ints.list_of_n(Gen.choose(10, 20)), 1.0),
)
sum_is_order_independent = for_all(mostly_short, lambda xs: sum(xs) == sum(reversed(xs)))

addition_commutes = check(lambda: 2 + 3 == 3 + 2)

either_reverse = reverse_once | reverse_twice


def main() -> None:
    """Run every example property with a fixed seed and print the reports."""
    config = RunConfig(seed=42, max_size=50, test_cases=100)
    for name, prop in [
        ("reverse_twice", reverse_twice),
        ("reverse_once", reverse_once),
        ("max_is_upper_bound", max_is_upper_bound),
        ("sorted_is_ordered", sorted_is_ordered),
        ("sum_is_order_independent", sum_is_order_independent),
        ("addition_commutes", addition_commutes),
        ("either_reverse", either_reverse),
    ]:
        print(f"{name}: {format_result(run(prop, config), config.test_cases)}")


if __name__ == "__main__":
    main()
