"""Properties loaded by name in the CLI tests."""

from __future__ import annotations

from propcheck.gen import Gen
from propcheck.prop import check, for_all
from propcheck.sgen import SGen

int_lists = SGen.list_of(Gen.choose(0, 100))

reverse_twice = for_all(int_lists, lambda xs: list(reversed(list(reversed(xs)))) == xs)
reverse_once = for_all(int_lists, lambda xs: list(reversed(xs)) == xs)
addition_commutes = check(lambda: 2 + 3 == 3 + 2)

not_a_prop = 42
division_by_zero = check(lambda: 1 // 0 == 0)
