"""
Property helpers for checking sort outputs.

Used by the test-suite and by the benchmark runner's per-size sanity check.
They work on any sequence of mutually comparable numbers, including 1-D
numpy arrays.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_no_mutation(before, after) -> None

Stability is not covered: equal numbers are indistinguishable by value, and
this package does not accept keyed or tagged elements.
"""

from __future__ import annotations

from collections import Counter
from numbers import Real
from typing import Dict, Optional, Sequence

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
]


def first_nondecreasing_violation_index(xs: Sequence[Real]) -> Optional[int]:
    """
    First index i with xs[i] > xs[i+1], or None when xs is nondecreasing.

        i = first_nondecreasing_violation_index(out)
        assert i is None, f"order broken at {i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_nondecreasing(xs: Sequence[Real]) -> bool:
    """True iff xs[i] <= xs[i+1] for every adjacent pair."""
    return first_nondecreasing_violation_index(xs) is None


def permutation_counter_diff(a: Sequence[Real], b: Sequence[Real]) -> Dict[Real, int]:
    """
    Multiplicity difference count_a(v) - count_b(v) for every v that differs.

    Empty dict means `a` and `b` are the same multiset. Positive counts are
    extra copies in `a`, negative ones extra copies in `b`.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {value: count for value, count in diff.items() if count != 0}


def is_permutation(a: Sequence[Real], b: Sequence[Real]) -> bool:
    """True iff `a` and `b` hold the same values with the same multiplicities."""
    return len(a) == len(b) and not permutation_counter_diff(a, b)


def assert_no_mutation(before: Sequence[Real], after: Sequence[Real]) -> None:
    """
    Raise AssertionError naming the first difference between two snapshots.

    Used to confirm that allocating algorithms (merge sort) and searches
    leave the caller's data alone.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x}, after={y}")
