"""
Ground-truth oracles for sort and search results.

Sorting: Python's built-in `sorted()` (Timsort) is the reference. It is
deterministic and gives the one correct nondecreasing arrangement of a
multiset, so every sort in this package must match it element-wise.

Searching: there is no single correct index when duplicates exist, so search
results are judged by `search_result_ok`: the index must hold the target, or
be NOT_FOUND exactly when the target is absent.

Public API (stable):
    oracle_sort(a) -> list
    equals_oracle(a, out) -> bool
    oracle_contains(a, target) -> bool
    search_result_ok(a, target, idx) -> bool
"""

from __future__ import annotations

from bisect import bisect_left
from numbers import Real
from typing import List, Sequence

from sortsearch.errors import NOT_FOUND

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "oracle_contains",
    "search_result_ok",
]


def oracle_sort(a: Sequence[Real]) -> List[Real]:
    """Return a new sorted list; `a` is left as is."""
    return sorted(a)


def equals_oracle(a: Sequence[Real], out: Sequence[Real]) -> bool:
    """
    True iff `out` equals `oracle_sort(a)` element-wise.

    `out` may be any sequence (list, tuple, 1-D numpy array); it is compared
    as a list so numpy's element-wise `==` does not get in the way.
    """
    return list(out) == oracle_sort(a)


def oracle_contains(a: Sequence[Real], target: Real, *, assume_sorted: bool = False) -> bool:
    """
    Membership test for `target` in `a`.

    With assume_sorted=True, uses bisection (O(log n)); otherwise a scan.
    """
    if assume_sorted:
        i = bisect_left(a, target)
        return i < len(a) and a[i] == target
    return any(x == target for x in a)


def search_result_ok(a: Sequence[Real], target: Real, idx: int) -> bool:
    """
    Check a search result against `a`.

    Returns True iff either
      - idx is a valid position and a[idx] == target, or
      - idx == NOT_FOUND and target does not occur in `a`.
    """
    if idx == NOT_FOUND:
        return not oracle_contains(a, target)
    return 0 <= idx < len(a) and a[idx] == target
