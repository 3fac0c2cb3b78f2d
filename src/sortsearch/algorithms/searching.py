"""
Positional search over sequences of real numbers.

All four functions return the index of a matching element, or NOT_FOUND (-1)
when the target is absent. Absence never raises; malformed input raises
InvalidInputError before the search starts.

Preconditions:
- linear_search: none
- binary_search, interpolation_search, fibonacci_search: `seq` sorted
  ascending. Unsorted input gives an unspecified index or NOT_FOUND, never
  an exception.

With duplicates, the index returned is *a* matching position; only
linear_search promises the first one.
"""

from __future__ import annotations

import math
from typing import Any, Sequence

from sortsearch.errors import NOT_FOUND
from sortsearch.validate.inputs import check_sequence, check_target

__all__ = [
    "linear_search",
    "binary_search",
    "interpolation_search",
    "fibonacci_search",
]


def linear_search(seq: Sequence[Any], target: Any) -> int:
    """Return the first index holding `target`, else NOT_FOUND. O(n)."""
    check_sequence(seq, mutable=False)
    check_target(target)
    for i, value in enumerate(seq):
        if value == target:
            return i
    return NOT_FOUND


def binary_search(seq: Sequence[Any], target: Any) -> int:
    """Iterative binary search on an ascending sequence. O(log n)."""
    check_sequence(seq, mutable=False)
    check_target(target)
    low, high = 0, len(seq) - 1
    while low <= high:
        mid = (low + high) // 2
        value = seq[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def interpolation_search(seq: Sequence[Any], target: Any) -> int:
    """
    Interpolation search on an ascending sequence.

    The probe is placed by linear interpolation between the values at the
    current bounds, which averages O(log log n) probes on evenly spread
    values and degrades to O(n) otherwise. The loop only runs while the
    target lies inside [seq[low], seq[high]].

    When both bounds hold the same value the interpolation denominator is
    zero; that window is then answered by a single equality check.
    """
    check_sequence(seq, mutable=False)
    check_target(target)
    target = _scalar(target)
    low, high = 0, len(seq) - 1
    while low <= high:
        lo_val, hi_val = _scalar(seq[low]), _scalar(seq[high])
        if not lo_val <= target <= hi_val:
            break
        if lo_val == hi_val:
            return low if lo_val == target else NOT_FOUND

        pos = _probe(low, high, lo_val, hi_val, target)
        value = seq[pos]
        if value == target:
            return pos
        if value < target:
            low = pos + 1
        else:
            high = pos - 1
    return NOT_FOUND


def fibonacci_search(seq: Sequence[Any], target: Any) -> int:
    """
    Fibonacci search on an ascending sequence. O(log n), no division.

    The window size is tracked as three consecutive Fibonacci numbers
    fm2 <= fm1 <= fm (fm = fm1 + fm2). Each probe sits fm2 past `offset`,
    the last index known to hold a value below the target. Moving right
    shrinks the window by one Fibonacci step, moving left by two. Once the
    window is down to one element the main loop can no longer probe it, so
    the position right after `offset` is checked separately.
    """
    check_sequence(seq, mutable=False)
    check_target(target)
    n = len(seq)
    if n == 0:
        return NOT_FOUND

    fm2, fm1 = 0, 1
    fm = fm1 + fm2
    while fm < n:
        fm2, fm1 = fm1, fm
        fm = fm1 + fm2

    offset = -1
    while fm > 1:
        # fm > 1 implies fm2 >= 1, so i > offset
        i = min(offset + fm2, n - 1)
        value = seq[i]
        if value < target:
            fm, fm1 = fm1, fm2
            fm2 = fm - fm1
            offset = i
        elif value > target:
            fm = fm2
            fm1 = fm1 - fm2
            fm2 = fm - fm1
        else:
            return i

    if fm1 and offset + 1 < n and seq[offset + 1] == target:
        return offset + 1
    return NOT_FOUND


def _probe(low: int, high: int, lo_val: Any, hi_val: Any, target: Any) -> int:
    """Interpolated index in [low, high]; requires lo_val <= target <= hi_val, lo_val < hi_val."""
    try:
        step = (target - lo_val) * (high - low) // (hi_val - lo_val)
    except OverflowError:
        # int too large for a float, mixed with a float
        return (low + high) // 2
    if isinstance(step, float) and not math.isfinite(step):
        # infinite bounds give inf/inf; fall back to a bisection probe
        return (low + high) // 2
    return low + int(step)


def _scalar(x: Any) -> Any:
    # numpy scalars -> Python numbers, so probe arithmetic cannot overflow
    item = getattr(x, "item", None)
    return item() if callable(item) else x
