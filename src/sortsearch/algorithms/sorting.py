"""
Comparison sorts over sequences of real numbers.

Every function validates its input first (see `sortsearch.validate.inputs`)
and raises InvalidInputError before any element moves.

In-place (mutate and return the caller's buffer):
    selection_sort, bubble_sort, insertion_sort, shell_sort,
    quick_sort / quick_sort_range, heap_sort

Allocating (never mutates, always returns a new list):
    merge_sort

Callers may rely on either behavior; the split is part of the API.
"""

from __future__ import annotations

from typing import Any, List, MutableSequence, Sequence

from sortsearch.validate.inputs import check_bounds, check_sequence

__all__ = [
    "selection_sort",
    "bubble_sort",
    "insertion_sort",
    "merge_sort",
    "shell_sort",
    "quick_sort",
    "quick_sort_range",
    "heap_sort",
]


def selection_sort(seq: MutableSequence[Any]) -> MutableSequence[Any]:
    """Selection sort, in place. Exactly n-1 passes; not stable."""
    check_sequence(seq, mutable=True)
    n = len(seq)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            if seq[j] < seq[min_idx]:
                min_idx = j
        if min_idx != i:
            seq[i], seq[min_idx] = seq[min_idx], seq[i]
    return seq


def bubble_sort(seq: MutableSequence[Any]) -> MutableSequence[Any]:
    """
    Bubble sort, in place and stable.

    Stops after the first pass that performs no swap, so sorted input costs a
    single O(n) pass. Each pass also parks the largest remaining element at
    the end, so the scanned prefix shrinks by one.
    """
    check_sequence(seq, mutable=True)
    end = len(seq) - 1
    swapped = True
    while swapped and end > 0:
        swapped = False
        for i in range(end):
            if seq[i] > seq[i + 1]:
                seq[i], seq[i + 1] = seq[i + 1], seq[i]
                swapped = True
        end -= 1
    return seq


def insertion_sort(seq: MutableSequence[Any]) -> MutableSequence[Any]:
    """Insertion sort, in place and stable (shifts larger items right)."""
    check_sequence(seq, mutable=True)
    for i in range(1, len(seq)):
        key = seq[i]
        j = i - 1
        while j >= 0 and seq[j] > key:
            seq[j + 1] = seq[j]
            j -= 1
        seq[j + 1] = key
    return seq


def merge_sort(seq: Sequence[Any]) -> List[Any]:
    """
    Top-down merge sort. Stable; returns a new list and leaves `seq` untouched.

    Accepts immutable sequences (e.g. tuples) since nothing is written back.
    """
    check_sequence(seq, mutable=False)
    return _merge_sort(list(seq))


def shell_sort(seq: MutableSequence[Any]) -> MutableSequence[Any]:
    """Shell sort with gaps n//2, n//4, ..., 1. In place, not stable."""
    check_sequence(seq, mutable=True)
    n = len(seq)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = seq[i]
            j = i
            while j >= gap and seq[j - gap] > temp:
                seq[j] = seq[j - gap]
                j -= gap
            seq[j] = temp
        gap //= 2
    return seq


def quick_sort(seq: MutableSequence[Any]) -> MutableSequence[Any]:
    """Quick sort over the whole sequence. See `quick_sort_range`."""
    check_sequence(seq, mutable=True)
    _quick_sort(seq, 0, len(seq) - 1)
    return seq


def quick_sort_range(seq: MutableSequence[Any], low: int, high: int) -> MutableSequence[Any]:
    """
    Quick sort of the inclusive slice seq[low..high], in place.

    Pivot is the value at the midpoint index; partitioning is a Hoare-style
    two-pointer scan returning split index i, and the two halves are
    [low, i-1] and [i, high]. Elements outside the range are not touched.

    Parameters
    ----------
    seq : MutableSequence
        Buffer to sort.
    low, high : int
        Inclusive bounds. low >= high is a no-op.

    Returns
    -------
    The same `seq` object.
    """
    check_sequence(seq, mutable=True)
    check_bounds(seq, low, high)
    _quick_sort(seq, int(low), int(high))
    return seq


def heap_sort(seq: MutableSequence[Any]) -> MutableSequence[Any]:
    """Heap sort: bottom-up max-heap build, then repeated root extraction."""
    check_sequence(seq, mutable=True)
    n = len(seq)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(seq, n, i)
    for end in range(n - 1, 0, -1):
        seq[0], seq[end] = seq[end], seq[0]
        _sift_down(seq, end, 0)
    return seq


# ------------------------- helpers ------------------------- #


def _merge_sort(items: List[Any]) -> List[Any]:
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(_merge_sort(items[:mid]), _merge_sort(items[mid:]))


def _merge(left: List[Any], right: List[Any]) -> List[Any]:
    """Merge two sorted runs; on ties the left run goes first (stability)."""
    out: List[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            out.append(left[i])
            i += 1
        else:
            out.append(right[j])
            j += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out


def _quick_sort(seq: MutableSequence[Any], low: int, high: int) -> None:
    # Pending ranges live on an explicit stack instead of the call stack.
    stack = [(low, high)]
    while stack:
        lo, hi = stack.pop()
        if lo >= hi:
            continue
        index = _partition(seq, lo, hi)
        if lo < index - 1:
            stack.append((lo, index - 1))
        if index < hi:
            stack.append((index, hi))


def _partition(seq: MutableSequence[Any], low: int, high: int) -> int:
    """
    Hoare-style partition around the midpoint value.

    Returns i such that seq[low..i-1] <= pivot <= seq[i..high]. Both scans
    stop at the pivot value at the latest, so neither runs off the range.
    """
    pivot = seq[(low + high) // 2]
    i, j = low, high
    while i <= j:
        while seq[i] < pivot:
            i += 1
        while seq[j] > pivot:
            j -= 1
        if i <= j:
            seq[i], seq[j] = seq[j], seq[i]
            i += 1
            j -= 1
    return i


def _sift_down(seq: MutableSequence[Any], size: int, root: int) -> None:
    """Restore the max-heap property below `root` within seq[:size]."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and seq[left] > seq[largest]:
            largest = left
        if right < size and seq[right] > seq[largest]:
            largest = right
        if largest == root:
            return
        seq[root], seq[largest] = seq[largest], seq[root]
        root = largest
