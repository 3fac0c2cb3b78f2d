"""
Correctness tests for the seven sorts against the oracle (Python's built-in sorted).

What we check, for every algorithm in SORTS:
- Output exactly matches the oracle
- Nondecreasing order and permutation preservation (diagnostics)
- In-place sorts return the very object they were given
- merge_sort returns a new list and leaves its input alone
- Sorting sorted input is a no-op; all sorts agree with each other

Note:
- This file inserts the project `src/` onto sys.path so tests run without installing the package.
"""

from __future__ import annotations

import pathlib
import sys
from fractions import Fraction
from typing import Any, Callable, List

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from sortsearch import (
    IN_PLACE_SORTS,
    SORTS,
    InvalidInputError,
    bubble_sort,
    merge_sort,
    quick_sort,
    quick_sort_range,
    selection_sort,
)
from sortsearch.validate import (
    assert_no_mutation,
    first_nondecreasing_violation_index,
    is_permutation,
    oracle_sort,
)

ALL_SORTS = sorted(SORTS)


# ------------------------- helpers ------------------------- #

def _check_one(name: str, a: List[Any]) -> None:
    """Common assertion bundle for one input."""
    fn: Callable = SORTS[name]
    before = list(a)
    expected = oracle_sort(a)

    out = fn(a)

    assert list(out) == expected, f"{name}: output must exactly match the oracle"
    i = first_nondecreasing_violation_index(out)
    assert i is None, f"{name}: not nondecreasing at i={i}"
    assert is_permutation(before, out), f"{name}: output is not a permutation of input"

    if name in IN_PLACE_SORTS:
        assert out is a, f"{name}: in-place sort must return its argument"
    else:
        assert out is not a, f"{name}: must return a new sequence"
        assert_no_mutation(before, a)


# ------------------------- unit tests (deterministic) ------------------------- #

UNIT_CASES = [
    [],
    [5],
    [2, 1],
    [1, 2],
    [1, 2, 3, 4],
    [4, 3, 2, 1],
    [7, 7, 7, 7],
    [1, 3, 2, 3, 1, 2],
    list(range(20)),
    list(range(20))[::-1],
    [0, -1, 5, -10, 3, 3, 2],
    [2.5, -0.5, 2, 1.25, 2.5],
    [float("inf"), 0, float("-inf"), -1],
    [Fraction(1, 3), 0.25, 1, Fraction(1, 4)],
]


@pytest.mark.parametrize("name", ALL_SORTS)
@pytest.mark.parametrize("a", UNIT_CASES)
def test_unit_cases(name: str, a: List[Any]) -> None:
    _check_one(name, list(a))


def test_concrete_scenarios() -> None:
    assert selection_sort([5, 3, 8, 1]) == [1, 3, 5, 8]
    assert bubble_sort([]) == []
    assert merge_sort([2, 2, 1]) == [1, 2, 2]
    assert quick_sort([9, 1, 4, 1, 5]) == [1, 1, 4, 5, 9]


@pytest.mark.parametrize("name", ALL_SORTS)
def test_empty_and_singleton(name: str) -> None:
    assert list(SORTS[name]([])) == []
    assert list(SORTS[name]([42])) == [42]


@pytest.mark.parametrize("name", ALL_SORTS)
def test_sorted_input_unchanged(name: str) -> None:
    a = [-3, -3, 0, 1, 1, 2, 8, 13]
    assert list(SORTS[name](list(a))) == a


def test_merge_sort_accepts_tuple() -> None:
    t = (3, 1, 2)
    out = merge_sort(t)
    assert out == [1, 2, 3]
    assert isinstance(out, list)
    assert t == (3, 1, 2)


def test_merge_sort_singleton_is_new_list() -> None:
    a = [1]
    out = merge_sort(a)
    assert out == a and out is not a


@pytest.mark.parametrize("name", sorted(IN_PLACE_SORTS))
def test_in_place_sorts_reject_tuple(name: str) -> None:
    with pytest.raises(InvalidInputError):
        SORTS[name]((3, 1, 2))


@pytest.mark.parametrize("name", ALL_SORTS)
def test_numpy_arrays(name: str) -> None:
    arr = np.array([5, -2, 9, 0, 9, 3], dtype=np.int64)
    out = SORTS[name](arr)
    assert list(out) == [-2, 0, 3, 5, 9, 9]
    if name in IN_PLACE_SORTS:
        assert out is arr
    else:
        assert list(arr) == [5, -2, 9, 0, 9, 3]


# ------------------------- quick_sort_range ------------------------- #

def test_quick_sort_range_sorts_only_the_slice() -> None:
    a = [9, 8, 5, 3, 4, 1, 0]
    out = quick_sort_range(a, 2, 5)
    assert out is a
    assert a == [9, 8, 1, 3, 4, 5, 0]


def test_quick_sort_range_two_elements() -> None:
    assert quick_sort_range([2, 1], 0, 1) == [1, 2]
    assert quick_sort_range([1, 1], 0, 1) == [1, 1]


@pytest.mark.parametrize("low,high", [(3, 3), (4, 1)])
def test_quick_sort_range_empty_range_is_noop(low: int, high: int) -> None:
    a = [3, 2, 1, 0, -1]
    assert quick_sort_range(a, low, high) == [3, 2, 1, 0, -1]


@pytest.mark.parametrize("low,high", [(-1, 2), (0, 5), (1.0, 3), (True, 3)])
def test_quick_sort_range_bad_bounds(low: Any, high: Any) -> None:
    a = [3, 2, 1, 0, -1]
    with pytest.raises(InvalidInputError):
        quick_sort_range(a, low, high)
    assert a == [3, 2, 1, 0, -1]


def test_quick_sort_many_duplicates_terminates() -> None:
    a = [1, 0] * 500
    assert quick_sort(a) == [0] * 500 + [1] * 500


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-10_000, max_value=10_000)
finite_floats = st.floats(allow_nan=False, allow_infinity=False, width=64)


@pytest.mark.parametrize("name", ALL_SORTS)
@settings(deadline=None, max_examples=60)
@given(a=st.lists(small_ints, min_size=0, max_size=200))
def test_property_random_ints(name: str, a: List[int]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", ALL_SORTS)
@settings(deadline=None, max_examples=40)
@given(a=st.lists(st.integers(min_value=0, max_value=7), min_size=0, max_size=200))
def test_property_many_duplicates(name: str, a: List[int]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", ALL_SORTS)
@settings(deadline=None, max_examples=40)
@given(a=st.lists(finite_floats, min_size=0, max_size=100))
def test_property_floats(name: str, a: List[float]) -> None:
    _check_one(name, a)


@settings(deadline=None, max_examples=30)
@given(a=st.lists(small_ints, min_size=0, max_size=150))
def test_property_all_sorts_agree(a: List[int]) -> None:
    outputs = {name: list(SORTS[name](list(a))) for name in ALL_SORTS}
    reference = outputs["merge"]
    for name, out in outputs.items():
        assert out == reference, f"{name} disagrees with merge"


@pytest.mark.parametrize("n", [0, 1, 2, 3, 17, 256, 1000])
def test_all_sorts_agree_seeded(n: int) -> None:
    rng = np.random.default_rng(n)
    base = rng.integers(-500, 500, size=n).tolist()
    expected = sorted(base)
    for name in ALL_SORTS:
        assert list(SORTS[name](list(base))) == expected, name
