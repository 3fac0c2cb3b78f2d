"""
Correctness tests for the four searches.

What we check:
- Concrete scenarios and NOT_FOUND on absence (never an exception)
- On sorted input, every search returns a position holding the target, and
  agrees with linear_search on presence
- Unsorted input never crashes the sorted-input searches
- Searches never mutate their input
"""

from __future__ import annotations

import pathlib
import sys
from fractions import Fraction
from typing import Any, List

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from sortsearch import (
    NOT_FOUND,
    SEARCHES,
    SORTED_INPUT_SEARCHES,
    InvalidInputError,
    binary_search,
    fibonacci_search,
    interpolation_search,
    linear_search,
)
from sortsearch.validate import search_result_ok

ALL_SEARCHES = sorted(SEARCHES)
SORTED_SEARCHES = sorted(SORTED_INPUT_SEARCHES)


# ------------------------- unit tests (deterministic) ------------------------- #

def test_concrete_scenarios() -> None:
    assert binary_search([1, 3, 5, 7, 9], 7) == 3
    assert linear_search([4, 2, 9], 5) == -1
    assert interpolation_search([10, 20, 30, 40, 50], 40) == 3
    assert fibonacci_search([1, 2, 3, 5, 8, 13, 21], 13) == 5


def test_not_found_is_minus_one() -> None:
    assert NOT_FOUND == -1


@pytest.mark.parametrize("name", ALL_SEARCHES)
def test_empty_sequence(name: str) -> None:
    assert SEARCHES[name]([], 1) == NOT_FOUND


@pytest.mark.parametrize("name", ALL_SEARCHES)
def test_single_element(name: str) -> None:
    assert SEARCHES[name]([4], 4) == 0
    assert SEARCHES[name]([4], 3) == NOT_FOUND
    assert SEARCHES[name]([4], 5) == NOT_FOUND


@pytest.mark.parametrize("name", ALL_SEARCHES)
@pytest.mark.parametrize("n", list(range(0, 35)))
def test_every_position_of_unique_values(name: str, n: int) -> None:
    # Evens are present at index value // 2, odds never are.
    seq = list(range(0, 2 * n, 2))
    fn = SEARCHES[name]
    for idx, value in enumerate(seq):
        assert fn(seq, value) == idx
    for odd in range(-1, 2 * n + 2, 2):
        assert fn(seq, odd) == NOT_FOUND


def test_linear_search_returns_first_match() -> None:
    assert linear_search([3, 1, 3, 1], 1) == 1


@pytest.mark.parametrize("name", ALL_SEARCHES)
def test_duplicates_return_a_matching_index(name: str) -> None:
    seq = [1, 2, 2, 2, 2, 3, 9, 9]
    for target in (2, 9, 1, 3):
        idx = SEARCHES[name](seq, target)
        assert seq[idx] == target


def test_interpolation_equal_bounds() -> None:
    assert interpolation_search([5, 5, 5, 5], 5) == 0
    assert interpolation_search([5, 5, 5, 5], 4) == NOT_FOUND
    assert interpolation_search([5, 5, 5, 5], 6) == NOT_FOUND


def test_interpolation_run_of_equal_values_inside_window() -> None:
    seq = [1, 7, 7, 7, 7, 7, 20]
    assert seq[interpolation_search(seq, 7)] == 7
    assert interpolation_search(seq, 8) == NOT_FOUND


def test_interpolation_mixed_numeric_types() -> None:
    seq = [Fraction(1, 2), 1, 1.5, 2, Fraction(5, 2)]
    assert interpolation_search(seq, 1.5) == 2
    assert interpolation_search(seq, Fraction(5, 2)) == 4
    assert interpolation_search(seq, 1.75) == NOT_FOUND


def test_interpolation_infinite_bounds() -> None:
    inf = float("inf")
    seq = [-inf, -3.0, 0.0, 2.5, inf]
    assert interpolation_search(seq, 2.5) == 3
    assert interpolation_search(seq, inf) == 4
    assert interpolation_search(seq, -inf) == 0
    assert interpolation_search(seq, 1.0) == NOT_FOUND


def test_interpolation_ints_too_large_for_float() -> None:
    assert interpolation_search([0, 10**400], 1.5) == NOT_FOUND
    assert interpolation_search([0.5, 10**400], 3) == NOT_FOUND
    seq = [0.5, 2, 10**300, 10**400]
    assert interpolation_search(seq, 10**300) == 2
    assert interpolation_search(seq, 10**400) == 3
    assert interpolation_search(seq, 2.0) == 1


def test_interpolation_large_numpy_integers() -> None:
    arr = np.array([0, 2**40, 2**50, 2**62], dtype=np.int64)
    assert interpolation_search(arr, 2**50) == 2
    assert interpolation_search(arr, 2**62) == 3
    assert interpolation_search(arr, 2**61) == NOT_FOUND


@pytest.mark.parametrize("name", ALL_SEARCHES)
def test_numpy_float_array(name: str) -> None:
    arr = np.linspace(0.0, 1.0, 11)
    assert SEARCHES[name](arr, arr[7]) == 7
    assert SEARCHES[name](arr, 0.05) == NOT_FOUND


@pytest.mark.parametrize("name", ALL_SEARCHES)
def test_tuple_input(name: str) -> None:
    assert SEARCHES[name]((1, 4, 9, 16), 9) == 2


@pytest.mark.parametrize("name", ALL_SEARCHES)
@pytest.mark.parametrize("target", [None, "3", float("nan"), True, 1 + 2j])
def test_invalid_target(name: str, target: Any) -> None:
    with pytest.raises(InvalidInputError):
        SEARCHES[name]([1, 2, 3], target)


@pytest.mark.parametrize("name", ALL_SEARCHES)
def test_invalid_sequence(name: str) -> None:
    with pytest.raises(InvalidInputError):
        SEARCHES[name]("123", 1)
    with pytest.raises(InvalidInputError):
        SEARCHES[name]([1, "2", 3], 1)


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-200, max_value=200)


@pytest.mark.parametrize("name", ALL_SEARCHES)
@settings(deadline=None, max_examples=150)
@given(a=st.lists(small_ints, min_size=0, max_size=120), target=small_ints)
def test_property_sorted_input(name: str, a: List[int], target: int) -> None:
    a.sort()
    before = list(a)
    idx = SEARCHES[name](a, target)

    assert a == before, "search must not mutate its input"
    assert search_result_ok(a, target, idx)
    assert (idx == NOT_FOUND) == (linear_search(a, target) == NOT_FOUND)


@pytest.mark.parametrize("name", SORTED_SEARCHES)
@settings(deadline=None, max_examples=100)
@given(
    a=st.lists(st.floats(allow_nan=False, allow_infinity=False, min_value=-1e6, max_value=1e6),
               min_size=0, max_size=80),
    data=st.data(),
)
def test_property_sorted_floats(name: str, a: List[float], data: st.DataObject) -> None:
    a.sort()
    if a and data.draw(st.booleans()):
        target = data.draw(st.sampled_from(a))
    else:
        target = data.draw(st.floats(allow_nan=False, allow_infinity=False))
    idx = SEARCHES[name](a, target)
    assert search_result_ok(a, target, idx)


@pytest.mark.parametrize("name", SORTED_SEARCHES)
@settings(deadline=None, max_examples=100)
@given(a=st.lists(small_ints, min_size=0, max_size=60), target=small_ints)
def test_property_unsorted_input_does_not_crash(name: str, a: List[int], target: int) -> None:
    idx = SEARCHES[name](a, target)
    assert isinstance(idx, int)
    assert idx == NOT_FOUND or a[idx] == target
