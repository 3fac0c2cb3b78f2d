"""
Algorithms package public API.

Re-exports every sort and search function and provides name-based lookup
used by the benchmark runner:
    from sortsearch.algorithms import SORTS, get_sort
    get_sort("quick")([3, 1, 2])
"""

from typing import Callable, Dict, FrozenSet

from .searching import (
    binary_search,
    fibonacci_search,
    interpolation_search,
    linear_search,
)
from .sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    quick_sort_range,
    selection_sort,
    shell_sort,
)

SORTS: Dict[str, Callable] = {
    "selection": selection_sort,
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "shell": shell_sort,
    "quick": quick_sort,
    "heap": heap_sort,
}

SEARCHES: Dict[str, Callable] = {
    "linear": linear_search,
    "binary": binary_search,
    "interpolation": interpolation_search,
    "fibonacci": fibonacci_search,
}

IN_PLACE_SORTS: FrozenSet[str] = frozenset(SORTS) - {"merge"}
SORTED_INPUT_SEARCHES: FrozenSet[str] = frozenset(SEARCHES) - {"linear"}


def get_sort(name: str) -> Callable:
    try:
        return SORTS[name]
    except KeyError:
        raise KeyError(f"Unknown sort {name!r}. Supported: {sorted(SORTS)}") from None


def get_search(name: str) -> Callable:
    try:
        return SEARCHES[name]
    except KeyError:
        raise KeyError(f"Unknown search {name!r}. Supported: {sorted(SEARCHES)}") from None


__all__ = [
    "selection_sort",
    "bubble_sort",
    "insertion_sort",
    "merge_sort",
    "shell_sort",
    "quick_sort",
    "quick_sort_range",
    "heap_sort",
    "linear_search",
    "binary_search",
    "interpolation_search",
    "fibonacci_search",
    "SORTS",
    "SEARCHES",
    "IN_PLACE_SORTS",
    "SORTED_INPUT_SEARCHES",
    "get_sort",
    "get_search",
]
