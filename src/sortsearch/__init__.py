"""
sortsearch: classic comparison sorts and positional searches.

    from sortsearch import quick_sort, binary_search
    data = quick_sort([9, 1, 4, 1, 5])     # sorted in place -> [1, 1, 4, 5, 9]
    binary_search(data, 4)                 # -> 2

Benchmarking lives in `sortsearch.bench`, dataset generation in
`sortsearch.datasets`, correctness helpers in `sortsearch.validate`.
"""

from .algorithms import (
    IN_PLACE_SORTS,
    SEARCHES,
    SORTED_INPUT_SEARCHES,
    SORTS,
    binary_search,
    bubble_sort,
    fibonacci_search,
    get_search,
    get_sort,
    heap_sort,
    insertion_sort,
    interpolation_search,
    linear_search,
    merge_sort,
    quick_sort,
    quick_sort_range,
    selection_sort,
    shell_sort,
)
from .errors import NOT_FOUND, InvalidInputError

__version__ = "0.1.0"

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
    "InvalidInputError",
    "NOT_FOUND",
]
