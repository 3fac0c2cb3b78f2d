"""
Validation utilities public API.

Re-exports:
    - Boundary checks (raise InvalidInputError):
        check_sequence
        check_target
        check_bounds

    - Oracles:
        ORACLE_NAME
        oracle_sort
        equals_oracle
        oracle_contains
        search_result_ok

    - Property checks:
        is_nondecreasing
        first_nondecreasing_violation_index
        is_permutation
        permutation_counter_diff
        assert_no_mutation
"""

from .inputs import check_bounds, check_sequence, check_target
from .oracle import (
    ORACLE_NAME,
    equals_oracle,
    oracle_contains,
    oracle_sort,
    search_result_ok,
)
from .properties import (
    assert_no_mutation,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    permutation_counter_diff,
)

__all__ = [
    "check_sequence",
    "check_target",
    "check_bounds",
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "oracle_contains",
    "search_result_ok",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
]
