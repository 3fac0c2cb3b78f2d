"""
Boundary checks for algorithm inputs.

Every public sort/search function calls one of these before touching the
caller's data, so a rejected input is never partially reordered.

Accepted sequences:
- any `collections.abc.Sequence` except str/bytes/bytearray
  (in-place sorts additionally need a `MutableSequence`)
- 1-D numpy arrays with an integer or floating dtype

Accepted elements and targets:
- real numbers (`numbers.Real`: int, float, Fraction, numpy int/float scalars)
- bool is rejected, and so is NaN (it has no place in a total order)

Public API (stable):
    check_sequence(seq, *, mutable: bool) -> None
    check_target(target) -> None
    check_bounds(seq, low, high) -> None
"""

from __future__ import annotations

import math
import numbers
from collections.abc import MutableSequence, Sequence
from typing import Any

import numpy as np

from sortsearch.errors import InvalidInputError

__all__ = ["check_sequence", "check_target", "check_bounds"]

_TEXT_TYPES = (str, bytes, bytearray)


def check_sequence(seq: Any, *, mutable: bool) -> None:
    """
    Raise InvalidInputError unless `seq` is a sequence of real numbers.

    Parameters
    ----------
    seq : Any
        Candidate input.
    mutable : bool
        If True, `seq` must also support item assignment (in-place sorts).
    """
    if isinstance(seq, np.ndarray):
        _check_array(seq)
        if mutable and not seq.flags.writeable:
            raise InvalidInputError("in-place sort needs a writeable array")
        return

    if isinstance(seq, _TEXT_TYPES) or not isinstance(seq, Sequence):
        raise InvalidInputError(
            f"expected a sequence of real numbers, got {type(seq).__name__}"
        )
    if mutable and not isinstance(seq, MutableSequence):
        raise InvalidInputError(
            f"in-place sort needs a mutable sequence, got {type(seq).__name__}"
        )

    for i, x in enumerate(seq):
        reason = _reject_reason(x)
        if reason is not None:
            raise InvalidInputError(f"element at index {i} ({x!r}) {reason}")


def check_target(target: Any) -> None:
    """Raise InvalidInputError unless `target` is a real, non-NaN number."""
    reason = _reject_reason(target)
    if reason is not None:
        raise InvalidInputError(f"search target {target!r} {reason}")


def check_bounds(seq: Any, low: Any, high: Any) -> None:
    """
    Validate an inclusive index range [low, high] into `seq`.

    low >= high is allowed (an empty or one-element range); otherwise both
    ends must lie inside the sequence.
    """
    for name, v in (("low", low), ("high", high)):
        if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
            raise InvalidInputError(f"{name} must be an int; got {v!r}")
    low, high = int(low), int(high)
    if low >= high:
        return
    if low < 0 or high >= len(seq):
        raise InvalidInputError(
            f"range [{low}, {high}] out of bounds for length {len(seq)}"
        )


# ------------------------- helpers ------------------------- #


def _check_array(arr: np.ndarray) -> None:
    if arr.ndim != 1:
        raise InvalidInputError(f"expected a 1-D array, got ndim={arr.ndim}")
    kind = arr.dtype.kind
    if kind not in "iuf":
        raise InvalidInputError(f"array dtype {arr.dtype} is not a real numeric type")
    if kind == "f" and bool(np.isnan(arr).any()):
        first = int(np.flatnonzero(np.isnan(arr))[0])
        raise InvalidInputError(f"element at index {first} is NaN")


def _reject_reason(x: Any) -> str | None:
    # np.bool_ is not registered as numbers.Real, plain bool is
    if isinstance(x, (bool, np.bool_)):
        return "is a bool, not a number"
    if not isinstance(x, numbers.Real):
        return "is not a real number"
    if isinstance(x, (float, np.floating)) and math.isnan(x):
        return "is NaN"
    return None
