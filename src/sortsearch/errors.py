"""
Error types and sentinels shared by every algorithm.

Public API (stable):
    InvalidInputError   raised at the call boundary for malformed input
    NOT_FOUND           index returned by searches when the target is absent

Absence is a normal search outcome, so it is reported through NOT_FOUND and
never through an exception.
"""

from __future__ import annotations

__all__ = ["InvalidInputError", "NOT_FOUND"]

NOT_FOUND: int = -1


class InvalidInputError(ValueError):
    """Input is not a sequence of mutually comparable real numbers."""
