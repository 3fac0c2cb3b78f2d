"""
Dataset and query generators for sort/search benchmarks and tests.

Distributions (spec["dist"]):
- "random":        integers uniform over params["range"] (inclusive, required)
- "nearly_sorted": [0..n-1] with ceil(swap_frac * n) random index swaps
- "few_uniques":   at most k distinct integers from an optional inclusive
                   range (default [0, 4294967295]), sampled with repetition
- "small_range":   integers in a small inclusive domain, default [0, 255];
                   set via min_val/max_val or "range"
- "reversed":      [n-1, ..., 0]; ignores params and RNG
- "sorted":        "random" followed by an ascending sort; input for the
                   sorted-input searches
- "uniform_float": floats uniform over the half-open params["range"] [lo, hi)

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list
    make_queries(a: list, count: int, hit_frac: float, rng) -> list

Conventions:
- Results are plain Python lists of Python ints/floats; algorithms never
  see numpy types unless a caller passes arrays in directly.
- The caller owns and seeds the RNG, so a run is reproducible end to end.
- Invalid specs raise ValueError.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset", "make_queries"]

_FEW_UNIQUES_DEFAULT_RANGE = (0, 4294967295)
_SMALL_RANGE_DEFAULT = (0, 255)


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[Any]:
    """
    Build a length-`n` dataset according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements. Must be >= 0.
    spec : dict
        {"dist": <name>, "params": {...}}; see the module docstring.
        Examples:
            {"dist": "random", "params": {"range": [0, 1000]}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "few_uniques", "params": {"k": 10}}
            {"dist": "uniform_float", "params": {"range": [0.0, 1.0]}}
    rng : numpy.random.Generator
        Caller-owned generator.

    Returns
    -------
    list
        `n` Python numbers.

    Raises
    ------
    ValueError
        On a bad `n`, an unknown dist, or malformed params.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    builder = _BUILDERS.get(dist)
    if builder is None:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return builder(n, params, rng)


def make_queries(
    a: List[Any], count: int, hit_frac: float, rng: np.random.Generator
) -> List[Any]:
    """
    Build `count` search targets for dataset `a`.

    round(hit_frac * count) targets are drawn from `a` (hits); the rest are
    values guaranteed absent from `a` (misses), placed just above the largest
    finite value of `a`.
    Order is shuffled. With an empty `a` every query is a miss.
    """
    if not isinstance(count, int) or count < 0:
        raise ValueError(f"count must be a nonnegative int; got {count!r}")
    if not 0.0 <= float(hit_frac) <= 1.0:
        raise ValueError(f"hit_frac must be in [0.0, 1.0]; got {hit_frac!r}")

    hits = int(round(hit_frac * count)) if a else 0
    out: List[Any] = []
    if hits:
        idxs = rng.integers(0, len(a), size=hits)
        out.extend(a[int(i)] for i in idxs)

    # misses sit above the largest finite value; infinities are skipped
    finite = [x for x in a if x != math.inf and x != -math.inf]
    top = max(finite) if finite else 0
    out.extend(top + 1 + k for k in range(count - hits))
    rng.shuffle(out)
    return out


# ------------------------- builders ------------------------- #


def _random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    lo, hi = _parse_range(params, "random", default=None)
    if n == 0:
        return []
    # Generator.integers is half-open; +1 makes hi inclusive.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    out = _random(n, params, rng)
    out.sort()
    return out


def _nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    swap_frac = _parse_fraction(params, "swap_frac", default=0.05)
    out = list(range(n))
    num_swaps = int(np.ceil(swap_frac * n))
    if n == 0 or num_swaps == 0:
        return out
    pairs = rng.integers(0, n, size=(num_swaps, 2))
    for i, j in pairs.tolist():
        # i == j is a no-op, so the effective swap count may be lower
        out[i], out[j] = out[j], out[i]
    return out


def _few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params, "few_uniques", default=_FEW_UNIQUES_DEFAULT_RANGE)
    if n == 0:
        return []

    actual_k = min(k, n, hi - lo + 1)
    # Draw through `rng` (not random.sample) so the result depends on the seed only.
    pool: List[int] = []
    seen = set()
    while len(pool) < actual_k:
        for v in rng.integers(lo, hi + 1, size=2 * (actual_k - len(pool))).tolist():
            if v not in seen:
                seen.add(v)
                pool.append(v)
                if len(pool) == actual_k:
                    break
    return [pool[i] for i in rng.integers(0, actual_k, size=n).tolist()]


def _small_range(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" in params:
        lo, hi = _parse_range(params, "small_range", default=_SMALL_RANGE_DEFAULT)
    else:
        lo = params.get("min_val", _SMALL_RANGE_DEFAULT[0])
        hi = params.get("max_val", _SMALL_RANGE_DEFAULT[1])
        if not _is_int_like(lo) or not _is_int_like(hi):
            raise ValueError("small_range params.min_val/max_val must be integers")
        lo, hi = int(lo), int(hi)
        if lo > hi:
            raise ValueError(f"small_range invalid: min > max ({lo} > {hi})")
    if n == 0:
        return []
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _uniform_float(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[float]:
    bounds = params.get("range", [0.0, 1.0])
    if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
        raise ValueError("uniform_float.params.range must be a 2-element list [lo, hi]")
    try:
        lo, hi = float(bounds[0]), float(bounds[1])
    except (TypeError, ValueError) as e:
        raise ValueError(f"uniform_float.params.range values must be numbers; got {bounds!r}") from e
    if not lo < hi:
        raise ValueError(f"uniform_float.params.range invalid: need lo < hi ({lo} >= {hi})")
    if n == 0:
        return []
    return rng.uniform(lo, hi, size=n).tolist()


_BUILDERS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[Any]]] = {
    "random": _random,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
    "small_range": _small_range,
    "reversed": _reversed,
    "sorted": _sorted,
    "uniform_float": _uniform_float,
}

SUPPORTED_DISTS = frozenset(_BUILDERS)


# ------------------------- param parsing ------------------------- #


def _parse_range(
    params: Dict[str, Any], dist: str, default: Tuple[int, int] | None
) -> Tuple[int, int]:
    """
    Parse params["range"] == [min_int, max_int] (both inclusive).

    With default=None the key is required.
    """
    if "range" not in params:
        if default is None:
            raise ValueError(f"{dist}.params.range must be provided as [min, max] (inclusive)")
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    if not all(_is_int_like(v) for v in spec):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(spec[0]), int(spec[1])
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_fraction(params: Dict[str, Any], key: str, default: float) -> float:
    raw = params.get(key, default)
    try:
        x = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"params.{key} must be a float in [0.0, 1.0]; got {raw!r}") from e
    if not 0.0 <= x <= 1.0:
        raise ValueError(f"params.{key} must be in [0.0, 1.0]; got {x}")
    return x


def _is_int_like(x: Any) -> bool:
    # Python ints and NumPy integer scalars, not bool
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
