"""
Timing harness for sort and search algorithms.

One sample times exactly one algorithm invocation (for searches: one pass
over the whole query batch) with `time.perf_counter_ns`. Copying inputs,
GC handling and warmup all happen outside the timed block.

In-place sorts reorder their input, so every sample (and the warmup call)
gets a fresh copy of the base dataset; without that, every sample after the
first would time already-sorted input. Merge sort and the searches leave
their input alone and receive it directly.

Public API (stable):
    time_sort_call(...) -> dict
    time_search_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns per successful sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index of the timeout
        "output": Any,                      # output of the last completed call
    }
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Callable, Dict, List, Sequence

__all__ = ["time_sort_call", "time_search_call"]

logger = logging.getLogger(__name__)


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[[Any], Any],
    a: List[Any],
    in_place: bool,
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(a)`.

    Parameters
    ----------
    algo_name : str
        Registry name of the algorithm (for records).
    algo_fn : Callable
        A sort from `sortsearch.algorithms.SORTS`.
    a : list
        Base input. Never handed to an in-place sort directly.
    in_place : bool
        True if `algo_fn` mutates its argument; each call then gets list(a).
    repeats, warmup, disable_gc, timeout_seconds
        See `time_search_call`.
    """
    if in_place:
        def make_args() -> tuple:
            return (list(a),)
    else:
        def make_args() -> tuple:
            return (a,)

    return _time_samples(
        algo_name=algo_name,
        call=algo_fn,
        make_args=make_args,
        repeats=repeats,
        warmup=warmup,
        disable_gc=disable_gc,
        timeout_seconds=timeout_seconds,
    )


def time_search_call(
    *,
    algo_name: str,
    algo_fn: Callable[[Any, Any], int],
    a: Sequence[Any],
    queries: Sequence[Any],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Time repeated passes of `algo_fn(a, q)` over every q in `queries`.

    Parameters
    ----------
    algo_name : str
        Registry name of the algorithm (for records).
    algo_fn : Callable
        A search from `sortsearch.algorithms.SEARCHES`.
    a : sequence
        Dataset to search; must already be sorted for the sorted-input searches.
    queries : sequence
        Targets; one sample covers all of them. The sample's output is the
        list of returned indices.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, run one untimed pass first.
    disable_gc : bool
        If True, collect and disable the GC around the timed loop; restored afterwards.
    timeout_seconds : float
        Per-sample threshold; a slower sample marks status="timeout" and
        stops sampling.
    """
    def batch(data: Sequence[Any]) -> List[int]:
        return [algo_fn(data, q) for q in queries]

    return _time_samples(
        algo_name=algo_name,
        call=batch,
        make_args=lambda: (a,),
        repeats=repeats,
        warmup=warmup,
        disable_gc=disable_gc,
        timeout_seconds=timeout_seconds,
    )


def _time_samples(
    *,
    algo_name: str,
    call: Callable[..., Any],
    make_args: Callable[[], tuple],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
        "output": None,
    }

    if warmup and repeats > 0:
        try:
            call(*make_args())
        except Exception as e:
            logger.warning("%s: warmup failed: %r", algo_name, e)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            args = make_args()
            try:
                t0 = time.perf_counter_ns()
                out = call(*args)
                t1 = time.perf_counter_ns()
            except Exception as e:
                logger.warning("%s: run failed at repeat %d: %r", algo_name, r, e)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))
            result["output"] = out
            if elapsed > threshold_ns:
                logger.info("%s: sample %d took %.3fs, over the %.3fs limit",
                            algo_name, r, elapsed / 1e9, timeout_seconds)
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave the GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
