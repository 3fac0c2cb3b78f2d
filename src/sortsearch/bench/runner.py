"""
Experiment runner: runs a full benchmark sweep described by a YAML config.

Usage (from repo root):
    sortsearch-bench experiments/configs/01_random_scaling.yaml
    python -m sortsearch.bench.runner experiments/configs/02_search_scaling.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config after defaults were applied
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample, plus status lines
    - summary.csv             # median + IQR per (algo, n)
    - (console) tqdm progress and a rich summary table

Design notes:
- Each size gets ONE dataset, shared by every algorithm.
- Search experiments sort that dataset with the oracle and generate one
  query batch per size, shared by every search.
- With `validate: true` the last output of each (algo, n) is checked against
  the oracle; a mismatch is recorded as status "invalid".
- After a timeout, error or invalid result an algorithm skips larger sizes.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from sortsearch.algorithms import IN_PLACE_SORTS, get_search, get_sort
from sortsearch.bench.config import ExperimentConfig, load_experiment_config
from sortsearch.bench.measure import time_search_call, time_sort_call
from sortsearch.datasets import make_dataset, make_queries
from sortsearch.validate import equals_oracle, oracle_sort, search_result_ok

__all__ = ["run_experiment", "main"]

logger = logging.getLogger(__name__)
_console = Console()

_SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- helpers: IO & meta ------------------------- #

def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        suffix += 1
        run_dir = base_dir / f"{stamp}_{experiment_name}_{suffix}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- helpers: summary ------------------------- #

def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    # Status lines carry no time_ns
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)

    grouped = df.groupby(["algo", "n"])["time_ns"]
    out = grouped.agg(
        samples_ok="count",
        median_ns="median",
        min_ns="min",
        max_ns="max",
    )
    out["iqr_ns"] = grouped.quantile(0.75) - grouped.quantile(0.25)
    out = out.reset_index()
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = (
        out[["median_ns", "iqr_ns", "min_ns", "max_ns"]].astype("int64")
    )
    return out[_SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _format_cell(median_ns: int, iqr_ns: int) -> str:
    return f"{median_ns / 1e6:.3f} ± {iqr_ns / 1e6:.3f}"


def _print_summary(summary: pd.DataFrame, sizes: List[int], kind: str) -> None:
    unit = "per query batch" if kind == "search" else "per sort"
    table = Table(title=f"Benchmark Summary (median ± IQR in ms, {unit})")
    table.add_column("Algorithm", style="bold")

    # first / middle / last size, deduplicated for short sweeps
    picks: List[int] = []
    for n in (sizes[0], sizes[len(sizes) // 2], sizes[-1]):
        if n not in picks:
            picks.append(n)
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for algo in summary["algo"].unique():
        row = [algo]
        for n in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
            else:
                row.append(_format_cell(int(s["median_ns"].iloc[0]), int(s["iqr_ns"].iloc[0])))
        table.add_row(*row)

    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- validation ------------------------- #

def _check_sort_output(a: List[Any], out: Any) -> bool:
    return out is not None and equals_oracle(a, out)


def _check_search_output(a: List[Any], queries: List[Any], out: Any) -> bool:
    if out is None or len(out) != len(queries):
        return False
    return all(search_result_ok(a, q, idx) for q, idx in zip(queries, out))


# ------------------------- core runner ------------------------- #

def _prepare_inputs(
    cfg: ExperimentConfig, n: int, rng: np.random.Generator
) -> Tuple[List[Any], List[Any]]:
    a = make_dataset(int(n), cfg.dataset, rng)
    if cfg.kind == "sort":
        return a, []
    a = oracle_sort(a)
    queries = make_queries(a, int(cfg.queries["count"]), float(cfg.queries["hit_frac"]), rng)
    return a, queries


def _time_one(cfg: ExperimentConfig, name: str, a: List[Any], queries: List[Any]) -> Dict[str, Any]:
    common = dict(
        algo_name=name,
        repeats=cfg.repeats,
        warmup=cfg.warmup,
        disable_gc=cfg.disable_gc,
        timeout_seconds=cfg.timeout_seconds,
    )
    if cfg.kind == "sort":
        return time_sort_call(algo_fn=get_sort(name), a=a, in_place=name in IN_PLACE_SORTS, **common)
    return time_search_call(algo_fn=get_search(name), a=a, queries=queries, **common)


def run_experiment(config_path: Path) -> Path:
    """
    Run the experiment described by `config_path`; return the run directory.

    Raises
    ------
    FileNotFoundError
        If the config file is missing.
    ValueError, KeyError
        If the config is malformed or names unknown algorithms.
    """
    cfg = load_experiment_config(Path(config_path))

    run_dir = _ensure_run_dir(cfg.output_dir, cfg.experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg.to_dict(), cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    logger.info("Run directory: %s", run_dir)
    logger.info("Experiment %s (%s): %s", cfg.experiment_name, cfg.kind, ", ".join(cfg.algorithms))

    rng = np.random.default_rng(cfg.seed)
    skipped = {name: False for name in cfg.algorithms}

    for n in tqdm(cfg.sizes, desc="Sizes", unit="n"):
        a, queries = _prepare_inputs(cfg, n, rng)

        for name in cfg.algorithms:
            if skipped[name]:
                continue

            res = _time_one(cfg, name, a, queries)

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": name,
                        "kind": cfg.kind,
                        "n": int(n),
                        "dataset": cfg.dataset,
                        "trial": int(trial_idx),
                        "time_ns": int(t_ns),
                    },
                    results_path,
                )

            status = res["status"]
            if status == "ok" and cfg.validate and res["samples_ns"]:
                if cfg.kind == "sort":
                    valid = _check_sort_output(a, res["output"])
                else:
                    valid = _check_search_output(a, queries, res["output"])
                if not valid:
                    status = "invalid"

            if status == "ok":
                continue

            skipped[name] = True
            logger.warning("%s: %s at n=%d; skipping larger sizes", name, status, n)
            record: Dict[str, Any] = {"algo": name, "kind": cfg.kind, "n": int(n), "status": status}
            if status == "timeout":
                record["timed_out_on_repeat"] = res["timed_out_on_repeat"]
            elif status == "error":
                record["error"] = res["error"]
            _append_jsonl(record, results_path)

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_summary(summary_df, cfg.sizes, cfg.kind)

    logger.info("Wrote %s, %s, %s, %s", results_path, summary_path, meta_path, cfg_resolved_path)
    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sort/search benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_console, rich_tracebacks=True)],
    )
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
