"""
YAML experiment configuration.

Example (experiments/configs/01_random_scaling.yaml):

    experiment_name: random_scaling
    output_dir: runs
    seed: 12345
    repeats: 5
    warmup: true
    disable_gc: true
    timeout_seconds: 2.0
    dataset: {dist: random, params: {range: [0, 1000000]}}
    sizes: [100, 1000, 5000]
    algorithms:
      - name: quick
      - name: merge

Search experiments add `kind: search` and optionally
`queries: {count: 200, hit_frac: 0.5}`. `validate` (default true) checks
every algorithm's output against the oracle once per size.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from sortsearch.algorithms import SEARCHES, SORTS
from sortsearch.datasets import SUPPORTED_DISTS

__all__ = ["ExperimentConfig", "load_experiment_config", "REQUIRED_KEYS"]

REQUIRED_KEYS: Tuple[str, ...] = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
)

KINDS = ("sort", "search")


@dataclass(frozen=True)
class ExperimentConfig:
    experiment_name: str
    output_dir: Path
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    dataset: Dict[str, Any]
    sizes: List[int]
    algorithms: List[str]
    kind: str = "sort"
    queries: Dict[str, Any] = field(default_factory=lambda: {"count": 100, "hit_frac": 0.5})
    validate: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view, suitable for `yaml.safe_dump`."""
        out = asdict(self)
        out["output_dir"] = str(self.output_dir)
        out["algorithms"] = [{"name": name} for name in self.algorithms]
        return out

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "ExperimentConfig":
        if not isinstance(cfg, dict):
            raise ValueError("Experiment config must be a mapping")
        missing = [k for k in REQUIRED_KEYS if k not in cfg]
        if missing:
            raise ValueError(f"Missing required config keys: {missing}")

        kind = str(cfg.get("kind", "sort"))
        if kind not in KINDS:
            raise ValueError(f"kind must be one of {list(KINDS)}; got {kind!r}")

        sizes = list(cfg["sizes"] or [])
        if not sizes or any(not isinstance(n, int) or isinstance(n, bool) or n < 0 for n in sizes):
            raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")

        dataset = cfg["dataset"]
        if not isinstance(dataset, dict) or dataset.get("dist") not in SUPPORTED_DISTS:
            raise ValueError(
                f"Config 'dataset' must be a mapping with dist in {sorted(SUPPORTED_DISTS)}"
            )

        repeats = int(cfg["repeats"])
        if repeats < 1:
            raise ValueError("Config 'repeats' must be >= 1")
        timeout_seconds = float(cfg["timeout_seconds"])
        if timeout_seconds <= 0:
            raise ValueError("Config 'timeout_seconds' must be positive")

        queries = dict(cfg.get("queries") or {})
        queries.setdefault("count", 100)
        queries.setdefault("hit_frac", 0.5)

        return cls(
            experiment_name=str(cfg["experiment_name"]),
            output_dir=Path(cfg["output_dir"]),
            seed=int(cfg["seed"]),
            repeats=repeats,
            warmup=bool(cfg["warmup"]),
            disable_gc=bool(cfg["disable_gc"]),
            timeout_seconds=timeout_seconds,
            dataset=dict(dataset),
            sizes=sizes,
            algorithms=_resolve_algorithm_names(cfg["algorithms"], kind),
            kind=kind,
            queries=queries,
            validate=bool(cfg.get("validate", True)),
        )


def load_experiment_config(path: Path) -> ExperimentConfig:
    """Read and validate a YAML experiment file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    return ExperimentConfig.from_dict(raw)


def _resolve_algorithm_names(entries: Any, kind: str) -> List[str]:
    """
    Accept `[{name: quick}, ...]` or plain `[quick, ...]`; reject unknown
    names and duplicates.
    """
    registry = SORTS if kind == "sort" else SEARCHES
    if not isinstance(entries, list) or not entries:
        raise ValueError("Config 'algorithms' must be a non-empty list")

    names: List[str] = []
    for entry in entries:
        name = entry.get("name") if isinstance(entry, dict) else entry
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name not in registry:
            raise KeyError(f"Unknown {kind} algorithm {name!r}. Supported: {sorted(registry)}")
        if name in names:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        names.append(name)
    return names
