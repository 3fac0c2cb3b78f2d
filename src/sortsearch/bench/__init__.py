"""
Benchmark package public API.

    from sortsearch.bench import run_experiment, time_sort_call
    run_experiment(Path("experiments/configs/01_random_scaling.yaml"))
"""

from .config import ExperimentConfig, load_experiment_config
from .measure import time_search_call, time_sort_call
from .runner import run_experiment

__all__ = [
    "ExperimentConfig",
    "load_experiment_config",
    "time_sort_call",
    "time_search_call",
    "run_experiment",
]
