"""
Datasets package public API.

Re-export the generators so callers can write:
    from sortsearch.datasets import make_dataset, make_queries, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, make_dataset, make_queries

__all__ = ["make_dataset", "make_queries", "SUPPORTED_DISTS"]
