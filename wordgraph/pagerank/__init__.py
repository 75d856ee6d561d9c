"""
PageRank Computation

Power-iteration PageRank over a WordGraph with dangling-node
redistribution and a memoized score vector.
"""

from .engine import PageRankEngine, PageRankStats

__all__ = [
    "PageRankEngine",
    "PageRankStats",
]
