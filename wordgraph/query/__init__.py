"""
Query Layer

Read-only algorithms over a WordGraph: bridge words, bridge-aware text
synthesis, weighted shortest paths and random walks.

Usage:
    graph = GraphBuilder().build(tokens)

    BridgeWordFinder(graph).find("the", "sat")
    ShortestPathFinder(graph).shortest_path("a", "d")
    RandomWalker(graph).walk(rng=random.Random(7))
"""

from .bridge import BridgeWordFinder, bridge_candidates
from .random_walk import RandomWalker, format_walk, write_walk
from .results import (
    BothMissing,
    BridgeResult,
    Bridges,
    NoBridge,
    NodeMissing,
    NoPath,
    PageRankResult,
    Path,
    PathResult,
    Score,
    Word1Missing,
    Word2Missing,
)
from .shortest_path import ShortestPathFinder
from .synthesis import TextSynthesizer

__all__ = [
    # Algorithms
    "BridgeWordFinder",
    "TextSynthesizer",
    "ShortestPathFinder",
    "RandomWalker",
    "bridge_candidates",
    "format_walk",
    "write_walk",
    # Results
    "BridgeResult",
    "BothMissing",
    "Word1Missing",
    "Word2Missing",
    "NoBridge",
    "Bridges",
    "PathResult",
    "NodeMissing",
    "NoPath",
    "Path",
    "PageRankResult",
    "Score",
]
