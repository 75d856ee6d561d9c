"""
WordGraph

Weighted directed word graph built from text, with structural queries.

Components:
- WordGraph / GraphBuilder: adjacency structure built from a token stream
- BridgeWordFinder: two-hop bridge words
- TextSynthesizer: bridge-aware text rewriting
- ShortestPathFinder: Dijkstra shortest weighted paths
- PageRankEngine: memoized PageRank with dangling-node handling
- RandomWalker: random walk without repeated edges

Usage:
    graph = GraphBuilder().build(["the", "cat", "sat", "on", "the", "mat"])
    BridgeWordFinder(graph).find("the", "sat")   # Bridges(words=("cat",))
    PageRankEngine(graph).score("the")
"""

from .graph import GraphBuilder, WordGraph, build_graph, to_dot, to_networkx
from .pagerank import PageRankEngine, PageRankStats
from .query import (
    BothMissing,
    BridgeResult,
    Bridges,
    BridgeWordFinder,
    NoBridge,
    NodeMissing,
    NoPath,
    PageRankResult,
    Path,
    PathResult,
    RandomWalker,
    Score,
    ShortestPathFinder,
    TextSynthesizer,
    Word1Missing,
    Word2Missing,
)

__version__ = "0.1.0"

__all__ = [
    # Graph
    "WordGraph",
    "GraphBuilder",
    "build_graph",
    "to_dot",
    "to_networkx",
    # Algorithms
    "BridgeWordFinder",
    "TextSynthesizer",
    "ShortestPathFinder",
    "PageRankEngine",
    "PageRankStats",
    "RandomWalker",
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
