"""
Bridge Word Finder

A word w3 bridges (word1, word2) when both word1 -> w3 and w3 -> word2 are
edges. The relation is directional: bridges from a to b say nothing about
bridges from b to a.
"""

from wordgraph.graph.models import WordGraph

from .results import BothMissing, BridgeResult, Bridges, NoBridge, Word1Missing, Word2Missing


def bridge_candidates(graph: WordGraph, word1: str, word2: str) -> list[str]:
    """
    Bridge words in word1's edge insertion order.

    Absent words simply produce no candidates.
    """
    return [middle for middle in graph.outgoing(word1) if word2 in graph.outgoing(middle)]


class BridgeWordFinder:
    """Two-hop adjacency query over a WordGraph."""

    def __init__(self, graph: WordGraph):
        self.graph = graph

    def find(self, word1: str, word2: str) -> BridgeResult:
        """
        Find the bridge words from word1 to word2.

        Returns:
            BothMissing / Word1Missing / Word2Missing when words are absent,
            NoBridge when nothing qualifies, otherwise Bridges sorted
            lexicographically.
        """
        has1 = self.graph.contains_node(word1)
        has2 = self.graph.contains_node(word2)
        if not has1 and not has2:
            return BothMissing(word1, word2)
        if not has1:
            return Word1Missing(word1)
        if not has2:
            return Word2Missing(word2)

        words = bridge_candidates(self.graph, word1, word2)
        if not words:
            return NoBridge(word1, word2)
        return Bridges(word1, word2, tuple(sorted(words)))
