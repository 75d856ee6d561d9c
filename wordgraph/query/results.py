"""
Query Result Models

Tagged outcomes of graph queries. Missing words, missing paths and missing
bridges are ordinary results, never exceptions. Formatting for display lives
in the CLI presenters.
"""

from dataclasses import dataclass
from typing import Union

# ============================================================
# Bridge words
# ============================================================


@dataclass(frozen=True)
class BothMissing:
    """Neither word is in the graph."""

    word1: str
    word2: str


@dataclass(frozen=True)
class Word1Missing:
    """Only the first word is absent."""

    word1: str


@dataclass(frozen=True)
class Word2Missing:
    """Only the second word is absent."""

    word2: str


@dataclass(frozen=True)
class NoBridge:
    """Both words exist but nothing links them in two hops."""

    word1: str
    word2: str


@dataclass(frozen=True)
class Bridges:
    """Bridge words from word1 to word2, sorted lexicographically."""

    word1: str
    word2: str
    words: tuple[str, ...]


BridgeResult = Union[BothMissing, Word1Missing, Word2Missing, NoBridge, Bridges]

# ============================================================
# Shortest path / PageRank
# ============================================================


@dataclass(frozen=True)
class NodeMissing:
    """
    One or more requested nodes are absent.

    missing lists every absent node in request order (start before end).
    """

    missing: tuple[str, ...]


@dataclass(frozen=True)
class NoPath:
    """Both endpoints exist but end is unreachable from start."""

    start: str
    end: str


@dataclass(frozen=True)
class Path:
    """A minimum-weight path; nodes[0] is start and nodes[-1] is end."""

    nodes: tuple[str, ...]
    total_weight: int

    @property
    def start(self) -> str:
        return self.nodes[0]

    @property
    def end(self) -> str:
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        return len(self.nodes) - 1


PathResult = Union[NodeMissing, NoPath, Path]


@dataclass(frozen=True)
class Score:
    """PageRank score of a single node."""

    node: str
    value: float


PageRankResult = Union[NodeMissing, Score]
