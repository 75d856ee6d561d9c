"""
Result presenters.

Turn query result values into the messages shown by the CLI.
"""

from collections.abc import Sequence

from wordgraph.query.random_walk import format_walk
from wordgraph.query.results import (
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


def _quoted(words: Sequence[str]) -> str:
    return ", ".join(f'"{word}"' for word in words)


def format_bridge_result(result: BridgeResult) -> str:
    if isinstance(result, BothMissing):
        return f'No "{result.word1}" or "{result.word2}" in the graph!'
    if isinstance(result, Word1Missing):
        return f'No "{result.word1}" in the graph!'
    if isinstance(result, Word2Missing):
        return f'No "{result.word2}" in the graph!'
    if isinstance(result, NoBridge):
        return f'No bridge words from "{result.word1}" to "{result.word2}"!'
    if isinstance(result, Bridges):
        return f'The bridge words from "{result.word1}" to "{result.word2}" are: {_quoted(result.words)}.'
    raise TypeError(f"Unexpected bridge result: {result!r}")


def format_path(path: Path) -> str:
    return f'Shortest path from "{path.start}" to "{path.end}" is: {format_walk(path.nodes)}\nTotal weight: {path.total_weight}'


def format_path_result(result: PathResult) -> str:
    if isinstance(result, NodeMissing):
        return f"No {' or '.join(result.missing)} in the graph!"
    if isinstance(result, NoPath):
        return f"There is no path from {result.start} to {result.end}."
    if isinstance(result, Path):
        return format_path(result)
    raise TypeError(f"Unexpected path result: {result!r}")


def format_pagerank_result(result: PageRankResult, precision: int = 4) -> str:
    if isinstance(result, NodeMissing):
        return f'Word "{result.missing[0]}" not found in the graph.'
    if isinstance(result, Score):
        return f'PageRank of "{result.node}": {result.value:.{precision}f}'
    raise TypeError(f"Unexpected PageRank result: {result!r}")
