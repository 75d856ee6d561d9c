"""
Random Walker

Follows outgoing edges chosen uniformly at random, never reusing a directed
edge within one walk. The walk ends when the current node has no unused
outgoing edge left. Since every step consumes an edge, a walk takes at most
graph.edge_count steps.
"""

import random
from collections.abc import Sequence
from pathlib import Path

from wordgraph.common.exceptions import ExportError
from wordgraph.common.observability import get_logger
from wordgraph.graph.models import WordGraph

logger = get_logger(__name__)

WALK_SEPARATOR = " -> "


class RandomWalker:
    """Stochastic edge-following traversal over a WordGraph."""

    def __init__(self, graph: WordGraph, max_steps: int | None = None):
        """
        Args:
            graph: Graph to walk
            max_steps: Optional cap on traversed edges (None = until stuck)
        """
        self.graph = graph
        self.max_steps = max_steps

    def walk(self, rng: random.Random | None = None, start: str | None = None) -> list[str]:
        """
        Perform one walk.

        Args:
            rng: Random source for the start node and each hop
            start: Fixed start node; picked uniformly when None

        Returns:
            Visited nodes in order; [] for an empty graph or an unknown start
        """
        if self.graph.is_empty:
            return []

        rng = rng or random.Random()
        if start is None:
            current = rng.choice(list(self.graph.nodes()))
        elif self.graph.contains_node(start):
            current = start
        else:
            return []

        walk = [current]
        used: set[tuple[str, str]] = set()

        while self.max_steps is None or len(used) < self.max_steps:
            candidates = [neighbor for neighbor in self.graph.outgoing(current) if (current, neighbor) not in used]
            if not candidates:
                break
            following = rng.choice(candidates)
            used.add((current, following))
            walk.append(following)
            current = following

        logger.info("random_walk_finished", start=walk[0], steps=len(used))
        return walk


def format_walk(nodes: Sequence[str]) -> str:
    """Join walk nodes as "a -> b -> c"."""
    return WALK_SEPARATOR.join(nodes)


def write_walk(nodes: Sequence[str], path: str | Path) -> Path:
    """
    Write a walk to a UTF-8 text file, creating parent directories.

    Raises:
        ExportError: If the file cannot be written
    """
    output = Path(path)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(format_walk(nodes), encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Cannot write random walk to {output}", {"path": str(output), "error": str(e)}) from e

    logger.info("random_walk_saved", path=str(output), nodes=len(nodes))
    return output
