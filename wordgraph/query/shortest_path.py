"""
Shortest Path Finder

Single-source Dijkstra over positive integer edge weights.

Predecessors are kept as dict[str, str | None] with start mapped to None,
so path reconstruction walks back until it reaches the None link. When
several paths share the minimum weight, which one is returned is not
specified.
"""

import heapq
import math

from wordgraph.graph.models import WordGraph

from .results import NodeMissing, NoPath, Path, PathResult


class ShortestPathFinder:
    """Weighted shortest paths over a WordGraph."""

    def __init__(self, graph: WordGraph):
        self.graph = graph

    def shortest_path(self, start: str, end: str) -> PathResult:
        """
        Minimum-weight path from start to end.

        Returns:
            NodeMissing naming every absent endpoint, NoPath when end is
            unreachable, otherwise Path with its total weight
        """
        missing = tuple(node for node in (start, end) if not self.graph.contains_node(node))
        if missing:
            return NodeMissing(missing)

        dist, prev = self._dijkstra(start, target=end)
        if math.isinf(dist.get(end, math.inf)):
            return NoPath(start, end)
        return Path(self._reconstruct(prev, end), int(dist[end]))

    def shortest_paths_from(self, start: str) -> dict[str, Path]:
        """
        Shortest paths from start to every reachable node (start included).

        Returns an empty dict when start is not in the graph.
        """
        if not self.graph.contains_node(start):
            return {}

        dist, prev = self._dijkstra(start)
        return {
            node: Path(self._reconstruct(prev, node), int(distance))
            for node, distance in dist.items()
            if not math.isinf(distance)
        }

    def _dijkstra(
        self, start: str, target: str | None = None
    ) -> tuple[dict[str, float], dict[str, str | None]]:
        """
        Run Dijkstra from start, stopping early once target is finalized.

        Returns:
            (distances, predecessors); unreachable nodes keep math.inf
        """
        dist: dict[str, float] = {node: math.inf for node in self.graph.nodes()}
        prev: dict[str, str | None] = {start: None}
        dist[start] = 0

        visited: set[str] = set()
        heap: list[tuple[float, str]] = [(0, start)]

        while heap:
            d, node = heapq.heappop(heap)
            if node in visited:
                continue
            visited.add(node)
            if node == target:
                break

            for neighbor, weight in self.graph.outgoing(node).items():
                candidate = d + weight
                if candidate < dist[neighbor]:
                    dist[neighbor] = candidate
                    prev[neighbor] = node
                    heapq.heappush(heap, (candidate, neighbor))

        return dist, prev

    @staticmethod
    def _reconstruct(prev: dict[str, str | None], end: str) -> tuple[str, ...]:
        path: list[str] = []
        node: str | None = end
        while node is not None:
            path.append(node)
            node = prev[node]
        path.reverse()
        return tuple(path)
