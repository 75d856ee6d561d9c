"""
Word Graph Model

Weighted directed adjacency structure over normalized words.

Invariants:
- every word that appears as a source or target of an edge is a node,
  leaves included (they map to an empty edge mapping, never to absence)
- at most one edge per ordered pair; repeated adjacency raises its weight
- weights are integers >= 1; self-loops are ordinary edges
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

_EMPTY: Mapping[str, int] = MappingProxyType({})


class WordGraph:
    """
    Immutable weighted directed graph of words.

    Node order is first-seen order; each node's outgoing edges keep insertion
    order. Build instances with GraphBuilder rather than by hand, except in
    tests that need a specific shape.
    """

    __slots__ = ("_adjacency", "_edge_count", "_total_weight")

    def __init__(self, adjacency: Mapping[str, Mapping[str, int]] | None = None):
        """
        Args:
            adjacency: source -> {target: weight}. Targets missing from the
                outer mapping are added as leaves.

        Raises:
            ValueError: If any weight is not a positive integer
        """
        adjacency = adjacency or {}
        # sources first so leaf targets never jump ahead of them
        table: dict[str, dict[str, int]] = {source: {} for source in adjacency}
        for source, targets in adjacency.items():
            edges = table[source]
            for target, weight in targets.items():
                if not isinstance(weight, int) or weight < 1:
                    raise ValueError(f"Edge {source!r}->{target!r} has invalid weight {weight!r}")
                edges[target] = weight
                table.setdefault(target, {})

        self._adjacency = table
        self._edge_count = sum(len(edges) for edges in table.values())
        self._total_weight = sum(sum(edges.values()) for edges in table.values())

    # ============================================================
    # Node access
    # ============================================================

    def nodes(self) -> Iterator[str]:
        """Iterate nodes in first-seen order."""
        return iter(self._adjacency)

    def contains_node(self, node: str) -> bool:
        return node in self._adjacency

    def outgoing(self, node: str) -> Mapping[str, int]:
        """Read-only {target: weight} for node; empty if absent or a leaf."""
        edges = self._adjacency.get(node)
        if edges is None:
            return _EMPTY
        return MappingProxyType(edges)

    def out_degree(self, node: str) -> int:
        return len(self._adjacency.get(node, _EMPTY))

    def weight(self, source: str, target: str) -> int | None:
        """Weight of source->target, or None if the edge does not exist."""
        return self._adjacency.get(source, _EMPTY).get(target)

    # ============================================================
    # Edge access
    # ============================================================

    def edges(self) -> Iterator[tuple[str, str, int]]:
        """Iterate (source, target, weight) in node-then-insertion order."""
        for source, targets in self._adjacency.items():
            for target, weight in targets.items():
                yield source, target, weight

    @property
    def edge_count(self) -> int:
        """Number of distinct directed edges."""
        return self._edge_count

    @property
    def total_weight(self) -> int:
        """Sum of all edge weights (number of adjacent pairs seen)."""
        return self._total_weight

    @property
    def is_empty(self) -> bool:
        return not self._adjacency

    # ============================================================
    # Serialization
    # ============================================================

    def to_edge_list(self) -> str:
        """
        Textual edge list, one line per node.

        Example:
            the -> cat(1) mat(1)
            mat -> No outgoing edges
        """
        lines = []
        for node, targets in self._adjacency.items():
            if targets:
                rendered = " ".join(f"{target}({weight})" for target, weight in targets.items())
            else:
                rendered = "No outgoing edges"
            lines.append(f"{node} -> {rendered}")
        return "\n".join(lines)

    # ============================================================
    # Dunder
    # ============================================================

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[str]:
        return self.nodes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordGraph):
            return NotImplemented
        return self._adjacency == other._adjacency

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WordGraph(nodes={len(self)}, edges={self._edge_count})"
