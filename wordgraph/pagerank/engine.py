"""
PageRank Engine

Compute PageRank scores for a word graph by power iteration.

    PR(v) = (1 - d) / N + d * sum(PR(u) / outdeg(u) for u -> v) + d * D / N

where D is the total score held by dangling nodes (no outgoing edges). The
dangling mass is spread uniformly so the vector stays a probability
distribution. Edge weights do not affect the share a neighbor receives.

The whole vector is computed on first request and memoized for the lifetime
of the engine; a new graph needs a new engine.
"""

import threading
import time
from dataclasses import dataclass

from wordgraph.common.observability import get_logger, log_performance
from wordgraph.graph.models import WordGraph
from wordgraph.infra.config import PageRankConfig
from wordgraph.query.results import NodeMissing, PageRankResult, Score

logger = get_logger(__name__)


@dataclass(frozen=True)
class PageRankStats:
    """Outcome of the last power iteration run."""

    iterations: int
    converged: bool
    delta: float
    """L1 distance between the last two vectors"""


class PageRankEngine:
    """
    Compute and cache PageRank scores for one WordGraph.

    The cache is built into a local dict and installed in one assignment
    under a lock, so concurrent readers see either nothing or the full vector.
    """

    def __init__(self, graph: WordGraph, config: PageRankConfig | None = None):
        """
        Initialize PageRank engine.

        Args:
            graph: Graph to score
            config: Damping, tolerance and iteration cap (defaults 0.85 / 1e-6 / 500)
        """
        self.graph = graph
        self.config = config or PageRankConfig()
        self._cache: dict[str, float] | None = None
        self._stats: PageRankStats | None = None
        self._lock = threading.Lock()

    @property
    def is_computed(self) -> bool:
        return self._cache is not None

    @property
    def last_stats(self) -> PageRankStats | None:
        """Iteration stats, or None before the first computation."""
        return self._stats

    def score(self, target: str) -> PageRankResult:
        """
        PageRank score of target.

        An unknown target on the first request returns NodeMissing without
        computing anything. Later requests read the cached vector.
        """
        cache = self._cache
        if cache is None:
            if not self.graph.contains_node(target):
                return NodeMissing((target,))
            cache = self._ensure_computed()

        value = cache.get(target)
        if value is None:
            return NodeMissing((target,))
        return Score(target, value)

    def scores(self) -> dict[str, float]:
        """
        Scores of all nodes ({} for an empty graph).

        Returns a copy; the cached vector is never exposed.
        """
        return dict(self._ensure_computed())

    def top(self, top_n: int = 10) -> list[tuple[str, float]]:
        """
        Get top N nodes by PageRank score.

        Returns:
            (node, score) tuples, highest score first, ties by node name
        """
        ranked = sorted(self._ensure_computed().items(), key=lambda item: (-item[1], item[0]))
        return ranked[:top_n]

    def _ensure_computed(self) -> dict[str, float]:
        cache = self._cache
        if cache is not None:
            return cache

        with self._lock:
            if self._cache is None:
                started = time.perf_counter()
                scores, stats = self._compute()
                self._stats = stats
                self._cache = scores
                log_performance(
                    logger,
                    "pagerank",
                    (time.perf_counter() - started) * 1000,
                    nodes=len(scores),
                )
            return self._cache

    def _compute(self) -> tuple[dict[str, float], PageRankStats]:
        nodes = list(self.graph.nodes())
        n = len(nodes)
        if n == 0:
            return {}, PageRankStats(iterations=0, converged=True, delta=0.0)

        damping = self.config.damping
        tolerance = self.config.tolerance

        successors = {node: tuple(self.graph.outgoing(node)) for node in nodes}
        dangling = [node for node in nodes if not successors[node]]

        rank = dict.fromkeys(nodes, 1.0 / n)
        teleport = (1.0 - damping) / n
        iterations = 0
        delta = 0.0
        converged = False

        for iterations in range(1, self.config.max_iterations + 1):
            new_rank = dict.fromkeys(nodes, teleport)

            for node in nodes:
                targets = successors[node]
                if targets:
                    share = damping * rank[node] / len(targets)
                    for target in targets:
                        new_rank[target] += share

            dangling_share = damping * sum(rank[node] for node in dangling) / n
            if dangling_share:
                for node in nodes:
                    new_rank[node] += dangling_share

            delta = sum(abs(new_rank[node] - rank[node]) for node in nodes)
            rank = new_rank
            if delta < tolerance:
                converged = True
                break

        stats = PageRankStats(iterations=iterations, converged=converged, delta=delta)
        if converged:
            logger.info("pagerank_computed", nodes=n, iterations=iterations, delta=delta)
        else:
            logger.warning(
                "pagerank_not_converged",
                nodes=n,
                iterations=iterations,
                delta=delta,
                tolerance=tolerance,
            )
        return rank, stats
