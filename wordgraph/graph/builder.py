"""
Graph Builder

Converts a token stream into a WordGraph.

Each adjacent pair (tokens[i], tokens[i+1]) adds one to the weight of the
edge tokens[i] -> tokens[i+1]. Both endpoints become nodes. Streams shorter
than two tokens yield an empty graph.
"""

from collections.abc import Iterable
from pathlib import Path

from wordgraph.common.observability import get_logger
from wordgraph.text import load_tokens, tokenize

from .models import WordGraph

logger = get_logger(__name__)


class GraphBuilder:
    """
    Builds WordGraph instances from tokens, raw text or a corpus file.

    The builder holds no state between builds.
    """

    def build(self, tokens: Iterable[str]) -> WordGraph:
        """
        Build a graph from already-normalized tokens.

        Args:
            tokens: Token stream; any string is a valid node label

        Returns:
            WordGraph (empty for fewer than two tokens)
        """
        adjacency: dict[str, dict[str, int]] = {}

        iterator = iter(tokens)
        previous = next(iterator, None)
        for current in iterator:
            edges = adjacency.setdefault(previous, {})
            edges[current] = edges.get(current, 0) + 1
            adjacency.setdefault(current, {})
            previous = current

        graph = WordGraph(adjacency)
        logger.info(
            "graph_built",
            nodes=len(graph),
            edges=graph.edge_count,
            total_weight=graph.total_weight,
        )
        return graph

    def build_from_text(self, text: str) -> WordGraph:
        """Tokenize raw text and build a graph from it."""
        return self.build(tokenize(text))

    def build_from_file(self, path: str | Path) -> WordGraph:
        """
        Load a corpus file and build a graph from it.

        Raises:
            CorpusNotFoundError: If the file does not exist
            CorpusReadError: If the file cannot be read
        """
        return self.build(load_tokens(path))


def build_graph(tokens: Iterable[str]) -> WordGraph:
    """Shortcut for GraphBuilder().build(tokens)."""
    return GraphBuilder().build(tokens)
