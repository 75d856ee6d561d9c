"""
Graph Export

Serializes a WordGraph for external consumers:
- DOT text for Graphviz
- NetworkX DiGraph for ad-hoc analysis
"""

import networkx as nx

from wordgraph.infra.config import RenderConfig

from .models import WordGraph


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def to_dot(graph: WordGraph, config: RenderConfig | None = None) -> str:
    """
    Render graph as a Graphviz digraph.

    Each node gets a declaration line followed by its outgoing edges, labeled
    with their weights.
    """
    config = config or RenderConfig()

    lines = [
        "digraph G {",
        f"  rankdir={config.rankdir};",
        f"  node [shape={config.node_shape}, fontname={_quote(config.font_name)}];",
    ]
    for node in graph.nodes():
        lines.append(f"  {_quote(node)};")
        for target, weight in graph.outgoing(node).items():
            lines.append(f"  {_quote(node)} -> {_quote(target)} [label={_quote(str(weight))}];")
    lines.append("}")
    return "\n".join(lines)


def to_networkx(graph: WordGraph) -> nx.DiGraph:
    """
    Build a NetworkX DiGraph mirroring graph.

    Edge weights are stored under the "weight" attribute. Node insertion
    order follows graph.nodes().
    """
    G = nx.DiGraph()
    G.add_nodes_from(graph.nodes())
    G.add_weighted_edges_from(graph.edges())
    return G
