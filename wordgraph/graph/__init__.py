"""
Graph Construction Layer

Weighted directed word graph built from a token stream.
"""

from .builder import GraphBuilder, build_graph
from .export import to_dot, to_networkx
from .models import WordGraph

__all__ = [
    # Builder
    "GraphBuilder",
    "build_graph",
    # Models
    "WordGraph",
    # Export
    "to_dot",
    "to_networkx",
]
