"""Graph rendering through the external Graphviz toolchain."""

from .graphviz import GraphvizRenderer

__all__ = ["GraphvizRenderer"]
