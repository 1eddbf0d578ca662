"""Graph view of a relationship document."""

from .builder import build_edge_graph
from .edge_graph import EdgeGraph, EntityRow

__all__ = [
    "EdgeGraph",
    "EntityRow",
    "build_edge_graph",
]
