"""Builder for converting document text to an EdgeGraph."""

from typing import Mapping

from ..parsing.parser import iter_lines, parse_candidate
from .edge_graph import EdgeGraph


def build_edge_graph(text: str, toggles: Mapping[str, bool]) -> EdgeGraph:
    """Build an EdgeGraph from document text and entity flags.

    Args:
        text: The full document text.
        toggles: Snapshot of entity flags.

    Returns:
        An EdgeGraph with one edge per candidate line.
    """
    graph = EdgeGraph()

    # Registered entities first, so toggled-off labels still show up
    for name, enabled in toggles.items():
        graph.add_entity(name, enabled=enabled)

    for line_no, line in enumerate(iter_lines(text)):
        edge = parse_candidate(line)
        if edge is None:
            continue
        for name in (edge.source, edge.target):
            if name not in graph.graph:
                graph.add_entity(name, enabled=toggles.get(name, False))
        active = toggles.get(edge.source) is True and toggles.get(edge.target) is True
        graph.add_relationship(edge.source, edge.target, line=line_no, active=active)

    return graph
