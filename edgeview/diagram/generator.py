"""Deterministic PlantUML generation from document text and toggles."""

from typing import Mapping

from ..parsing.models import Edge
from ..parsing.parser import iter_lines, split_line
from .constants import ARROW, END_MARKER, LAYOUT_DIRECTIVE, NODE_KEYWORD, START_MARKER


def _is_enabled(toggles: Mapping[str, bool], entity_id: str) -> bool:
    # The empty label is never registered, so "-> X" lines always drop out.
    return bool(entity_id) and toggles.get(entity_id) is True


def active_edges(text: str, toggles: Mapping[str, bool]) -> list[Edge]:
    """Get the edges that make it into the diagram, in line order.

    A line contributes an edge when it splits into exactly two parts and
    both endpoints are enabled. Duplicates are kept.

    Args:
        text: The full document text.
        toggles: Snapshot of entity flags. Missing labels are disabled.

    Returns:
        The emitted edges.
    """
    edges: list[Edge] = []
    for line in iter_lines(text):
        parts = split_line(line)
        if len(parts) != 2:
            continue
        source, target = parts
        if _is_enabled(toggles, source) and _is_enabled(toggles, target):
            edges.append(Edge(source=source, target=target))
    return edges


def _format_block(edge: Edge) -> str:
    """Format one relation block: node declarations, arrow, blank line."""
    lines = [f"{NODE_KEYWORD} {edge.source}"]
    if not edge.is_self_relation:
        lines.append(f"{NODE_KEYWORD} {edge.target}")
    lines.append(f"{edge.source} {ARROW} {edge.target}")
    return "\n".join(lines) + "\n\n"


def generate_source(text: str, toggles: Mapping[str, bool]) -> str:
    """Generate the PlantUML description for the enabled relationships.

    Node declarations are repeated for every block an entity takes part
    in; PlantUML accepts the duplicates.

    Args:
        text: The full document text.
        toggles: Snapshot of entity flags.

    Returns:
        The description text, stripped of outer whitespace.
    """
    parts = [f"{START_MARKER}\n", f"{LAYOUT_DIRECTIVE}\n"]
    parts.extend(_format_block(edge) for edge in active_edges(text, toggles))
    parts.append(f"{END_MARKER}\n")
    return "".join(parts).strip()
