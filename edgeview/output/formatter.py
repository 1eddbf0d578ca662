"""Output formatting for entity checklists and render results."""

import json
from typing import Literal

from ..graph.edge_graph import EntityRow
from ..render.pipeline import RenderResult, RenderStatus


def format_checklist(
    rows: list[EntityRow],
    format: Literal["text", "json"] = "text",
) -> str:
    """Format the entity checklist for output.

    Args:
        rows: Checklist rows.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(rows)
    return _format_text(rows)


def _format_text(rows: list[EntityRow]) -> str:
    """Format rows as human-readable text."""
    lines: list[str] = ["ENTITIES:"]
    if not rows:
        lines.append("  (none)")

    for row in rows:
        mark = "x" if row.enabled else " "
        lines.append(
            f"  [{mark}] {row.name} ({row.active_edges}/{row.edges} edges shown)"
        )

    enabled = sum(1 for row in rows if row.enabled)
    lines.append("")
    lines.append(f"{enabled} of {len(rows)} entities enabled")
    return "\n".join(lines)


def _format_json(rows: list[EntityRow]) -> str:
    """Format rows as JSON."""
    data = {
        "entity_count": len(rows),
        "enabled_count": sum(1 for row in rows if row.enabled),
        "entities": [
            {
                "name": row.name,
                "enabled": row.enabled,
                "edges": row.edges,
                "active_edges": row.active_edges,
            }
            for row in rows
        ],
    }
    return json.dumps(data, indent=2)


def format_render_result(result: RenderResult) -> str:
    """Format a render result as a one-line status message."""
    if result.status == RenderStatus.READY:
        size = len(result.image or b"")
        return f"Rendered diagram ({size} bytes)"
    if result.status == RenderStatus.FAILED:
        return f"Render failed: {result.reason}"
    if result.status == RenderStatus.PENDING:
        return "Rendering..."
    return "Nothing rendered yet"
