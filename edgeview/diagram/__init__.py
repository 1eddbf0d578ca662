"""Diagram source generation."""

from .constants import (
    ARROW,
    END_MARKER,
    LAYOUT_DIRECTIVE,
    NODE_KEYWORD,
    START_MARKER,
)
from .generator import active_edges, generate_source

__all__ = [
    "ARROW",
    "END_MARKER",
    "LAYOUT_DIRECTIVE",
    "NODE_KEYWORD",
    "START_MARKER",
    "active_edges",
    "generate_source",
]
