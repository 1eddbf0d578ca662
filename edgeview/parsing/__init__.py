"""Parsing layer for relationship lists."""

from .models import Edge
from .parser import (
    DELIMITER,
    entity_ids,
    iter_candidates,
    iter_lines,
    parse_candidate,
    split_line,
)

__all__ = [
    "DELIMITER",
    "Edge",
    "entity_ids",
    "iter_candidates",
    "iter_lines",
    "parse_candidate",
    "split_line",
]
