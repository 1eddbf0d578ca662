"""Tolerant line parser for "A -> B" relationship lists."""

import re
from typing import Iterator

from .models import Edge

DELIMITER = "->"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_line(line: str) -> list[str]:
    """Split a line on the delimiter and strip every part.

    Args:
        line: One line of the document.

    Returns:
        The stripped parts. A line without the delimiter yields one part.
    """
    return [part.strip() for part in line.split(DELIMITER)]


def parse_candidate(line: str) -> Edge | None:
    """Parse one line into a candidate edge.

    A line is a candidate only when splitting it produces exactly two
    non-empty parts. Anything else is ignored rather than reported.

    Args:
        line: One line of the document.

    Returns:
        The parsed Edge, or None for a malformed line.
    """
    parts = split_line(line)
    if len(parts) != 2:
        return None

    source, target = parts
    if not source or not target:
        return None

    return Edge(source=source, target=target)


def iter_lines(text: str) -> Iterator[str]:
    """Iterate over the lines of a document.

    Only LF, CRLF and CR end a line; form feeds and other Unicode
    separators stay part of the line.
    """
    yield from _LINE_BREAK.split(text)


def iter_candidates(text: str) -> Iterator[Edge]:
    """Iterate over candidate edges in line order.

    Duplicate lines produce duplicate edges.
    """
    for line in iter_lines(text):
        edge = parse_candidate(line)
        if edge is not None:
            yield edge


def entity_ids(text: str) -> list[str]:
    """Collect endpoint labels in the order they are first seen.

    Args:
        text: The full document text.

    Returns:
        Unique labels, source before target within each line.
    """
    seen: dict[str, None] = {}
    for edge in iter_candidates(text):
        seen.setdefault(edge.source)
        seen.setdefault(edge.target)
    return list(seen)
