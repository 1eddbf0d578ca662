"""Data types produced by the relationship parser."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A directed relationship typed on one line."""

    source: str
    target: str

    @property
    def is_self_relation(self) -> bool:
        """Check whether the edge points back at its own source."""
        return self.source == self.target

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"
