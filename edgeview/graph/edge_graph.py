"""EdgeGraph wrapper around networkx for relationship documents."""

from dataclasses import dataclass
from typing import Mapping

import networkx as nx


@dataclass(frozen=True)
class EntityRow:
    """One row of the entity checklist."""

    name: str
    enabled: bool
    edges: int
    active_edges: int


class EdgeGraph:
    """A multigraph of every candidate relationship in a document.

    Each candidate line becomes its own edge, so duplicate lines stay
    visible. Edges are marked ``active`` when the diagram would show them.
    """

    def __init__(self):
        """Initialize an empty edge graph."""
        self._graph = nx.MultiDiGraph()

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    def add_entity(self, name: str, enabled: bool) -> None:
        """Add or update an entity node."""
        self._graph.add_node(name, enabled=enabled)

    def add_relationship(self, source: str, target: str, line: int, active: bool) -> None:
        """Add one relationship edge.

        Args:
            source: The source entity.
            target: The target entity.
            line: Zero-based line number in the document.
            active: Whether the diagram shows this edge.
        """
        self._graph.add_edge(source, target, line=line, active=active)

    def get_entity_names(self) -> list[str]:
        """Get all entity names in insertion order."""
        return list(self._graph.nodes)

    def count_edges(self, name: str, active_only: bool = False) -> int:
        """Count relationship lines touching an entity.

        A self-relation counts once.
        """
        if not self._graph.has_node(name):
            return 0
        seen: set[tuple[str, str, int]] = set()
        for u, v, key, data in self._graph.in_edges(name, keys=True, data=True):
            if not active_only or data["active"]:
                seen.add((u, v, key))
        for u, v, key, data in self._graph.out_edges(name, keys=True, data=True):
            if not active_only or data["active"]:
                seen.add((u, v, key))
        return len(seen)

    def entity_rows(self, toggles: Mapping[str, bool]) -> list[EntityRow]:
        """Build checklist rows.

        Registered entities come first in registration order, followed by
        graph nodes the registry does not know about.

        Args:
            toggles: Snapshot of entity flags.
        """
        names = list(toggles)
        names.extend(n for n in self.get_entity_names() if n not in toggles)
        return [
            EntityRow(
                name=name,
                enabled=toggles.get(name, False),
                edges=self.count_edges(name),
                active_edges=self.count_edges(name, active_only=True),
            )
            for name in names
        ]
