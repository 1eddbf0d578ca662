"""Document-scoped store of entity enable/disable flags."""

import logging
from types import MappingProxyType
from typing import Iterator, Mapping

from ..parsing.parser import iter_candidates

logger = logging.getLogger(__name__)


class ToggleRegistry:
    """Map of entity label to enabled flag.

    Labels are added the first time they are seen (enabled by default) and
    are never removed while the document lives; a label that disappears
    from the text keeps its flag in case it is typed again. Only ``reset``
    clears the registry.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._flags: dict[str, bool] = {}

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def ensure(self, entity_id: str) -> None:
        """Register a label as enabled unless it is already known.

        Args:
            entity_id: The entity label. Surrounding whitespace is ignored.
        """
        key = entity_id.strip()
        if not key or key in self._flags:
            return
        self._flags[key] = True
        logger.debug("Registered entity %r", key)

    def set(self, entity_id: str, enabled: bool) -> None:
        """Set the flag for a label, overwriting any stored value.

        Args:
            entity_id: The entity label.
            enabled: The new flag.

        Raises:
            ValueError: If the label is empty.
        """
        key = entity_id.strip()
        if not key:
            raise ValueError("Entity id must not be empty")
        self._flags[key] = bool(enabled)

    def seed(self, text: str) -> None:
        """Ensure every endpoint of every candidate line, in line order.

        Args:
            text: The full document text.
        """
        for edge in iter_candidates(text):
            self.ensure(edge.source)
            self.ensure(edge.target)

    def reset(self) -> None:
        """Forget every label."""
        self._flags.clear()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_enabled(self, entity_id: str) -> bool:
        """Get the stored flag; labels never seen count as disabled."""
        return self._flags.get(entity_id.strip(), False)

    def snapshot(self) -> Mapping[str, bool]:
        """Get a read-only copy of the current flags."""
        return MappingProxyType(dict(self._flags))

    def items(self) -> list[tuple[str, bool]]:
        """Get (label, enabled) pairs in registration order."""
        return list(self._flags.items())

    def __contains__(self, entity_id: object) -> bool:
        return isinstance(entity_id, str) and entity_id.strip() in self._flags

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._flags))

    def __repr__(self) -> str:
        return f"ToggleRegistry({self._flags!r})"
