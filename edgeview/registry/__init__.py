"""Per-entity enable/disable registry."""

from .toggles import ToggleRegistry

__all__ = ["ToggleRegistry"]
