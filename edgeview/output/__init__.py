"""Output formatting for the command line."""

from .formatter import format_checklist, format_render_result

__all__ = ["format_checklist", "format_render_result"]
