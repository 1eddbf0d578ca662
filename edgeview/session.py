"""Editing session that ties the document, toggles and renderer together."""

import logging
from typing import Mapping

from .diagram.generator import generate_source
from .registry.toggles import ToggleRegistry
from .render.pipeline import RenderPipeline, RenderResult

logger = logging.getLogger(__name__)


class EditSession:
    """The state behind one open relationship document.

    The host calls ``set_text`` and ``toggle`` from its interactive thread
    only. Every change regenerates the diagram source from a registry
    snapshot and hands the resulting string to the render pipeline, which
    does nothing when the source did not change.
    """

    def __init__(self, pipeline: RenderPipeline | None = None):
        self.pipeline = pipeline
        self.registry = ToggleRegistry()
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    @property
    def source(self) -> str:
        """Get the diagram source for the current text and flags."""
        return generate_source(self._text, self.registry.snapshot())

    @property
    def result(self) -> RenderResult:
        """Get the visible render result."""
        if self.pipeline is None:
            return RenderResult.idle()
        return self.pipeline.result

    def checklist(self) -> Mapping[str, bool]:
        """Get every known entity and its flag, for display."""
        return self.registry.snapshot()

    def set_text(self, text: str) -> str:
        """Replace the document text.

        New labels are registered as enabled; labels seen before keep
        their flag.

        Returns:
            The regenerated diagram source.
        """
        self._text = text
        self.registry.seed(text)
        return self._refresh()

    def toggle(self, entity_id: str, enabled: bool) -> str:
        """Enable or disable one entity.

        Returns:
            The regenerated diagram source.
        """
        self.registry.set(entity_id, enabled)
        logger.debug("Entity %r %s", entity_id, "enabled" if enabled else "disabled")
        return self._refresh()

    def reset(self) -> str:
        """Clear the document and forget every toggle."""
        self._text = ""
        self.registry.reset()
        return self._refresh()

    def _refresh(self) -> str:
        source = self.source
        if self.pipeline is not None:
            self.pipeline.request(source)
        return source
