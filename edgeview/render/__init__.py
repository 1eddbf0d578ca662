"""Rendering of diagram sources into images."""

from .errors import RenderError
from .pipeline import RenderPipeline, RenderResult, RenderStatus
from .renderer import DiagramRenderer, PlantUMLRenderer, renderer_from_config

__all__ = [
    "DiagramRenderer",
    "PlantUMLRenderer",
    "RenderError",
    "RenderPipeline",
    "RenderResult",
    "RenderStatus",
    "renderer_from_config",
]
