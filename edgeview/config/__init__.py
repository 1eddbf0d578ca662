"""Configuration layer loaded from YAML."""

from .errors import ConfigError, ConfigLoadError, ConfigValidationError
from .loader import load_config
from .models import EdgeviewConfig, PipelineConfig, RendererConfig

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "EdgeviewConfig",
    "PipelineConfig",
    "RendererConfig",
    "load_config",
]
