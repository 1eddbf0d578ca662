"""Loading edgeview configuration from YAML."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ConfigLoadError, ConfigValidationError
from .models import EdgeviewConfig


def load_config(path: str | Path | None = None) -> EdgeviewConfig:
    """Load configuration, falling back to defaults.

    No path and an empty file both give the default configuration; keys
    left out of the file keep their defaults too.

    Args:
        path: YAML file to read, or None.

    Returns:
        The validated EdgeviewConfig.

    Raises:
        ConfigLoadError: If the file cannot be read or is not a mapping.
        ConfigValidationError: If a value is rejected.
    """
    if path is None:
        return EdgeviewConfig()

    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read {path}: {e.strerror or e}", str(path)) from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"{path} is not valid YAML: {e}", str(path)) from e

    if data is None:
        return EdgeviewConfig()

    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"{path} must hold a mapping of settings, not {type(data).__name__}",
            str(path),
        )

    try:
        return EdgeviewConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"{path} has {e.error_count()} invalid setting(s)",
            [_describe(err) for err in e.errors()],
            str(path),
        ) from e


def _describe(err: dict) -> dict:
    return {
        "loc": ".".join(str(part) for part in err["loc"]),
        "msg": err["msg"],
        "type": err["type"],
    }
