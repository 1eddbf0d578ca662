"""Configuration exceptions."""


class ConfigError(Exception):
    """Base class for configuration problems, tagged with the file involved."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class ConfigLoadError(ConfigError):
    """The config file is unreadable or is not a YAML mapping."""


class ConfigValidationError(ConfigError):
    """The config file holds values the models reject.

    ``errors`` carries one ``{"loc", "msg", "type"}`` dict per rejected field.
    """

    def __init__(
        self, message: str, errors: list[dict] | None = None, path: str | None = None
    ):
        super().__init__(message, path)
        self.errors = errors or []
