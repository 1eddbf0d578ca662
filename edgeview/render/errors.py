"""Rendering exceptions."""


class RenderError(Exception):
    """Raised when the external renderer cannot produce an image."""

    def __init__(self, message: str, returncode: int | None = None):
        self.returncode = returncode
        super().__init__(message)
