"""Adapters for the external diagram renderer."""

import logging
import subprocess
from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

from .errors import RenderError

if TYPE_CHECKING:
    from ..config.models import RendererConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class DiagramRenderer(Protocol):
    """Turns diagram source text into image bytes."""

    def render(self, source: str) -> bytes: ...


class PlantUMLRenderer:
    """Renderer backed by the ``plantuml`` command-line tool.

    The source is piped to ``plantuml -pipe`` and the image is read back
    from stdout.
    """

    def __init__(
        self,
        command: Sequence[str] = ("plantuml",),
        output_format: str = "png",
        timeout: float = 30.0,
    ):
        """Initialize the renderer.

        Args:
            command: Executable and leading arguments, e.g.
                ``["java", "-jar", "plantuml.jar"]``.
            output_format: PlantUML output type ("png" or "svg").
            timeout: Seconds to wait for one render.
        """
        if not command:
            raise ValueError("Renderer command must not be empty")
        self.command = list(command)
        self.output_format = output_format
        self.timeout = timeout

    @property
    def args(self) -> list[str]:
        """Get the full argument list passed to the subprocess."""
        return [*self.command, "-pipe", f"-t{self.output_format}"]

    def render(self, source: str) -> bytes:
        """Render a diagram source.

        Args:
            source: PlantUML description text.

        Returns:
            The encoded image.

        Raises:
            RenderError: If PlantUML is missing, times out, or rejects the source.
        """
        logger.debug("Running %s", " ".join(self.args))
        try:
            proc = subprocess.run(
                self.args,
                input=source.encode("utf-8"),
                capture_output=True,
                check=False,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise RenderError(f"PlantUML timed out after {self.timeout:g}s") from e
        except OSError as e:
            raise RenderError(f"Cannot run {self.command[0]!r}: {e}") from e

        if proc.returncode != 0:
            stderr = proc.stderr.decode("utf-8", errors="replace").strip()
            message = stderr or f"PlantUML exited with status {proc.returncode}"
            raise RenderError(message, returncode=proc.returncode)

        if not proc.stdout:
            raise RenderError("PlantUML produced no output", returncode=proc.returncode)

        return proc.stdout


def renderer_from_config(config: "RendererConfig") -> PlantUMLRenderer:
    """Build a PlantUML renderer from configuration."""
    return PlantUMLRenderer(
        command=config.command,
        output_format=config.format,
        timeout=config.timeout,
    )
