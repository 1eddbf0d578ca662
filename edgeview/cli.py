"""Command-line interface for edgeview."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config.errors import ConfigLoadError, ConfigValidationError
from .config.loader import load_config
from .config.models import EdgeviewConfig
from .graph.builder import build_edge_graph
from .output.formatter import format_checklist, format_render_result
from .render.pipeline import RenderPipeline, RenderStatus
from .render.renderer import renderer_from_config
from .session import EditSession

disable_option = click.option(
    "--disable",
    "disabled",
    multiple=True,
    metavar="ENTITY",
    help="Entity to switch off (repeatable)",
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_document(edges_file: str) -> str:
    if edges_file == "-":
        return click.get_text_stream("stdin").read()
    try:
        return Path(edges_file).read_text(encoding="utf-8")
    except OSError as e:
        click.echo(f"Error reading file: {e}", err=True)
        sys.exit(2)


def _open_session(edges_file: str, disabled: tuple[str, ...]) -> EditSession:
    """Load a document into a session and apply the requested toggles."""
    session = EditSession()
    session.set_text(_read_document(edges_file))
    for entity_id in disabled:
        if not entity_id.strip():
            continue
        if entity_id.strip() not in session.registry:
            click.echo(f"Warning: unknown entity {entity_id!r}", err=True)
        session.toggle(entity_id, False)
    return session


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="EDGEVIEW_CONFIG",
    help="YAML configuration file (defaults to EDGEVIEW_CONFIG env var)",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool):
    """Edgeview: diagrams from a toggleable list of "A -> B" relationships."""
    try:
        config = load_config(config_path)
    except ConfigLoadError as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(2)
    except ConfigValidationError as e:
        click.echo(f"Config validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)

    _configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = config


@main.command()
@click.argument("edges_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@disable_option
def generate(edges_file: str, disabled: tuple[str, ...]):
    """Print the PlantUML source for a relationship list.

    EDGES_FILE holds one "A -> B" relationship per line ("-" for stdin).
    """
    session = _open_session(edges_file, disabled)
    click.echo(session.source)


@main.command()
@click.argument("edges_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@disable_option
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def entities(edges_file: str, disabled: tuple[str, ...], output_format: str):
    """List every entity with its enabled flag.

    EDGES_FILE holds one "A -> B" relationship per line ("-" for stdin).
    """
    session = _open_session(edges_file, disabled)
    toggles = session.checklist()
    rows = build_edge_graph(session.text, toggles).entity_rows(toggles)
    click.echo(format_checklist(rows, output_format))  # type: ignore


@main.command()
@click.argument("edges_file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@disable_option
@click.option(
    "-o",
    "--output",
    "output_path",
    required=True,
    type=click.Path(dir_okay=False),
    help="Where to write the rendered image",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to wait for PlantUML (overrides config)",
)
@click.pass_obj
def render(
    config: EdgeviewConfig,
    edges_file: str,
    disabled: tuple[str, ...],
    output_path: str,
    timeout: float | None,
):
    """Render a relationship list to an image with PlantUML.

    EDGES_FILE holds one "A -> B" relationship per line ("-" for stdin).

    Exit codes:
      0 - Image written
      1 - Rendering failed
      2 - File or config error
    """
    session = _open_session(edges_file, disabled)

    renderer_config = config.renderer
    if timeout is not None:
        renderer_config = renderer_config.model_copy(update={"timeout": timeout})
    renderer = renderer_from_config(renderer_config)

    with RenderPipeline(renderer, max_workers=config.pipeline.max_workers) as pipeline:
        pipeline.request(session.source)
        result = pipeline.wait()

    if result.status != RenderStatus.READY:
        click.echo(format_render_result(result), err=True)
        sys.exit(1)

    out_path = Path(output_path)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(result.image or b"")
    except OSError as e:
        click.echo(f"Error writing image: {e}", err=True)
        sys.exit(2)

    click.echo(f"{format_render_result(result)}: {out_path}")
    sys.exit(0)


if __name__ == "__main__":
    main()
