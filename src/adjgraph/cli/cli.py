"""Command-line interface for the adjgraph package."""

import click
import daiquiri

from adjgraph import __version__
from adjgraph.builder import parse_edge


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default="info",
    show_default=True,
    help="Set the logging level.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str = "info") -> None:
    """CLI command group for adjgraph."""
    daiquiri.setup(level=log_level.upper(), program_name="adjgraph")
    logger = daiquiri.getLogger(__name__)
    ctx.ensure_object(dict)
    logger.info("adjgraph %s", __version__)


def edges_callback(
    _ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> list[tuple[str, str]]:
    """Convert ``SOURCE:TARGET`` arguments into label pairs."""
    try:
        return [parse_edge(text) for text in value]
    except ValueError as err:
        raise click.BadParameter(str(err), param=param) from err
