"""cssbuilder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import CssBuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """cssbuilder - build CSS selectors with ordering validation."""
    config = CssBuilderConfig(log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build, kinds  # noqa: E402
from cssbuilder.cli.render import combine, render  # noqa: E402

cli.add_command(build)
cli.add_command(kinds)
cli.add_command(render)
cli.add_command(combine)
