"""CLI commands: cssbuilder build / cssbuilder kinds."""

from __future__ import annotations

import sys

import click

from cssbuilder.errors import SelectorError
from cssbuilder.selector import PartKind, parts_to_selector


def _split_part(raw: str) -> tuple[str, str]:
    kind, sep, value = raw.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KIND=VALUE, got {raw!r}", param_hint="--part")
    return kind.strip(), value


@click.command()
@click.option(
    "--part",
    "-p",
    "parts",
    multiple=True,
    metavar="KIND=VALUE",
    help="Selector part, in order (e.g. -p element=div -p id=main)",
)
def build(parts: tuple[str, ...]) -> None:
    """Build one compound selector from ordered parts and print it."""
    pairs = [_split_part(raw) for raw in parts]
    try:
        selector = parts_to_selector(pairs)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())


@click.command()
def kinds() -> None:
    """List selector part kinds in their required order."""
    for kind in PartKind:
        unique = "  (at most once)" if kind.unique else ""
        click.echo(f"{kind.rank}  {kind.value:<14} {kind.render('value')}{unique}")
