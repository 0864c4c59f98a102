"""CLI commands: cssbuilder render / cssbuilder combine -- selector tree documents."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.selector import Selector, load_selector, selector_to_dict
from cssbuilder.selector import combine as combine_selectors


def _load(path: str) -> Selector:
    try:
        return load_selector(Path(path).read_text(encoding="utf-8"))
    except (SelectorError, UnicodeDecodeError) as exc:
        click.echo(f"Selector error in {Path(path).name}: {exc}", err=True)
        sys.exit(1)


def _emit(selector: Selector, as_json: bool, indent: int | None) -> None:
    if as_json:
        click.echo(json.dumps(selector_to_dict(selector), indent=indent))
    else:
        click.echo(selector.stringify())


@click.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print selector state as JSON")
@click.option("--indent", type=int, default=None, help="JSON indentation")
@click.pass_obj
def render(
    config: CssBuilderConfig | None, document: str, as_json: bool, indent: int | None
) -> None:
    """Render a selector tree document (JSON) to CSS text."""
    config = config or CssBuilderConfig()
    selector = _load(document)
    _emit(selector, as_json, indent if indent is not None else config.json_indent)


@click.command()
@click.argument("left", type=click.Path(exists=True, dir_okay=False))
@click.argument("right", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--combinator",
    "-c",
    default=None,
    help="Combinator symbol: ' ', '>', '+' or '~' (default: descendant)",
)
@click.pass_obj
def combine(
    config: CssBuilderConfig | None, left: str, right: str, combinator: str | None
) -> None:
    """Combine the selectors of two tree documents with a combinator."""
    config = config or CssBuilderConfig()
    if combinator is None:
        combinator = config.default_combinator
    selector = combine_selectors(_load(left), combinator, _load(right))
    click.echo(selector.stringify())
