"""CLI command: leafdom css -- parse a style sheet and print its rules."""

from __future__ import annotations

import json
import sys

import click

from leafdom.config import LeafdomConfig
from leafdom.parser import ParseError, parse_css
from leafdom.render import pretty_stylesheet, to_dict


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["pretty", "raw"]),
    default="pretty",
    show_default=True,
    help="Formatted rules, or a raw JSON dump of every field",
)
@click.pass_obj
def css(config: LeafdomConfig | None, source, output_format: str) -> None:
    """Parse a style-sheet file (or stdin) and display its rules."""
    config = config or LeafdomConfig()

    try:
        stylesheet = parse_css(source.read())
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if output_format == "raw":
        click.echo(json.dumps(to_dict(stylesheet), indent=2))
    else:
        click.echo(pretty_stylesheet(stylesheet, config.indent), nl=False)
