"""CLI command: leafdom html -- parse a markup document and print its tree."""

from __future__ import annotations

import json
import sys

import click

from leafdom.config import LeafdomConfig
from leafdom.parser import ParseError, parse_html
from leafdom.render import pretty, pretty_stylesheet, to_dict


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["pretty", "raw"]),
    default="pretty",
    show_default=True,
    help="Indented tree, or a raw JSON dump of every field",
)
@click.option("--styles", is_flag=True, help="Also print stylesheets found in <style> blocks")
@click.pass_obj
def html(config: LeafdomConfig | None, source, output_format: str, styles: bool) -> None:
    """Parse a markup file (or stdin) and display its node tree."""
    config = config or LeafdomConfig()

    try:
        document = parse_html(source.read())
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if output_format == "raw":
        click.echo(json.dumps(to_dict(document), indent=2))
        return

    click.echo(pretty(document.root, config.indent), nl=False)
    if styles:
        for index, stylesheet in enumerate(document.stylesheets, start=1):
            click.echo()
            click.echo(f"/* stylesheet {index} */")
            click.echo(pretty_stylesheet(stylesheet, config.indent), nl=False)
