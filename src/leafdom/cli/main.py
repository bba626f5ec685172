"""leafdom CLI entry point: Click group with subcommands."""

import click

from leafdom import __version__
from leafdom.config import LeafdomConfig
from leafdom.log import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="leafdom")
@click.option("--verbose", "-v", is_flag=True, help="Log parser activity to stderr")
@click.option("--indent", default="  ", show_default=True, help="Indent string for pretty output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, indent: str) -> None:
    """leafdom - parse markup and style sheets into a document tree."""
    config = LeafdomConfig(indent=indent, log_level="DEBUG" if verbose else "WARNING")
    configure_logging(config.log_level)
    ctx.obj = config


# Import and register subcommands
from leafdom.cli.css import css  # noqa: E402
from leafdom.cli.html import html  # noqa: E402

cli.add_command(html)
cli.add_command(css)
