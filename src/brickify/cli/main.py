"""brickify CLI entry point: Click group with subcommands."""

import logging

import click

from brickify import __version__


@click.group()
@click.version_option(version=__version__, prog_name="brickify")
@click.option("-v", "--verbose", is_flag=True, help="Log conversion details to stderr")
def cli(verbose: bool) -> None:
    """brickify - convert HTML and CSS into site-builder clipboard JSON."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from brickify.cli.convert import convert  # noqa: E402
from brickify.cli.inspect import inspect  # noqa: E402
from brickify.cli.serve import serve  # noqa: E402

cli.add_command(convert)
cli.add_command(inspect)
cli.add_command(serve)
