"""Gust CLI entry point: Click group with subcommands."""

import logging

import click

from gust import __version__


@click.group()
@click.version_option(version=__version__, prog_name="gust")
@click.option("-v", "--verbose", is_flag=True, help="Log every dispatch decision to stderr")
def cli(verbose: bool) -> None:
    """Gust - compile utility class names into CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from gust.cli.compile import compile_classes  # noqa: E402
from gust.cli.check import check  # noqa: E402
from gust.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_classes)
cli.add_command(check)
cli.add_command(inspect)
