"""CLI command: gust check -- coverage report for a class list."""

from __future__ import annotations

import sys

import click

from gust.cli.sources import collect_classes, make_generator
from gust.config import CssGenerationConfig


@click.command()
@click.argument("classes", nargs=-1)
@click.option(
    "-f",
    "--file",
    "files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="File with whitespace-separated class names (repeatable)",
)
@click.option("--strict", is_flag=True, help="Exit with code 1 if any class is unrecognized")
def check(classes: tuple[str, ...], files: tuple[str, ...], strict: bool) -> None:
    """Report which classes gust recognizes.

    Prints one diagnostic per unrecognized class and a coverage summary.
    Exits 0 unless --strict is given and some class failed.
    """
    generator = make_generator(CssGenerationConfig())
    report = generator.add_classes(collect_classes(classes, files))

    for diag in report.diagnostics():
        click.echo(str(diag))
        if diag.fix:
            click.echo(f"  fix: {diag.fix}")

    referenced = generator.referenced_properties
    if referenced:
        click.echo(f"Referenced custom properties: {', '.join(referenced)}")

    click.echo()
    click.echo(f"Summary: {report.summary()}, {generator.rule_count()} rule(s)")

    if strict and report.failed:
        sys.exit(1)
    sys.exit(0)
