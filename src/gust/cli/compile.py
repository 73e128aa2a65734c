"""CLI command: gust compile -- turn class names into a stylesheet."""

from __future__ import annotations

from pathlib import Path

import click

from gust.cli.sources import collect_classes, make_generator
from gust.config import CssGenerationConfig


@click.command(name="compile")
@click.argument("classes", nargs=-1)
@click.option(
    "-f",
    "--file",
    "files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False),
    help="File with whitespace-separated class names (repeatable)",
)
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False), help="Write CSS here")
@click.option("--minify", is_flag=True, help="Emit minified CSS")
@click.option("--tree-shake", is_flag=True, help="Keep only the keyframes that are used")
@click.option("--source-maps", is_flag=True, help="Comment each rule with its class")
@click.option("--palette", "palettes", multiple=True, help="Allowed color family (repeatable)")
def compile_classes(
    classes: tuple[str, ...],
    files: tuple[str, ...],
    output: str | None,
    minify: bool,
    tree_shake: bool,
    source_maps: bool,
    palettes: tuple[str, ...],
) -> None:
    """Compile CLASSES (and classes read from --file) into CSS.

    Unrecognized classes are reported on stderr and skipped; the command
    still succeeds.
    """
    config = CssGenerationConfig(
        minify=minify,
        tree_shake=tree_shake,
        source_maps=source_maps,
        color_palettes=palettes,
    )
    generator = make_generator(config)
    report = generator.add_classes(collect_classes(classes, files))
    css = generator.render()

    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(f"Wrote {generator.rule_count()} rule(s) to {output}", err=True)
    else:
        click.echo(css, nl=False)

    for name in report.failed_classes:
        click.echo(f"Skipped: {name}", err=True)
    click.echo(report.summary(), err=True)
