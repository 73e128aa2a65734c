"""CLI command: gust inspect -- show how one class is compiled."""

from __future__ import annotations

import sys

import click

from gust.cli.sources import make_generator
from gust.config import CssGenerationConfig
from gust.errors import ParseError
from gust.lexer import tokenize


@click.command()
@click.argument("class_name")
def inspect(class_name: str) -> None:
    """Show the lexed segments, variants, selector and declarations of CLASS_NAME."""
    generator = make_generator(CssGenerationConfig())

    try:
        tokens = tokenize(class_name)
        compiled = generator.compile(class_name)
        generator.add_class(class_name)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    resolved = compiled.resolved
    meta = compiled.parser.metadata

    click.echo(f"Class:     {class_name}")
    click.echo(f"Segments:  {' | '.join(tokens.segments)}")
    if resolved.variants:
        variants = ", ".join(f"{v.name} ({v.kind.value})" for v in resolved.variants)
        click.echo(f"Variants:  {variants}")
    click.echo(f"Base:      {resolved.base}")
    if resolved.important:
        click.echo("Important: yes")
    click.echo(f"Selector:  {compiled.selector}")
    if compiled.media_query:
        click.echo(f"Media:     {compiled.media_query}")
    click.echo(
        f"Parser:    {compiled.parser.name} "
        f"(priority {meta.priority}, category {meta.category.value})"
    )
    click.echo()

    click.echo("Properties:")
    for prop in compiled.properties:
        click.echo(f"  {prop.render()};")

    if generator.referenced_properties:
        click.echo()
        click.echo(f"References: {', '.join(generator.referenced_properties)}")
