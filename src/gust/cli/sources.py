"""Shared CLI plumbing: gathering class lists and building a generator."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from gust.config import CssGenerationConfig
from gust.errors import ConfigurationError
from gust.generator import CssGenerator


def collect_classes(arguments: tuple[str, ...], files: tuple[str, ...]) -> list[str]:
    """Distinct classes from the command line and whitespace-separated class files."""
    chunks = list(arguments)
    for name in files:
        chunks.append(Path(name).read_text(encoding="utf-8"))
    classes: dict[str, None] = {}
    for chunk in chunks:
        for cls in chunk.split():
            classes[cls] = None
    return list(classes)


def make_generator(config: CssGenerationConfig) -> CssGenerator:
    """Build a generator, printing config diagnostics; exits 1 on invalid config."""
    try:
        generator = CssGenerator(config)
    except ConfigurationError as exc:
        for diag in exc.diagnostics:
            click.echo(str(diag), err=True)
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)
    for diag in generator.warnings:
        click.echo(str(diag), err=True)
    return generator
