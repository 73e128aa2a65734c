"""Gust: compiles utility class names into CSS."""
from __future__ import annotations

__version__ = "0.1.0"

from gust.config import CssGenerationConfig  # noqa: E402
from gust.errors import (  # noqa: E402
    ConfigurationError,
    GustError,
    MalformedArbitraryValue,
    ParseError,
    UnrecognizedClass,
)
from gust.model import BatchReport, CssProperty, CssRule  # noqa: E402
from gust.registry import ParserRegistry, create_default_registry  # noqa: E402
from gust.builder import ClassBuilder  # noqa: E402
from gust.generator import CssGenerator  # noqa: E402

__all__ = [
    "BatchReport",
    "ClassBuilder",
    "ConfigurationError",
    "CssGenerationConfig",
    "CssGenerator",
    "CssProperty",
    "CssRule",
    "GustError",
    "MalformedArbitraryValue",
    "ParseError",
    "ParserRegistry",
    "UnrecognizedClass",
    "__version__",
    "create_default_registry",
]
