"""Parser registry: priority-ordered dispatch over the utility parsers."""

from __future__ import annotations

import logging
from typing import Iterator

from gust.config import CssGenerationConfig
from gust.model.css import CssProperty
from gust.utilities import BUILTIN_PARSERS, UtilityParser

logger = logging.getLogger(__name__)


class ParserRegistry:
    """Holds utility parsers sorted by descending priority.

    Ties keep registration order, so dispatch is deterministic.
    """

    def __init__(self, parsers: list[UtilityParser] | None = None) -> None:
        self._parsers: list[UtilityParser] = []
        for parser in parsers or []:
            self.register(parser)

    def register(self, parser: UtilityParser) -> None:
        """Add *parser*, keeping the list sorted (stable) by priority."""
        self._parsers.append(parser)
        self._parsers.sort(key=lambda p: -p.metadata.priority)

    @property
    def parsers(self) -> list[UtilityParser]:
        return list(self._parsers)

    def __iter__(self) -> Iterator[UtilityParser]:
        return iter(self._parsers)

    def __len__(self) -> int:
        return len(self._parsers)

    def active(self, config: CssGenerationConfig) -> list[UtilityParser]:
        """Parsers whose category is enabled in *config*."""
        return [p for p in self._parsers if config.category_enabled(p.metadata.category)]

    def find(
        self, base: str, config: CssGenerationConfig | None = None
    ) -> tuple[UtilityParser, list[CssProperty]] | None:
        """Return the first (highest priority) parser accepting *base*, with its properties.

        A palette color outside ``config.color_palettes`` counts as no match,
        so lower-priority parsers still get their turn.
        """
        config = config or CssGenerationConfig()
        for parser in self.active(config):
            properties = parser.try_parse(base)
            if properties is None:
                continue
            family = parser.color_family(base)
            if family is not None and not config.palette_allowed(family):
                logger.debug("Palette %r disabled, skipping %s for %r", family, parser.name, base)
                continue
            logger.debug("Matched %r with %s", base, parser.name)
            return parser, properties
        return None

    def supported_patterns(self) -> dict[str, tuple[str, ...]]:
        """Map of parser name to the class patterns it documents."""
        return {p.name: p.metadata.supported_patterns for p in self._parsers}


def create_default_registry() -> ParserRegistry:
    """Create a ParserRegistry with every built-in parser registered."""
    return ParserRegistry(BUILTIN_PARSERS)
