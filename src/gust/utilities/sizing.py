"""Width, height, min/max and size utilities."""

from __future__ import annotations

from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    lookup,
    same_value,
)
from gust.values.sizing import (
    HEIGHT,
    MAX_HEIGHT,
    MAX_WIDTH,
    MIN_HEIGHT,
    MIN_WIDTH,
    SIZE,
    WIDTH,
)
from gust.values.spacing import FRACTIONS, SPACING


class SizingParser(BaseParser):
    """``w-4``, ``h-screen``, ``w-1/2``, ``min-h-0``, ``max-w-prose``, ``size-10``, ``w-[37px]``."""

    name = "sizing"
    metadata = ParserMetadata(
        priority=90,
        category=ParserCategory.SIZING,
        supported_patterns=(
            "w-{n}",
            "w-{fraction}",
            "h-{n}",
            "size-{n}",
            "min-w-{n}",
            "min-h-{n}",
            "max-w-{size}",
            "max-h-{n}",
        ),
    )

    # Longest prefixes first so ``min-w`` is not read as ``w``.
    _PREFIXES: tuple[tuple[str, tuple[str, ...], tuple[dict[str, str], ...]], ...] = (
        ("min-w", ("min-width",), (MIN_WIDTH, SPACING)),
        ("min-h", ("min-height",), (MIN_HEIGHT, SPACING)),
        ("max-w", ("max-width",), (MAX_WIDTH, SPACING)),
        ("max-h", ("max-height",), (MAX_HEIGHT, SPACING)),
        ("size", ("width", "height"), (SIZE, SPACING, FRACTIONS)),
        ("w", ("width",), (WIDTH, SPACING, FRACTIONS)),
        ("h", ("height",), (HEIGHT, SPACING, FRACTIONS)),
    )

    def try_parse(self, base: str) -> Properties | None:
        for prefix, names, tables in self._PREFIXES:
            if base.startswith(prefix + "-"):
                value = lookup(base[len(prefix) + 1 :], *tables)
                if value is None:
                    return None
                return same_value(names, value)
        return None
