"""``prose`` typography-plugin container classes.

Only the container's own declarations are emitted: the ``--tw-prose-*``
palette, measure and base type scale.  Descendant element styles are not
generated.
"""

from __future__ import annotations

from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    decls,
)
from gust.values.typography import PROSE_COLORS, PROSE_INVERT_COLORS, PROSE_SIZES


def _palette(colors: dict[str, str]) -> list[tuple[str, str]]:
    return [(f"--tw-prose-{name}", value) for name, value in colors.items()]


class ProseParser(BaseParser):
    name = "prose"
    metadata = ParserMetadata(
        priority=64,
        category=ParserCategory.TYPOGRAPHY,
        supported_patterns=("prose", "prose-{size}", "prose-invert"),
    )

    def try_parse(self, base: str) -> Properties | None:
        if base == "prose":
            return decls(
                ("color", "var(--tw-prose-body)"),
                ("max-width", "65ch"),
                ("font-size", "1rem"),
                ("line-height", "1.75"),
                *_palette(PROSE_COLORS),
            )
        if base == "prose-invert":
            return decls(*_palette(PROSE_INVERT_COLORS))
        if base.startswith("prose-") and base[6:] in PROSE_SIZES:
            size, leading = PROSE_SIZES[base[6:]]
            return decls(("font-size", size), ("line-height", leading))
        return None
