"""Grid template, placement and auto-flow utilities."""

from __future__ import annotations

from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    decls,
    lookup,
)
from gust.values.layout import (
    GRID_AUTO_FLOW,
    GRID_AUTO_SIZE,
    GRID_LINE,
    GRID_SPAN,
    GRID_TEMPLATE,
)


class GridParser(BaseParser):
    """``grid-cols-3``, ``col-span-2``, ``row-start-1``, ``grid-flow-col``, ``auto-rows-fr``."""

    name = "grid"
    metadata = ParserMetadata(
        priority=70,
        category=ParserCategory.GRID,
        supported_patterns=(
            "grid-cols-{n}",
            "grid-rows-{n}",
            "col-span-{n}",
            "col-start-{n}",
            "col-end-{n}",
            "row-span-{n}",
            "row-start-{n}",
            "row-end-{n}",
            "grid-flow-{value}",
            "auto-cols-{value}",
            "auto-rows-{value}",
        ),
    )

    # prefix -> (property, tables); longest prefixes first.
    _FAMILIES: tuple[tuple[str, str, tuple[dict[str, str], ...]], ...] = (
        ("grid-cols-", "grid-template-columns", (GRID_TEMPLATE,)),
        ("grid-rows-", "grid-template-rows", (GRID_TEMPLATE,)),
        ("grid-flow-", "grid-auto-flow", (GRID_AUTO_FLOW,)),
        ("auto-cols-", "grid-auto-columns", (GRID_AUTO_SIZE,)),
        ("auto-rows-", "grid-auto-rows", (GRID_AUTO_SIZE,)),
        ("col-start-", "grid-column-start", (GRID_LINE,)),
        ("col-end-", "grid-column-end", (GRID_LINE,)),
        ("row-start-", "grid-row-start", (GRID_LINE,)),
        ("row-end-", "grid-row-end", (GRID_LINE,)),
        ("col-", "grid-column", (GRID_SPAN,)),
        ("row-", "grid-row", (GRID_SPAN,)),
    )

    def try_parse(self, base: str) -> Properties | None:
        for prefix, prop, tables in self._FAMILIES:
            if base.startswith(prefix):
                body = base[len(prefix) :]
                value = lookup(body, *tables, arbitrary=prefix != "grid-flow-")
                if value is None:
                    return None
                return decls((prop, value))
        return None
