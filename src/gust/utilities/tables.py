"""Table layout utilities."""

from __future__ import annotations

from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    decls,
    lookup,
)
from gust.values.spacing import SPACING

_KEYWORDS: dict[str, tuple[str, str]] = {
    "border-collapse": ("border-collapse", "collapse"),
    "border-separate": ("border-collapse", "separate"),
    "table-auto": ("table-layout", "auto"),
    "table-fixed": ("table-layout", "fixed"),
    "caption-top": ("caption-side", "top"),
    "caption-bottom": ("caption-side", "bottom"),
}


class TableParser(BaseParser):
    """``border-collapse``, ``table-fixed``, ``caption-top``, ``border-spacing-2``, ``border-spacing-x-4``."""

    name = "table"
    metadata = ParserMetadata(
        priority=82,
        category=ParserCategory.TABLES,
        supported_patterns=(
            "border-collapse",
            "border-separate",
            "border-spacing-{n}",
            "border-spacing-x-{n}",
            "border-spacing-y-{n}",
            "table-auto",
            "table-fixed",
            "caption-{top|bottom}",
        ),
    )

    def try_parse(self, base: str) -> Properties | None:
        if base in _KEYWORDS:
            return decls(_KEYWORDS[base])
        for axis in ("x", "y"):
            prefix = f"border-spacing-{axis}-"
            if base.startswith(prefix):
                value = lookup(base[len(prefix) :], SPACING)
                if value is None:
                    return None
                return decls(
                    (f"--tw-border-spacing-{axis}", value),
                    (
                        "border-spacing",
                        "var(--tw-border-spacing-x, 0) var(--tw-border-spacing-y, 0)",
                    ),
                )
        if base.startswith("border-spacing-"):
            value = lookup(base[15:], SPACING)
            return decls(("border-spacing", value)) if value else None
        return None
