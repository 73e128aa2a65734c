"""SVG stroke width (fill/stroke colors live in ``colors``)."""

from __future__ import annotations

from gust.arbitrary import hinted_value, looks_like_length
from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    decls,
)

STROKE_WIDTHS = ("0", "1", "2")


class StrokeWidthParser(BaseParser):
    name = "stroke-width"
    metadata = ParserMetadata(
        priority=62,
        category=ParserCategory.SVG,
        supported_patterns=("stroke-{0|1|2}", "stroke-[length]"),
    )

    def try_parse(self, base: str) -> Properties | None:
        if not base.startswith("stroke-"):
            return None
        body = base[7:]
        if body in STROKE_WIDTHS:
            return decls(("stroke-width", body))
        hinted = hinted_value(body)
        if hinted is None:
            return None
        hint, value = hinted
        if hint in ("length", "number", "percentage") or (hint is None and looks_like_length(value)):
            return decls(("stroke-width", value))
        return None
