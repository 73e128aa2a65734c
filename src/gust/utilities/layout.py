"""Display, position, overflow and the other box-level layout utilities."""

from __future__ import annotations

from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    decls,
    lookup,
    same_value,
    signed,
    split_negative,
)
from gust.values.layout import (
    ASPECT_RATIOS,
    BREAK_INSIDE_VALUES,
    BREAK_VALUES,
    COLUMNS,
    DISPLAY,
    OBJECT_FIT,
    OVERFLOW,
    OVERSCROLL,
    POSITION_NAMES,
    POSITIONS,
    Z_INDEX,
)
from gust.values.spacing import FRACTIONS, POSITION_KEYWORDS, SPACING

Pairs = tuple[tuple[str, str], ...]

SR_ONLY: Pairs = (
    ("position", "absolute"),
    ("width", "1px"),
    ("height", "1px"),
    ("padding", "0"),
    ("margin", "-1px"),
    ("overflow", "hidden"),
    ("clip", "rect(0, 0, 0, 0)"),
    ("white-space", "nowrap"),
    ("border-width", "0"),
)

NOT_SR_ONLY: Pairs = (
    ("position", "static"),
    ("width", "auto"),
    ("height", "auto"),
    ("padding", "0"),
    ("margin", "0"),
    ("overflow", "visible"),
    ("clip", "auto"),
    ("white-space", "normal"),
)


def _keywords() -> dict[str, Pairs]:
    table: dict[str, Pairs] = {}
    for name, value in DISPLAY.items():
        table[name] = (("display", value),)
    for name in POSITIONS:
        table[name] = (("position", name),)
    table.update(
        {
            "box-border": (("box-sizing", "border-box"),),
            "box-content": (("box-sizing", "content-box"),),
            "float-left": (("float", "left"),),
            "float-right": (("float", "right"),),
            "float-start": (("float", "inline-start"),),
            "float-end": (("float", "inline-end"),),
            "float-none": (("float", "none"),),
            "clear-left": (("clear", "left"),),
            "clear-right": (("clear", "right"),),
            "clear-both": (("clear", "both"),),
            "clear-start": (("clear", "inline-start"),),
            "clear-end": (("clear", "inline-end"),),
            "clear-none": (("clear", "none"),),
            "isolate": (("isolation", "isolate"),),
            "isolation-auto": (("isolation", "auto"),),
            "visible": (("visibility", "visible"),),
            "invisible": (("visibility", "hidden"),),
            "collapse": (("visibility", "collapse"),),
            "box-decoration-clone": (("box-decoration-break", "clone"),),
            "box-decoration-slice": (("box-decoration-break", "slice"),),
            "sr-only": SR_ONLY,
            "not-sr-only": NOT_SR_ONLY,
            "forced-color-adjust-auto": (("forced-color-adjust", "auto"),),
            "forced-color-adjust-none": (("forced-color-adjust", "none"),),
        }
    )
    for value in OBJECT_FIT:
        table[f"object-{value}"] = (("object-fit", value),)
    for name, value in POSITION_NAMES.items():
        table[f"object-{name}"] = (("object-position", value),)
    for value in OVERFLOW:
        table[f"overflow-{value}"] = (("overflow", value),)
        table[f"overflow-x-{value}"] = (("overflow-x", value),)
        table[f"overflow-y-{value}"] = (("overflow-y", value),)
    for value in OVERSCROLL:
        table[f"overscroll-{value}"] = (("overscroll-behavior", value),)
        table[f"overscroll-x-{value}"] = (("overscroll-behavior-x", value),)
        table[f"overscroll-y-{value}"] = (("overscroll-behavior-y", value),)
    for value in BREAK_VALUES:
        table[f"break-before-{value}"] = (("break-before", value),)
        table[f"break-after-{value}"] = (("break-after", value),)
    for value in BREAK_INSIDE_VALUES:
        table[f"break-inside-{value}"] = (("break-inside", value),)
    return table


class LayoutParser(BaseParser):
    """Keyword layout utilities plus ``z-*``, ``aspect-*``, ``columns-*`` and ``object-[...]``."""

    name = "layout"
    metadata = ParserMetadata(
        priority=70,
        category=ParserCategory.LAYOUT,
        supported_patterns=(
            "block",
            "flex",
            "hidden",
            "absolute",
            "overflow-{value}",
            "object-{fit}",
            "z-{n}",
            "aspect-{ratio}",
            "columns-{n}",
            "sr-only",
        ),
    )

    KEYWORDS = _keywords()

    def try_parse(self, base: str) -> Properties | None:
        pairs = self.KEYWORDS.get(base)
        if pairs is not None:
            return decls(*pairs)
        negative, body = split_negative(base)
        if body.startswith("z-"):
            value = lookup(body[2:], Z_INDEX)
            if value is None or (negative and value == "auto"):
                return None
            return decls(("z-index", signed(value, negative)))
        if negative:
            return None
        if base.startswith("aspect-"):
            value = lookup(base[7:], ASPECT_RATIOS)
            return decls(("aspect-ratio", value)) if value else None
        if base.startswith("columns-"):
            value = lookup(base[8:], COLUMNS)
            return decls(("columns", value)) if value else None
        if base.startswith("object-"):
            value = lookup(base[7:])
            return decls(("object-position", value)) if value else None
        return None


class InsetParser(BaseParser):
    """``inset-0``, ``inset-x-4``, ``top-[4px]``, ``-left-1/2``, ``start-(--x)``."""

    name = "inset"
    metadata = ParserMetadata(
        priority=80,
        category=ParserCategory.LAYOUT,
        supported_patterns=(
            "inset-{n}",
            "inset-x-{n}",
            "inset-y-{n}",
            "top-{n}",
            "right-{n}",
            "bottom-{n}",
            "left-{n}",
            "start-{n}",
            "end-{n}",
        ),
    )

    _PREFIXES: tuple[tuple[str, tuple[str, ...]], ...] = (
        ("inset-x", ("left", "right")),
        ("inset-y", ("top", "bottom")),
        ("inset", ("inset",)),
        ("top", ("top",)),
        ("right", ("right",)),
        ("bottom", ("bottom",)),
        ("left", ("left",)),
        ("start", ("inset-inline-start",)),
        ("end", ("inset-inline-end",)),
    )

    def try_parse(self, base: str) -> Properties | None:
        negative, base = split_negative(base)
        for prefix, names in self._PREFIXES:
            if base.startswith(prefix + "-"):
                body = base[len(prefix) + 1 :]
                if negative and body == "auto":
                    return None
                value = lookup(body, SPACING, FRACTIONS, POSITION_KEYWORDS)
                if value is None:
                    return None
                return same_value(names, signed(value, negative))
        return None
