"""Border width/style/radius, outline, ring and divide utilities."""

from __future__ import annotations

from gust.arbitrary import hinted_value, looks_like_length
from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    color_family_of,
    color_value,
    decls,
    lookup,
    same_value,
    strip_prefix,
)
from gust.utilities.spacing import SIBLINGS_SELECTOR
from gust.values.effects import (
    BORDER_RADIUS,
    BORDER_STYLES,
    BORDER_WIDTHS,
    OUTLINE_OFFSETS,
    OUTLINE_WIDTHS,
    RING_OFFSETS,
    RING_WIDTHS,
)

DEFAULT_RING_COLOR = "rgb(59 130 246 / 0.5)"

WIDTH_SIDES: dict[str, tuple[str, ...]] = {
    "x": ("border-left-width", "border-right-width"),
    "y": ("border-top-width", "border-bottom-width"),
    "t": ("border-top-width",),
    "r": ("border-right-width",),
    "b": ("border-bottom-width",),
    "l": ("border-left-width",),
    "s": ("border-inline-start-width",),
    "e": ("border-inline-end-width",),
}

RADIUS_SIDES: dict[str, tuple[str, ...]] = {
    "t": ("border-top-left-radius", "border-top-right-radius"),
    "r": ("border-top-right-radius", "border-bottom-right-radius"),
    "b": ("border-bottom-right-radius", "border-bottom-left-radius"),
    "l": ("border-top-left-radius", "border-bottom-left-radius"),
    "tl": ("border-top-left-radius",),
    "tr": ("border-top-right-radius",),
    "br": ("border-bottom-right-radius",),
    "bl": ("border-bottom-left-radius",),
    "s": ("border-start-start-radius", "border-end-start-radius"),
    "e": ("border-start-end-radius", "border-end-end-radius"),
    "ss": ("border-start-start-radius",),
    "se": ("border-start-end-radius",),
    "ee": ("border-end-end-radius",),
    "es": ("border-end-start-radius",),
}


def length_value(body: str, table: dict[str, str]) -> str | None:
    """Table entry, or a bracketed/custom value that is a length."""
    if body in table:
        return table[body]
    hinted = hinted_value(body)
    if hinted is None:
        return None
    hint, value = hinted
    if hint in ("length", "line-width", "percentage"):
        return value
    if hint is None and looks_like_length(value):
        return value
    return None


class BorderWidthParser(BaseParser):
    """``border``, ``border-2``, ``border-x-4``, ``border-t``, ``border-dashed``, ``border-[3px]``."""

    name = "border-width"
    metadata = ParserMetadata(
        priority=80,
        category=ParserCategory.BORDERS,
        supported_patterns=(
            "border",
            "border-{width}",
            "border-{side}",
            "border-{side}-{width}",
            "border-{style}",
        ),
    )

    def try_parse(self, base: str) -> Properties | None:
        body = strip_prefix(base, "border")
        if body is None:
            return None
        if body in BORDER_STYLES:
            return decls(("border-style", body))
        names: tuple[str, ...] = ("border-width",)
        side, _, rest = body.partition("-")
        if side in WIDTH_SIDES:
            names, body = WIDTH_SIDES[side], rest
        value = length_value(body, BORDER_WIDTHS)
        if value is None:
            return None
        return same_value(names, value)


class BorderRadiusParser(BaseParser):
    """``rounded``, ``rounded-lg``, ``rounded-t-xl``, ``rounded-bl-none``, ``rounded-[12px]``."""

    name = "border-radius"
    metadata = ParserMetadata(
        priority=50,
        category=ParserCategory.BORDERS,
        supported_patterns=("rounded", "rounded-{size}", "rounded-{corner}", "rounded-{corner}-{size}"),
    )

    def try_parse(self, base: str) -> Properties | None:
        body = strip_prefix(base, "rounded")
        if body is None:
            return None
        names: tuple[str, ...] = ("border-radius",)
        side, _, rest = body.partition("-")
        if side in RADIUS_SIDES:
            names, body = RADIUS_SIDES[side], rest
        value = lookup(body, BORDER_RADIUS)
        if value is None:
            return None
        return same_value(names, value)


class OutlineParser(BaseParser):
    """``outline``, ``outline-none``, ``outline-2``, ``outline-dashed``, ``outline-offset-4``."""

    name = "outline"
    metadata = ParserMetadata(
        priority=80,
        category=ParserCategory.BORDERS,
        supported_patterns=("outline", "outline-none", "outline-{style}", "outline-{width}", "outline-offset-{n}"),
    )

    _STYLES = ("dashed", "dotted", "double")

    def try_parse(self, base: str) -> Properties | None:
        if base == "outline":
            return decls(("outline-style", "solid"))
        if base == "outline-none":
            return decls(("outline", "2px solid transparent"), ("outline-offset", "2px"))
        if base.startswith("outline-offset-"):
            value = length_value(base[15:], OUTLINE_OFFSETS)
            return decls(("outline-offset", value)) if value else None
        if not base.startswith("outline-"):
            return None
        body = base[8:]
        if body in self._STYLES:
            return decls(("outline-style", body))
        value = length_value(body, OUTLINE_WIDTHS)
        return decls(("outline-width", value)) if value else None


class RingParser(BaseParser):
    """``ring``, ``ring-2``, ``ring-inset``, ``ring-offset-2``, ``ring-[5px]``."""

    name = "ring"
    metadata = ParserMetadata(
        priority=85,
        category=ParserCategory.BORDERS,
        supported_patterns=("ring", "ring-{width}", "ring-inset", "ring-offset-{width}"),
    )

    def try_parse(self, base: str) -> Properties | None:
        if base == "ring-inset":
            return decls(("--tw-ring-inset", "inset"))
        if base.startswith("ring-offset-"):
            value = length_value(base[12:], RING_OFFSETS)
            return decls(("--tw-ring-offset-width", value)) if value else None
        body = strip_prefix(base, "ring")
        if body is None:
            return None
        width = length_value(body, RING_WIDTHS)
        if width is None:
            return None
        return decls(
            (
                "box-shadow",
                f"var(--tw-ring-inset,) 0 0 0 calc({width} + var(--tw-ring-offset-width, 0px)) "
                f"var(--tw-ring-color, {DEFAULT_RING_COLOR})",
            )
        )


class DivideParser(BaseParser):
    """Borders between children: ``divide-x``, ``divide-y-2``, ``divide-dashed``, ``divide-gray-200``."""

    name = "divide"
    metadata = ParserMetadata(
        priority=85,
        category=ParserCategory.BORDERS,
        supported_patterns=(
            "divide-x",
            "divide-y",
            "divide-x-{width}",
            "divide-y-{width}",
            "divide-x-reverse",
            "divide-{style}",
            "divide-{color}",
        ),
        child_selector=SIBLINGS_SELECTOR,
    )

    _EDGES = {
        "x": ("border-right-width", "border-left-width"),
        "y": ("border-bottom-width", "border-top-width"),
    }

    def try_parse(self, base: str) -> Properties | None:
        body = strip_prefix(base, "divide")
        if not body:
            return None
        axis, _, rest = body.partition("-")
        if axis in self._EDGES:
            reverse = f"--tw-divide-{axis}-reverse"
            if rest == "reverse":
                return decls((reverse, "1"))
            width = length_value(rest, BORDER_WIDTHS)
            if width is None:
                return None
            end, start = self._EDGES[axis]
            return decls(
                (reverse, "0"),
                (end, f"calc({width} * var({reverse}))"),
                (start, f"calc({width} * calc(1 - var({reverse})))"),
            )
        if body in BORDER_STYLES:
            return decls(("border-style", body))
        color = color_value(body)
        if color is None:
            return None
        return decls(("border-color", color.value))

    def color_family(self, base: str) -> str | None:
        body = strip_prefix(base, "divide")
        return color_family_of(body) if body else None
