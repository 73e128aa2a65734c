"""Color utilities: one parser per color-taking property family.

All of them share the value syntax ``<prefix>-<color>[/<alpha>]`` where
``<color>`` is a palette entry, ``[...]`` or ``(--custom)``.
"""

from __future__ import annotations

from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    color_family_of,
    color_value,
    same_value,
)

BORDER_SIDES: dict[str, tuple[str, ...]] = {
    "x": ("border-left-color", "border-right-color"),
    "y": ("border-top-color", "border-bottom-color"),
    "t": ("border-top-color",),
    "r": ("border-right-color",),
    "b": ("border-bottom-color",),
    "l": ("border-left-color",),
    "s": ("border-inline-start-color",),
    "e": ("border-inline-end-color",),
}


class ColorParser(BaseParser):
    """``bg-blue-500``, ``text-black/50``, ``border-t-[#f00]``, ``fill-(--brand)``."""

    def __init__(
        self,
        prefix: str,
        properties: tuple[str, ...],
        *,
        priority: int = 60,
        category: ParserCategory = ParserCategory.COLOR,
        sides: dict[str, tuple[str, ...]] | None = None,
        keywords: dict[str, str] | None = None,
        child_selector: str = "",
    ) -> None:
        self.name = f"{prefix}-color"
        self.prefix = prefix
        self.properties = properties
        self.sides = sides or {}
        self.keywords = keywords or {}
        patterns = [f"{prefix}-{{color}}", f"{prefix}-{{color}}/{{alpha}}"]
        patterns.extend(f"{prefix}-{side}-{{color}}" for side in self.sides)
        patterns.extend(f"{prefix}-{keyword}" for keyword in self.keywords)
        self.metadata = ParserMetadata(
            priority=priority,
            category=category,
            supported_patterns=tuple(patterns),
            child_selector=child_selector,
        )

    def _split(self, base: str) -> tuple[tuple[str, ...], str] | None:
        if not base.startswith(self.prefix + "-"):
            return None
        body = base[len(self.prefix) + 1 :]
        side, sep, rest = body.partition("-")
        if sep and side in self.sides and rest:
            return self.sides[side], rest
        return self.properties, body

    def try_parse(self, base: str) -> Properties | None:
        split = self._split(base)
        if split is None:
            return None
        names, body = split
        if body in self.keywords:
            return same_value(names, self.keywords[body])
        color = color_value(body)
        if color is None:
            return None
        return same_value(names, color.value)

    def color_family(self, base: str) -> str | None:
        split = self._split(base)
        return color_family_of(split[1]) if split else None


TEXT_COLOR = ColorParser("text", ("color",))
BACKGROUND_COLOR = ColorParser("bg", ("background-color",))
BORDER_COLOR = ColorParser("border", ("border-color",), sides=BORDER_SIDES)
OUTLINE_COLOR = ColorParser("outline", ("outline-color",))
RING_COLOR = ColorParser("ring", ("--tw-ring-color",))
RING_OFFSET_COLOR = ColorParser("ring-offset", ("--tw-ring-offset-color",), priority=62)
DECORATION_COLOR = ColorParser("decoration", ("text-decoration-color",))
ACCENT_COLOR = ColorParser("accent", ("accent-color",), keywords={"auto": "auto"})
CARET_COLOR = ColorParser("caret", ("caret-color",))
PLACEHOLDER_COLOR = ColorParser("placeholder", ("color",), child_selector="::placeholder")
FILL_COLOR = ColorParser(
    "fill", ("fill",), category=ParserCategory.SVG, keywords={"none": "none"}
)
STROKE_COLOR = ColorParser(
    "stroke", ("stroke",), category=ParserCategory.SVG, keywords={"none": "none"}
)

COLOR_PARSERS = [
    TEXT_COLOR,
    BACKGROUND_COLOR,
    BORDER_COLOR,
    OUTLINE_COLOR,
    RING_OFFSET_COLOR,
    RING_COLOR,
    DECORATION_COLOR,
    ACCENT_COLOR,
    CARET_COLOR,
    PLACEHOLDER_COLOR,
    FILL_COLOR,
    STROKE_COLOR,
]
