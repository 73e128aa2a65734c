"""Fluent, typed construction of canonical class strings.

``ClassBuilder().padding(4).background_color("blue", 500, opacity=50).hover(
"scale-105")`` builds ``p-4 bg-blue-500/50 hover:scale-105``.  The builder
knows nothing about CSS; its output goes through the same string entry point
(:meth:`CssGenerator.add_classes`) as any other class list.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gust.generator import CssGenerator
    from gust.model.report import BatchReport

Value = int | float | str

SIDES: dict[str, str] = {
    "top": "t",
    "right": "r",
    "bottom": "b",
    "left": "l",
    "start": "s",
    "end": "e",
    "x": "x",
    "y": "y",
    "t": "t",
    "r": "r",
    "b": "b",
    "l": "l",
    "s": "s",
    "e": "e",
}

INSET_SIDES = {"t": "top", "r": "right", "b": "bottom", "l": "left", "s": "start", "e": "end"}

_LITERAL_RE = re.compile(r"^(#|-?\d*\.?\d+(px|rem|em|%|vh|vw|ch|ex|deg|ms|s)$)|\s|\(")


def format_value(value: Value) -> str:
    """Render *value* as the suffix of a class name.

    Scale tokens pass through, ``--name`` becomes ``(--name)`` and literal
    CSS values (lengths with units, hex colors, anything with spaces or
    function calls) become ``[...]`` with spaces written as ``_``.
    """
    if isinstance(value, bool):
        raise TypeError("Expected a scale token or CSS value, got a bool")
    if isinstance(value, (int, float)):
        return f"{value:g}"
    if value.startswith("--"):
        return f"({value})"
    if value.startswith(("[", "(")):
        return value
    if _LITERAL_RE.search(value):
        return "[" + value.replace(" ", "_") + "]"
    return value


def _side(side: str | None) -> str:
    if side is None:
        return ""
    try:
        return SIDES[side]
    except KeyError:
        raise ValueError(f"Unknown side {side!r}; expected one of {sorted(SIDES)}") from None


def color_token(color: str, shade: int | None = None, opacity: Value | None = None) -> str:
    token = format_value(color) if shade is None else f"{color}-{shade}"
    if opacity is not None:
        token += "/" + format_value(opacity)
    return token


class ClassBuilder:
    """Accumulates class strings in insertion order, without duplicates."""

    def __init__(self) -> None:
        self._classes: list[str] = []
        self._custom: dict[str, str] = {}

    # -- raw classes ----------------------------------------------------------

    def add(self, *classes: str) -> ClassBuilder:
        for cls in classes:
            for part in cls.split():
                if part not in self._classes:
                    self._classes.append(part)
        return self

    def utility(
        self, prefix: str, value: Value | None = None, *, negative: bool = False
    ) -> ClassBuilder:
        name = prefix if value is None else f"{prefix}-{format_value(value)}"
        return self.add(f"-{name}" if negative else name)

    def custom(self, name: str, value: str) -> ClassBuilder:
        """A custom property to declare alongside the classes."""
        self._custom[name if name.startswith("--") else f"--{name}"] = value
        return self

    # -- variants -------------------------------------------------------------

    def variant(self, name: str, *classes: str) -> ClassBuilder:
        """Prefix every class in *classes* with ``name:``."""
        return self.add(*(f"{name}:{cls}" for cls in classes))

    def responsive(self, breakpoint: str, *classes: str) -> ClassBuilder:
        return self.variant(breakpoint, *classes)

    def hover(self, *classes: str) -> ClassBuilder:
        return self.variant("hover", *classes)

    def focus(self, *classes: str) -> ClassBuilder:
        return self.variant("focus", *classes)

    def active(self, *classes: str) -> ClassBuilder:
        return self.variant("active", *classes)

    def dark(self, *classes: str) -> ClassBuilder:
        return self.variant("dark", *classes)

    def group_hover(self, *classes: str) -> ClassBuilder:
        return self.variant("group-hover", *classes)

    def aria(self, attribute: str, *classes: str) -> ClassBuilder:
        return self.variant(f"aria-{attribute}", *classes)

    def data(self, attribute: str, *classes: str, value: str | None = None) -> ClassBuilder:
        name = f"data-{attribute}" if value is None else f"data-[{attribute}={value}]"
        return self.variant(name, *classes)

    # -- spacing and sizing ---------------------------------------------------

    def padding(self, value: Value, side: str | None = None) -> ClassBuilder:
        return self.utility("p" + _side(side), value)

    def margin(
        self, value: Value, side: str | None = None, *, negative: bool = False
    ) -> ClassBuilder:
        return self.utility("m" + _side(side), value, negative=negative)

    def gap(self, value: Value, axis: str | None = None) -> ClassBuilder:
        return self.utility("gap" if axis is None else f"gap-{axis}", value)

    def space(self, axis: str, value: Value) -> ClassBuilder:
        return self.utility(f"space-{axis}", value)

    def width(self, value: Value) -> ClassBuilder:
        return self.utility("w", value)

    def height(self, value: Value) -> ClassBuilder:
        return self.utility("h", value)

    def size(self, value: Value) -> ClassBuilder:
        return self.utility("size", value)

    # -- layout ---------------------------------------------------------------

    def display(self, value: str) -> ClassBuilder:
        """``flex``, ``grid``, ``hidden``, ``inline-block``..."""
        return self.add(value)

    def position(self, value: str) -> ClassBuilder:
        return self.add(value)

    def inset(
        self, value: Value, side: str | None = None, *, negative: bool = False
    ) -> ClassBuilder:
        if side is None or side in ("x", "y"):
            prefix = "inset" if side is None else f"inset-{side}"
        else:
            prefix = INSET_SIDES[_side(side)]
        return self.utility(prefix, value, negative=negative)

    def z_index(self, value: Value) -> ClassBuilder:
        return self.utility("z", value)

    def justify(self, value: str) -> ClassBuilder:
        return self.utility("justify", value)

    def items(self, value: str) -> ClassBuilder:
        return self.utility("items", value)

    def grid_cols(self, value: Value) -> ClassBuilder:
        return self.utility("grid-cols", value)

    # -- typography and color -------------------------------------------------

    def text_size(self, value: Value) -> ClassBuilder:
        return self.utility("text", value)

    def font_weight(self, value: str) -> ClassBuilder:
        return self.utility("font", value)

    def text_color(
        self, color: str, shade: int | None = None, *, opacity: Value | None = None
    ) -> ClassBuilder:
        return self.add("text-" + color_token(color, shade, opacity))

    def background_color(
        self, color: str, shade: int | None = None, *, opacity: Value | None = None
    ) -> ClassBuilder:
        return self.add("bg-" + color_token(color, shade, opacity))

    def border_color(
        self, color: str, shade: int | None = None, *, opacity: Value | None = None
    ) -> ClassBuilder:
        return self.add("border-" + color_token(color, shade, opacity))

    def ring_color(
        self, color: str, shade: int | None = None, *, opacity: Value | None = None
    ) -> ClassBuilder:
        return self.add("ring-" + color_token(color, shade, opacity))

    # -- borders and effects --------------------------------------------------

    def border(self, width: Value | None = None, side: str | None = None) -> ClassBuilder:
        prefix = "border" if side is None else f"border-{_side(side)}"
        return self.utility(prefix, width)

    def rounded(self, value: Value | None = None) -> ClassBuilder:
        return self.utility("rounded", value)

    def shadow(self, value: str | None = None) -> ClassBuilder:
        return self.utility("shadow", value)

    def opacity(self, value: Value) -> ClassBuilder:
        return self.utility("opacity", value)

    def ring(self, width: Value | None = None) -> ClassBuilder:
        return self.utility("ring", width)

    # -- motion ---------------------------------------------------------------

    def transition(self, value: str | None = None) -> ClassBuilder:
        return self.utility("transition", value)

    def duration(self, ms: Value) -> ClassBuilder:
        return self.utility("duration", ms)

    def scale(self, value: Value) -> ClassBuilder:
        return self.utility("scale", value)

    def rotate(self, degrees: Value, *, negative: bool = False) -> ClassBuilder:
        return self.utility("rotate", degrees, negative=negative)

    def translate(self, axis: str, value: Value, *, negative: bool = False) -> ClassBuilder:
        return self.utility(f"translate-{axis}", value, negative=negative)

    def animate(self, name: str) -> ClassBuilder:
        return self.utility("animate", name)

    # -- output ---------------------------------------------------------------

    def classes(self) -> list[str]:
        return list(self._classes)

    def custom_properties(self) -> dict[str, str]:
        return dict(self._custom)

    def build(self) -> str:
        """The space-separated class attribute value."""
        return " ".join(self._classes)

    def apply_to(self, generator: CssGenerator) -> BatchReport:
        """Feed the classes (and custom properties) into *generator*."""
        for name, value in self._custom.items():
            generator.add_custom_property(name, value)
        return generator.add_classes(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __str__(self) -> str:
        return self.build()
