"""Base protocol, metadata and shared helpers for utility parsers.

A parser is a pure total function over a base class string (variants and
the important marker already stripped): it returns the CSS properties for
classes in its family and ``None`` for everything else.  Parsers never raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Protocol

from gust.arbitrary import (
    arbitrary_value,
    hinted_value,
    looks_like_color,
    negate,
    resolve_alpha,
    split_modifier,
)
from gust.model.css import CssProperty
from gust.values.colors import apply_opacity, palette_color


class ParserCategory(str, Enum):
    SPACING = "spacing"
    SIZING = "sizing"
    LAYOUT = "layout"
    FLEXBOX = "flexbox"
    GRID = "grid"
    TYPOGRAPHY = "typography"
    COLOR = "color"
    BACKGROUND = "background"
    BORDERS = "borders"
    EFFECTS = "effects"
    FILTERS = "filters"
    TRANSFORMS = "transforms"
    TRANSITIONS = "transitions"
    ANIMATIONS = "animations"
    INTERACTIVITY = "interactivity"
    SVG = "svg"
    TABLES = "tables"
    ARBITRARY = "arbitrary"


@dataclass(frozen=True)
class ParserMetadata:
    """Static description of a parser, used for dispatch order and diagnostics."""

    priority: int
    category: ParserCategory
    supported_patterns: tuple[str, ...] = ()
    # Appended to the class selector, e.g. ``space-x-*`` targets siblings.
    child_selector: str = ""


Properties = list[CssProperty]


class UtilityParser(Protocol):
    """A family of utility classes."""

    name: str
    metadata: ParserMetadata

    def try_parse(self, base: str) -> Properties | None: ...

    def color_family(self, base: str) -> str | None: ...


class BaseParser:
    """Convenience base: subclasses set ``name``/``metadata`` and implement ``try_parse``."""

    name: str = ""
    metadata: ParserMetadata

    def color_family(self, base: str) -> str | None:
        """Palette family a class draws from, for ``color_palettes`` filtering."""
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} priority={self.metadata.priority}>"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def decl(name: str, value: str) -> CssProperty:
    return CssProperty(name, value)


def decls(*pairs: tuple[str, str]) -> Properties:
    return [CssProperty(name, value) for name, value in pairs]


def same_value(names: tuple[str, ...], value: str) -> Properties:
    return [CssProperty(name, value) for name in names]


def split_negative(base: str) -> tuple[bool, str]:
    """``-m-4`` -> ``(True, "m-4")``.  A lone ``-`` is not negative."""
    if len(base) > 1 and base[0] == "-" and base[1] != "-":
        return True, base[1:]
    return False, base


def strip_prefix(base: str, prefix: str) -> str | None:
    """``p-4`` with prefix ``p`` -> ``4``; bare ``p`` -> ``""``; other -> None."""
    if base == prefix:
        return ""
    if base.startswith(prefix + "-"):
        return base[len(prefix) + 1 :]
    return None


def lookup(body: str, *tables: Mapping[str, str], arbitrary: bool = True) -> str | None:
    """Scale lookup across *tables*, then the ``[...]``/``(...)`` forms."""
    for table in tables:
        if body in table:
            return table[body]
    if arbitrary:
        return arbitrary_value(body)
    return None


def signed(value: str | None, negative: bool) -> str | None:
    if value is None or not negative:
        return value
    return negate(value)


@dataclass(frozen=True)
class ResolvedColor:
    value: str
    family: str | None = None


def color_value(body: str) -> ResolvedColor | None:
    """Resolve ``blue-500``, ``black/50``, ``[#0af]/25``, ``(--brand)/(--alpha)``.

    Bracketed values are only colors when they look like one (or carry the
    ``color:`` hint), so ``text-[14px]`` is left for the font-size parser.
    """
    name, modifier = split_modifier(body)
    family: str | None = None
    found = palette_color(name)
    if found is not None:
        family, value = found
    else:
        hinted = hinted_value(name)
        if hinted is None:
            return None
        hint, value = hinted
        if hint is None:
            if not (value.startswith("var(") or looks_like_color(value)):
                return None
        elif hint != "color":
            return None
    if modifier is not None:
        alpha = resolve_alpha(modifier)
        if alpha is None:
            return None
        value = apply_opacity(value, alpha)
    return ResolvedColor(value, family)


def color_family_of(body: str) -> str | None:
    name, _ = split_modifier(body)
    found = palette_color(name)
    return found[0] if found else None
