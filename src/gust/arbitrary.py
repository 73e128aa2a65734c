"""Arbitrary ``[...]`` values and ``(--custom-property)`` references.

These helpers only strip the wrapper; opacity modifiers and negation are
layered on by the calling parser.  Nothing here validates CSS syntax: a
bracketed value is passed through as written.
"""

from __future__ import annotations

import math
import re

from gust.values.colors import alpha_from_percent

# Type hints accepted before an arbitrary value: ``text-[length:2em]``.
TYPE_HINTS = frozenset(
    {
        "color",
        "length",
        "percentage",
        "number",
        "integer",
        "url",
        "image",
        "position",
        "size",
        "family-name",
        "line-width",
        "absolute-size",
        "relative-size",
        "shadow",
        "angle",
        "any",
    }
)

_COLOR_FUNCTIONS = (
    "rgb(",
    "rgba(",
    "hsl(",
    "hsla(",
    "hwb(",
    "lab(",
    "lch(",
    "oklab(",
    "oklch(",
    "color(",
    "color-mix(",
)

# CSS named colors that commonly appear in arbitrary values.
_CSS_COLOR_NAMES = frozenset(
    {
        "black", "silver", "gray", "grey", "white", "maroon", "red", "purple",
        "fuchsia", "green", "lime", "olive", "yellow", "navy", "blue", "teal",
        "aqua", "orange", "pink", "gold", "indigo", "violet", "brown", "cyan",
        "magenta", "tomato", "coral", "salmon", "crimson", "khaki", "tan",
        "transparent", "currentcolor", "rebeccapurple",
    }
)

_LENGTH_RE = re.compile(
    r"^-?(\d+\.?\d*|\.\d+)(px|rem|em|ex|ch|vw|vh|vmin|vmax|svh|lvh|dvh|svw|lvw|dvw"
    r"|cm|mm|in|pt|pc|q|%)?$",
    re.IGNORECASE,
)
_PERCENT_RE = re.compile(r"^\d{1,3}$")
_ZERO_RE = re.compile(r"^0(\.0+)?[a-z%]*$")


def _is_wrapped(body: str, opener: str, closer: str) -> bool:
    if len(body) < 2 or body[0] != opener or body[-1] != closer:
        return False
    depth = 0
    for i, ch in enumerate(body):
        if ch in "[(":
            depth += 1
        elif ch in "])":
            depth -= 1
            # The opening wrapper must close only at the very end.
            if depth == 0 and i != len(body) - 1:
                return False
            if depth < 0:
                return False
    return depth == 0


def decode_underscores(value: str) -> str:
    """``_`` stands for a space; ``\\_`` is a literal underscore."""
    return re.sub(r"(?<!\\)_", " ", value).replace("\\_", "_")


def strip_arbitrary(body: str, *, underscores: bool = True) -> str | None:
    """``[4px]`` -> ``4px``; ``[0_0_2px_red]`` -> ``0 0 2px red``.

    Returns None if *body* is not a single bracketed value.
    """
    if not _is_wrapped(body, "[", "]"):
        return None
    inner = body[1:-1]
    if not inner:
        return None
    if underscores and not inner.startswith(("url(", "--")):
        inner = decode_underscores(inner)
    return inner


def strip_custom_property(body: str) -> str | None:
    """``(--my-width)`` -> ``var(--my-width)``."""
    if not _is_wrapped(body, "(", ")"):
        return None
    inner = body[1:-1]
    _, inner = split_type_hint(inner)
    if not inner.startswith("--") or len(inner) <= 2:
        return None
    return f"var({inner})"


def split_type_hint(value: str) -> tuple[str | None, str]:
    """``length:2em`` -> ``("length", "2em")``; values without a hint pass through."""
    hint, sep, rest = value.partition(":")
    if sep and hint in TYPE_HINTS and rest:
        return hint, rest
    return None, value


def arbitrary_value(body: str, *, underscores: bool = True) -> str | None:
    """Resolve either wrapper form, dropping any type hint."""
    value = strip_arbitrary(body, underscores=underscores)
    if value is not None:
        return split_type_hint(value)[1]
    return strip_custom_property(body)


def hinted_value(body: str) -> tuple[str | None, str] | None:
    """Like :func:`arbitrary_value` but keep the type hint for disambiguation."""
    value = strip_arbitrary(body)
    if value is not None:
        return split_type_hint(value)
    if _is_wrapped(body, "(", ")"):
        hint, inner = split_type_hint(body[1:-1])
        prop = strip_custom_property(f"({inner})")
        if prop is not None:
            return hint, prop
    return None


def split_modifier(body: str) -> tuple[str, str | None]:
    """Split ``red-500/50`` at the last top-level ``/``."""
    depth = 0
    for i in range(len(body) - 1, -1, -1):
        ch = body[i]
        if ch in ")]":
            depth += 1
        elif ch in "([":
            depth -= 1
        elif ch == "/" and depth == 0:
            if i == 0 or i == len(body) - 1:
                return body, None
            return body[:i], body[i + 1 :]
    return body, None


def resolve_alpha(modifier: str) -> str | None:
    """``50`` -> ``0.5``, ``[.25]`` -> ``.25``, ``(--a)`` -> ``var(--a)``."""
    if _PERCENT_RE.match(modifier):
        percent = int(modifier)
        if percent > 100:
            return None
        return alpha_from_percent(percent)
    value = arbitrary_value(modifier)
    if value is None:
        return None
    if value.endswith("%"):
        try:
            percent = float(value[:-1])
        except ValueError:
            return value
        if not math.isfinite(percent) or not 0 <= percent <= 100:
            return None
        return f"{percent / 100:g}"
    return value


def looks_like_color(value: str) -> bool:
    lowered = value.lower()
    return (
        lowered.startswith("#")
        or lowered.startswith(_COLOR_FUNCTIONS)
        or lowered in _CSS_COLOR_NAMES
    )


def looks_like_length(value: str) -> bool:
    return bool(_LENGTH_RE.match(value)) or value.startswith(("calc(", "clamp(", "min(", "max("))


def negate(value: str) -> str:
    """Negate a CSS value: lengths get a ``-`` prefix, functions become ``calc(v * -1)``."""
    if _ZERO_RE.match(value):
        return value
    if value.startswith("-") and not value.startswith("--"):
        return value[1:]
    if value.startswith(("var(", "calc(", "min(", "max(", "clamp(")):
        return f"calc({value} * -1)"
    return f"-{value}"
