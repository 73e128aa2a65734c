"""Mask utilities: ``mask-*`` properties, mask images and gradient masks."""

from __future__ import annotations

import re

from gust.arbitrary import arbitrary_value, hinted_value
from gust.utilities.backgrounds import IMAGE_FUNCTIONS
from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    decls,
    lookup,
    split_negative,
    strip_prefix,
)
from gust.values.layout import POSITION_NAMES
from gust.values.spacing import SPACING

Pairs = tuple[tuple[str, str], ...]

_ANGLE_RE = re.compile(r"^[0-9]+$")
_PERCENT_RE = re.compile(r"^[0-9]+(\.[0-9]+)?%$")


def _fade(direction: str, name: str) -> str:
    return (
        f"linear-gradient({direction}, black var(--tw-mask-{name}-from, 0%), "
        f"transparent var(--tw-mask-{name}-to, 100%))"
    )


# Gradient masks keyed by class infix: (custom property stem, mask-image, intersect?).
# ``from``/``to`` classes set the stem's stop; angle classes set ``--tw-mask-<stem>-angle``.
GRADIENT_MASKS: dict[str, tuple[str, str, bool]] = {
    "linear": (
        "linear",
        "linear-gradient(var(--tw-mask-linear-angle, 180deg), "
        "black var(--tw-mask-linear-from, 0%), transparent var(--tw-mask-linear-to, 100%))",
        False,
    ),
    "radial": (
        "radial",
        "radial-gradient(black var(--tw-mask-radial-from, 0%), "
        "transparent var(--tw-mask-radial-to, 100%))",
        False,
    ),
    "conic": (
        "conic",
        "conic-gradient(from var(--tw-mask-conic-angle, 0deg), "
        "black var(--tw-mask-conic-from, 0%), transparent var(--tw-mask-conic-to, 100%))",
        False,
    ),
    "t": ("top", _fade("to top", "top"), False),
    "r": ("right", _fade("to right", "right"), False),
    "b": ("bottom", _fade("to bottom", "bottom"), False),
    "l": ("left", _fade("to left", "left"), False),
    "x": ("x", f"{_fade('to right', 'x')}, {_fade('to left', 'x')}", True),
    "y": ("y", f"{_fade('to bottom', 'y')}, {_fade('to top', 'y')}", True),
}

MASK_POSITIONS: dict[str, str] = {
    **POSITION_NAMES,
    "top-left": "left top",
    "top-right": "right top",
    "bottom-left": "left bottom",
    "bottom-right": "right bottom",
}


def _keywords() -> dict[str, Pairs]:
    table: dict[str, Pairs] = {
        "mask-none": (("mask-image", "none"),),
        "mask-alpha": (("mask-mode", "alpha"),),
        "mask-luminance": (("mask-mode", "luminance"),),
        "mask-match": (("mask-mode", "match-source"),),
        "mask-type-alpha": (("mask-type", "alpha"),),
        "mask-type-luminance": (("mask-type", "luminance"),),
        "mask-repeat": (("mask-repeat", "repeat"),),
        "mask-no-repeat": (("mask-repeat", "no-repeat"),),
        "mask-repeat-x": (("mask-repeat", "repeat-x"),),
        "mask-repeat-y": (("mask-repeat", "repeat-y"),),
        "mask-repeat-round": (("mask-repeat", "round"),),
        "mask-repeat-space": (("mask-repeat", "space"),),
        "mask-auto": (("mask-size", "auto"),),
        "mask-cover": (("mask-size", "cover"),),
        "mask-contain": (("mask-size", "contain"),),
        "mask-no-clip": (("mask-clip", "no-clip"),),
    }
    for mode in ("add", "subtract", "intersect", "exclude"):
        table[f"mask-{mode}"] = (("mask-composite", mode),)
    for box in ("border", "padding", "content", "fill", "stroke", "view"):
        table[f"mask-origin-{box}"] = (("mask-origin", f"{box}-box"),)
        table[f"mask-clip-{box}"] = (("mask-clip", f"{box}-box"),)
    for name, value in MASK_POSITIONS.items():
        table[f"mask-{name}"] = (("mask-position", value),)
    return table


def _stop_value(body: str) -> str | None:
    if _PERCENT_RE.match(body):
        return body
    return lookup(body, SPACING)


class MaskParser(BaseParser):
    """``mask-none``, ``mask-[url(/m.svg)]``, ``mask-t-from-50%``, ``mask-radial-to-80%``, ``mask-linear-45``."""

    name = "mask"
    metadata = ParserMetadata(
        priority=84,
        category=ParserCategory.EFFECTS,
        supported_patterns=(
            "mask-none",
            "mask-[...]",
            "mask-(...)",
            "mask-{mode}",
            "mask-type-{type}",
            "mask-{repeat}",
            "mask-{size}",
            "mask-size-[...]",
            "mask-{position}",
            "mask-position-[...]",
            "mask-origin-{box}",
            "mask-clip-{box}",
            "mask-{composite}",
            "mask-linear-{angle}",
            "mask-conic-{angle}",
            "mask-{linear|radial|conic}-{from|to}-{value}",
            "mask-{side}-{from|to}-{value}",
        ),
    )

    KEYWORDS = _keywords()

    def try_parse(self, base: str) -> Properties | None:
        pairs = self.KEYWORDS.get(base)
        if pairs is not None:
            return decls(*pairs)
        negative, base = split_negative(base)
        body = strip_prefix(base, "mask")
        if not body:
            return None
        angle = self._angle(body, negative)
        if angle is not None or negative:
            return angle
        stop = self._stop(body)
        if stop is not None:
            return stop
        for prefix, prop in (("position", "mask-position"), ("size", "mask-size")):
            rest = strip_prefix(body, prefix)
            if rest:
                value = arbitrary_value(rest)
                return decls((prop, value)) if value else None
        return self._image(body)

    def _angle(self, body: str, negative: bool) -> Properties | None:
        for shape in ("linear", "conic"):
            rest = strip_prefix(body, shape)
            if rest and _ANGLE_RE.match(rest):
                angle = f"-{rest}deg" if negative and rest != "0" else f"{rest}deg"
                return decls(
                    (f"--tw-mask-{shape}-angle", angle),
                    ("mask-image", GRADIENT_MASKS[shape][1]),
                )
        return None

    def _stop(self, body: str) -> Properties | None:
        for infix, (stem, image, intersect) in GRADIENT_MASKS.items():
            for stop in ("from", "to"):
                rest = strip_prefix(body, f"{infix}-{stop}")
                if not rest:
                    continue
                value = _stop_value(rest)
                if value is None:
                    return None
                pairs = [(f"--tw-mask-{stem}-{stop}", value), ("mask-image", image)]
                if intersect:
                    pairs.append(("mask-composite", "intersect"))
                return decls(*pairs)
        return None

    def _image(self, body: str) -> Properties | None:
        hinted = hinted_value(body)
        if hinted is None:
            return None
        hint, value = hinted
        if hint in ("url", "image") or (hint is None and value.startswith((*IMAGE_FUNCTIONS, "var("))):
            return decls(("mask-image", value))
        if hint == "position":
            return decls(("mask-position", value))
        if hint in ("size", "length", "percentage"):
            return decls(("mask-size", value))
        return None
