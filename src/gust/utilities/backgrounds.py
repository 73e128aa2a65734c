"""Background properties and gradient utilities (background colors live in ``colors``)."""

from __future__ import annotations

import re

from gust.arbitrary import arbitrary_value, hinted_value
from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    color_family_of,
    color_value,
    decls,
    split_negative,
    strip_prefix,
)
from gust.values.layout import POSITION_NAMES

Pairs = tuple[tuple[str, str], ...]

GRADIENT_DIRECTIONS: dict[str, str] = {
    "t": "to top",
    "tr": "to top right",
    "r": "to right",
    "br": "to bottom right",
    "b": "to bottom",
    "bl": "to bottom left",
    "l": "to left",
    "tl": "to top left",
}

IMAGE_FUNCTIONS = (
    "url(",
    "linear-gradient(",
    "radial-gradient(",
    "conic-gradient(",
    "repeating-linear-gradient(",
    "repeating-radial-gradient(",
    "image-set(",
)

GRADIENT_STOPS = "var(--tw-gradient-stops)"

_ANGLE_RE = re.compile(r"^[0-9]+$")


def _keywords() -> dict[str, Pairs]:
    table: dict[str, Pairs] = {
        "bg-fixed": (("background-attachment", "fixed"),),
        "bg-local": (("background-attachment", "local"),),
        "bg-scroll": (("background-attachment", "scroll"),),
        "bg-repeat": (("background-repeat", "repeat"),),
        "bg-no-repeat": (("background-repeat", "no-repeat"),),
        "bg-repeat-x": (("background-repeat", "repeat-x"),),
        "bg-repeat-y": (("background-repeat", "repeat-y"),),
        "bg-repeat-round": (("background-repeat", "round"),),
        "bg-repeat-space": (("background-repeat", "space"),),
        "bg-auto": (("background-size", "auto"),),
        "bg-cover": (("background-size", "cover"),),
        "bg-contain": (("background-size", "contain"),),
        "bg-none": (("background-image", "none"),),
        "bg-clip-text": (("-webkit-background-clip", "text"), ("background-clip", "text")),
    }
    for box in ("border", "padding", "content"):
        table[f"bg-clip-{box}"] = (("background-clip", f"{box}-box"),)
        table[f"bg-origin-{box}"] = (("background-origin", f"{box}-box"),)
    for name, value in POSITION_NAMES.items():
        table[f"bg-{name}"] = (("background-position", value),)
    for short, direction in GRADIENT_DIRECTIONS.items():
        image = (("background-image", f"linear-gradient({direction}, {GRADIENT_STOPS})"),)
        table[f"bg-gradient-to-{short}"] = image
        table[f"bg-linear-to-{short}"] = image
    for shape in ("radial", "conic"):
        image = (("background-image", f"{shape}-gradient({GRADIENT_STOPS})"),)
        table[f"bg-{shape}"] = image
        table[f"bg-gradient-{shape}"] = image
    return table


class BackgroundParser(BaseParser):
    """``bg-cover``, ``bg-center``, ``bg-fixed``, ``bg-linear-to-r``, ``bg-conic-90``, ``bg-[url(/img.png)]``."""

    name = "background"
    metadata = ParserMetadata(
        priority=85,
        category=ParserCategory.BACKGROUND,
        supported_patterns=(
            "bg-{attachment}",
            "bg-clip-{box}",
            "bg-origin-{box}",
            "bg-{position}",
            "bg-{repeat}",
            "bg-{size}",
            "bg-none",
            "bg-gradient-to-{side}",
            "bg-linear-to-{side}",
            "bg-linear-{angle}",
            "bg-linear-[...]",
            "bg-radial",
            "bg-radial-[...]",
            "bg-conic",
            "bg-conic-{angle}",
            "bg-[url(...)]",
        ),
    )

    KEYWORDS = _keywords()

    def try_parse(self, base: str) -> Properties | None:
        pairs = self.KEYWORDS.get(base)
        if pairs is not None:
            return decls(*pairs)
        negative, base = split_negative(base)
        for shape in ("linear", "radial", "conic"):
            body = strip_prefix(base, f"bg-{shape}")
            if body:
                image = self._gradient(shape, body, negative)
                return decls(("background-image", image)) if image else None
        if negative or not base.startswith("bg-"):
            return None
        hinted = hinted_value(base[3:])
        if hinted is None:
            return None
        hint, value = hinted
        if hint in ("url", "image") or (hint is None and value.startswith(IMAGE_FUNCTIONS)):
            return decls(("background-image", value))
        if hint == "position":
            return decls(("background-position", value))
        if hint in ("size", "length", "percentage"):
            return decls(("background-size", value))
        return None

    def _gradient(self, shape: str, body: str, negative: bool) -> str | None:
        """``45`` -> ``linear-gradient(45deg, ...)``; ``[at_top]`` -> ``radial-gradient(at top, ...)``."""
        if _ANGLE_RE.match(body):
            if shape == "radial":
                return None
            angle = f"-{body}deg" if negative and body != "0" else f"{body}deg"
            lead = angle if shape == "linear" else f"from {angle}"
            return f"{shape}-gradient({lead}, {GRADIENT_STOPS})"
        if negative:
            return None
        value = arbitrary_value(body)
        if value is None:
            return None
        return f"{shape}-gradient({value}, {GRADIENT_STOPS})"


class GradientStopParser(BaseParser):
    """``from-sky-400``, ``via-white/50``, ``to-[#f0f]``."""

    name = "gradient-stops"
    metadata = ParserMetadata(
        priority=95,
        category=ParserCategory.BACKGROUND,
        supported_patterns=("from-{color}", "via-{color}", "to-{color}"),
    )

    def _split(self, base: str) -> tuple[str, str] | None:
        for stop in ("from", "via", "to"):
            if base.startswith(stop + "-") and len(base) > len(stop) + 1:
                return stop, base[len(stop) + 1 :]
        return None

    def try_parse(self, base: str) -> Properties | None:
        split = self._split(base)
        if split is None:
            return None
        stop, body = split
        color = color_value(body)
        if color is None:
            return None
        if stop == "from":
            return decls(
                ("--tw-gradient-from", color.value),
                ("--tw-gradient-to", "transparent"),
                ("--tw-gradient-stops", "var(--tw-gradient-from), var(--tw-gradient-to)"),
            )
        if stop == "via":
            return decls(
                ("--tw-gradient-to", "transparent"),
                (
                    "--tw-gradient-stops",
                    f"var(--tw-gradient-from), {color.value}, var(--tw-gradient-to)",
                ),
            )
        return decls(("--tw-gradient-to", color.value))

    def color_family(self, base: str) -> str | None:
        split = self._split(base)
        return color_family_of(split[1]) if split else None
