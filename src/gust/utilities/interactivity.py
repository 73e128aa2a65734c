"""Cursor, pointer, scroll, touch and selection utilities."""

from __future__ import annotations

from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    decls,
    lookup,
)
from gust.utilities.spacing import BoxSpacingParser

Pairs = tuple[tuple[str, str], ...]

CURSORS = (
    "auto", "default", "pointer", "wait", "text", "move", "help", "not-allowed",
    "none", "context-menu", "progress", "cell", "crosshair", "vertical-text",
    "alias", "copy", "no-drop", "grab", "grabbing", "all-scroll", "col-resize",
    "row-resize", "n-resize", "e-resize", "s-resize", "w-resize", "ne-resize",
    "nw-resize", "se-resize", "sw-resize", "ew-resize", "ns-resize",
    "nesw-resize", "nwse-resize", "zoom-in", "zoom-out",
)

TOUCH_ACTIONS = (
    "auto", "none", "pan-x", "pan-left", "pan-right", "pan-y", "pan-up",
    "pan-down", "pinch-zoom", "manipulation",
)

_CURSOR_VALUES = {cursor: cursor for cursor in CURSORS}

SNAP_STRICTNESS = "var(--tw-scroll-snap-strictness, proximity)"


def _keywords() -> dict[str, Pairs]:
    table: dict[str, Pairs] = {
        "pointer-events-none": (("pointer-events", "none"),),
        "pointer-events-auto": (("pointer-events", "auto"),),
        "resize": (("resize", "both"),),
        "resize-none": (("resize", "none"),),
        "resize-x": (("resize", "horizontal"),),
        "resize-y": (("resize", "vertical"),),
        "scroll-auto": (("scroll-behavior", "auto"),),
        "scroll-smooth": (("scroll-behavior", "smooth"),),
        "snap-start": (("scroll-snap-align", "start"),),
        "snap-end": (("scroll-snap-align", "end"),),
        "snap-center": (("scroll-snap-align", "center"),),
        "snap-align-none": (("scroll-snap-align", "none"),),
        "snap-normal": (("scroll-snap-stop", "normal"),),
        "snap-always": (("scroll-snap-stop", "always"),),
        "snap-none": (("scroll-snap-type", "none"),),
        "snap-x": (("scroll-snap-type", f"x {SNAP_STRICTNESS}"),),
        "snap-y": (("scroll-snap-type", f"y {SNAP_STRICTNESS}"),),
        "snap-both": (("scroll-snap-type", f"both {SNAP_STRICTNESS}"),),
        "snap-mandatory": (("--tw-scroll-snap-strictness", "mandatory"),),
        "snap-proximity": (("--tw-scroll-snap-strictness", "proximity"),),
        "appearance-none": (("appearance", "none"),),
        "appearance-auto": (("appearance", "auto"),),
        "will-change-auto": (("will-change", "auto"),),
        "will-change-scroll": (("will-change", "scroll-position"),),
        "will-change-contents": (("will-change", "contents"),),
        "will-change-transform": (("will-change", "transform"),),
    }
    for select in ("none", "text", "all", "auto"):
        table[f"select-{select}"] = (
            ("-webkit-user-select", select),
            ("user-select", select),
        )
    for action in TOUCH_ACTIONS:
        table[f"touch-{action}"] = (("touch-action", action),)
    return table


class InteractivityParser(BaseParser):
    """``cursor-pointer``, ``select-none``, ``snap-x``, ``touch-pan-y``, ``will-change-transform``."""

    name = "interactivity"
    metadata = ParserMetadata(
        priority=55,
        category=ParserCategory.INTERACTIVITY,
        supported_patterns=(
            "cursor-{value}",
            "pointer-events-{none|auto}",
            "resize",
            "scroll-{auto|smooth}",
            "snap-{value}",
            "touch-{value}",
            "select-{value}",
            "will-change-{value}",
            "appearance-{none|auto}",
        ),
    )

    KEYWORDS = _keywords()

    def try_parse(self, base: str) -> Properties | None:
        pairs = self.KEYWORDS.get(base)
        if pairs is not None:
            return decls(*pairs)
        if base.startswith("cursor-"):
            value = lookup(base[7:], _CURSOR_VALUES)
            return decls(("cursor", value)) if value else None
        if base.startswith("will-change-"):
            value = lookup(base[12:])
            return decls(("will-change", value)) if value else None
        return None


SCROLL_MARGIN = BoxSpacingParser(
    "m",
    "scroll-margin",
    ParserMetadata(
        priority=55,
        category=ParserCategory.INTERACTIVITY,
        supported_patterns=("scroll-m-{n}", "scroll-mx-{n}", "scroll-mt-{n}", "-scroll-m-{n}"),
    ),
    allow_negative=True,
    prefix="scroll-",
)

SCROLL_PADDING = BoxSpacingParser(
    "p",
    "scroll-padding",
    ParserMetadata(
        priority=55,
        category=ParserCategory.INTERACTIVITY,
        supported_patterns=("scroll-p-{n}", "scroll-px-{n}", "scroll-pt-{n}"),
    ),
    allow_negative=False,
    prefix="scroll-",
)
