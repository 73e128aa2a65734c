"""Transform utilities: scale, rotate, translate, skew and origin.

Each class emits a complete ``transform`` value (``scale(1.05)``,
``translateX(-50%)``) rather than composing through custom properties.
"""

from __future__ import annotations

from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    decls,
    lookup,
    signed,
    split_negative,
)
from gust.values.motion import ROTATE, SCALE, SKEW, TRANSFORM_ORIGINS
from gust.values.spacing import FRACTIONS, POSITION_KEYWORDS, SPACING

_TRANSLATE = ({"full": POSITION_KEYWORDS["full"]}, SPACING, FRACTIONS)

# prefix -> (css function, tables); longest prefixes first.
_FUNCTIONS: tuple[tuple[str, str, tuple[dict[str, str], ...]], ...] = (
    ("scale-x-", "scaleX", (SCALE,)),
    ("scale-y-", "scaleY", (SCALE,)),
    ("scale-", "scale", (SCALE,)),
    ("rotate-", "rotate", (ROTATE,)),
    ("translate-x-", "translateX", _TRANSLATE),
    ("translate-y-", "translateY", _TRANSLATE),
    ("skew-x-", "skewX", (SKEW,)),
    ("skew-y-", "skewY", (SKEW,)),
)


class TransformParser(BaseParser):
    """``scale-105``, ``-rotate-45``, ``translate-x-1/2``, ``skew-y-3``, ``origin-top-left``."""

    name = "transform"
    metadata = ParserMetadata(
        priority=90,
        category=ParserCategory.TRANSFORMS,
        supported_patterns=(
            "scale-{n}",
            "scale-x-{n}",
            "scale-y-{n}",
            "rotate-{deg}",
            "translate-x-{n}",
            "translate-y-{n}",
            "skew-x-{deg}",
            "skew-y-{deg}",
            "origin-{position}",
            "transform-gpu",
            "transform-none",
        ),
    )

    def try_parse(self, base: str) -> Properties | None:
        if base == "transform-gpu":
            return decls(("transform", "translateZ(0)"))
        if base == "transform-none":
            return decls(("transform", "none"))
        if base.startswith("origin-"):
            value = lookup(base[7:], TRANSFORM_ORIGINS)
            return decls(("transform-origin", value)) if value else None
        negative, body = split_negative(base)
        for prefix, function, tables in _FUNCTIONS:
            if body.startswith(prefix):
                value = signed(lookup(body[len(prefix) :], *tables), negative)
                if value is None:
                    return None
                return decls(("transform", f"{function}({value})"))
        return None
