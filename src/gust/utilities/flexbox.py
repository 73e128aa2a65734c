"""Flex item and box alignment utilities."""

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
    strip_prefix,
)
from gust.values.layout import (
    ALIGN_CONTENT,
    ALIGN_ITEMS,
    ALIGN_SELF,
    FLEX,
    FLEX_DIRECTIONS,
    FLEX_WRAP,
    JUSTIFY_CONTENT,
    JUSTIFY_ITEMS,
    JUSTIFY_SELF,
    ORDER,
    PLACE_CONTENT,
    PLACE_ITEMS,
    PLACE_SELF,
)
from gust.values.sizing import FLEX_BASIS
from gust.values.spacing import FRACTIONS, SPACING


class FlexParser(BaseParser):
    """``flex-1``, ``flex-row``, ``flex-wrap``, ``grow``, ``shrink-0``, ``basis-1/2``, ``-order-1``."""

    name = "flex"
    metadata = ParserMetadata(
        priority=75,
        category=ParserCategory.FLEXBOX,
        supported_patterns=(
            "flex-{1|auto|initial|none}",
            "flex-{direction}",
            "flex-{wrap}",
            "grow",
            "shrink",
            "basis-{n}",
            "order-{n}",
        ),
    )

    def try_parse(self, base: str) -> Properties | None:
        negative, body = split_negative(base)
        if body.startswith("order-"):
            value = lookup(body[6:], ORDER)
            if value is None or (negative and body[6:] in ("first", "last", "none")):
                return None
            return decls(("order", signed(value, negative)))
        if negative:
            return None
        if base.startswith("flex-"):
            rest = base[5:]
            if rest in FLEX_DIRECTIONS:
                return decls(("flex-direction", FLEX_DIRECTIONS[rest]))
            if rest in FLEX_WRAP:
                return decls(("flex-wrap", FLEX_WRAP[rest]))
            value = lookup(rest, FLEX)
            return decls(("flex", value)) if value else None
        for prefix, prop in (("grow", "flex-grow"), ("shrink", "flex-shrink")):
            rest = strip_prefix(base, prefix)
            if rest is None:
                continue
            if rest == "":
                return decls((prop, "1"))
            if rest.isdigit():
                return decls((prop, rest))
            value = lookup(rest)
            return decls((prop, value)) if value else None
        if base.startswith("basis-"):
            value = lookup(base[6:], FLEX_BASIS, SPACING, FRACTIONS)
            return decls(("flex-basis", value)) if value else None
        return None


class AlignmentParser(BaseParser):
    """``justify-between``, ``items-center``, ``content-start``, ``self-end``, ``place-items-center``."""

    name = "alignment"
    metadata = ParserMetadata(
        priority=72,
        category=ParserCategory.FLEXBOX,
        supported_patterns=(
            "justify-{value}",
            "justify-items-{value}",
            "justify-self-{value}",
            "content-{value}",
            "items-{value}",
            "self-{value}",
            "place-content-{value}",
            "place-items-{value}",
            "place-self-{value}",
        ),
    )

    # Longest prefixes first.
    _FAMILIES: tuple[tuple[str, str, dict[str, str]], ...] = (
        ("justify-items-", "justify-items", JUSTIFY_ITEMS),
        ("justify-self-", "justify-self", JUSTIFY_SELF),
        ("justify-", "justify-content", JUSTIFY_CONTENT),
        ("place-content-", "place-content", PLACE_CONTENT),
        ("place-items-", "place-items", PLACE_ITEMS),
        ("place-self-", "place-self", PLACE_SELF),
        ("content-", "align-content", ALIGN_CONTENT),
        ("items-", "align-items", ALIGN_ITEMS),
        ("self-", "align-self", ALIGN_SELF),
    )

    def try_parse(self, base: str) -> Properties | None:
        for prefix, prop, table in self._FAMILIES:
            if base.startswith(prefix):
                value = table.get(base[len(prefix) :])
                if value is not None:
                    return decls((prop, value))
        return None
