"""Padding, margin, space-between and gap utilities."""

from __future__ import annotations

from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    decls,
    lookup,
    same_value,
    signed,
    split_negative,
)
from gust.values.spacing import POSITION_KEYWORDS, SPACING

# Children of a space-x / divide-x container, skipping the first.
SIBLINGS_SELECTOR = " > :not([hidden]) ~ :not([hidden])"


def _sides(prop: str) -> dict[str, tuple[str, ...]]:
    return {
        "": (prop,),
        "x": (f"{prop}-left", f"{prop}-right"),
        "y": (f"{prop}-top", f"{prop}-bottom"),
        "t": (f"{prop}-top",),
        "r": (f"{prop}-right",),
        "b": (f"{prop}-bottom",),
        "l": (f"{prop}-left",),
        "s": (f"{prop}-inline-start",),
        "e": (f"{prop}-inline-end",),
    }


class BoxSpacingParser(BaseParser):
    """``p-4``, ``px-2``, ``-mt-8``, ``m-auto``, ``pl-[3px]``, ``m-(--gutter)``."""

    def __init__(
        self,
        letter: str,
        prop: str,
        metadata: ParserMetadata,
        *,
        allow_negative: bool,
        keywords: dict[str, str] | None = None,
        prefix: str = "",
    ) -> None:
        self.name = prop
        self.letter = letter
        self.prefix = prefix
        self.metadata = metadata
        self.allow_negative = allow_negative
        self.keywords = keywords or {}
        self._sides = {letter + side: names for side, names in _sides(prop).items()}

    def try_parse(self, base: str) -> Properties | None:
        negative, base = split_negative(base)
        if negative and not self.allow_negative:
            return None
        if self.prefix:
            if not base.startswith(self.prefix):
                return None
            base = base[len(self.prefix) :]
        head, sep, body = base.partition("-")
        names = self._sides.get(head)
        if not sep or names is None or not body:
            return None
        value = lookup(body, SPACING, self.keywords)
        if value is None or (negative and body in self.keywords):
            return None
        return same_value(names, signed(value, negative))


class SpaceBetweenParser(BaseParser):
    """``space-x-4`` / ``space-y-2`` set margins between children."""

    name = "space-between"
    metadata = ParserMetadata(
        priority=85,
        category=ParserCategory.SPACING,
        supported_patterns=("space-x-{n}", "space-y-{n}", "space-x-reverse", "space-y-reverse"),
        child_selector=SIBLINGS_SELECTOR,
    )

    _EDGES = {"x": ("margin-right", "margin-left"), "y": ("margin-bottom", "margin-top")}

    def try_parse(self, base: str) -> Properties | None:
        negative, base = split_negative(base)
        if not base.startswith("space-") or len(base) < 9:
            return None
        axis, body = base[6], base[8:]
        if axis not in self._EDGES or base[7] != "-":
            return None
        reverse = f"--tw-space-{axis}-reverse"
        if body == "reverse":
            return None if negative else decls((reverse, "1"))
        value = signed(lookup(body, SPACING), negative)
        if value is None:
            return None
        end, start = self._EDGES[axis]
        return decls(
            (reverse, "0"),
            (end, f"calc({value} * var({reverse}))"),
            (start, f"calc({value} * calc(1 - var({reverse})))"),
        )


class GapParser(BaseParser):
    name = "gap"
    metadata = ParserMetadata(
        priority=50,
        category=ParserCategory.SPACING,
        supported_patterns=("gap-{n}", "gap-x-{n}", "gap-y-{n}"),
    )

    _AXES = {"gap": ("gap",), "gap-x": ("column-gap",), "gap-y": ("row-gap",)}

    def try_parse(self, base: str) -> Properties | None:
        for prefix in ("gap-x", "gap-y", "gap"):
            if base.startswith(prefix + "-"):
                value = lookup(base[len(prefix) + 1 :], SPACING)
                if value is None:
                    return None
                return same_value(self._AXES[prefix], value)
        return None


PADDING = BoxSpacingParser(
    "p",
    "padding",
    ParserMetadata(
        priority=100,
        category=ParserCategory.SPACING,
        supported_patterns=("p-{n}", "px-{n}", "py-{n}", "pt-{n}", "pr-{n}", "pb-{n}", "pl-{n}", "ps-{n}", "pe-{n}"),
    ),
    allow_negative=False,
)

MARGIN = BoxSpacingParser(
    "m",
    "margin",
    ParserMetadata(
        priority=100,
        category=ParserCategory.SPACING,
        supported_patterns=("m-{n}", "mx-{n}", "my-{n}", "mt-{n}", "mr-{n}", "mb-{n}", "ml-{n}", "ms-{n}", "me-{n}", "-m-{n}", "m-auto"),
    ),
    allow_negative=True,
    keywords={"auto": POSITION_KEYWORDS["auto"]},
)
