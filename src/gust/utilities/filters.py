"""``filter`` and ``backdrop-filter`` utilities."""

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
from gust.values.effects import (
    BLUR,
    BRIGHTNESS,
    CONTRAST,
    DROP_SHADOWS,
    HUE_ROTATE,
    OPACITY,
    SATURATE,
    TOGGLE_FILTER,
)

# filter function -> value table; a bare ``<fn>`` class uses the "" entry
_FUNCTIONS: dict[str, dict[str, str]] = {
    "blur": BLUR,
    "brightness": BRIGHTNESS,
    "contrast": CONTRAST,
    "grayscale": TOGGLE_FILTER,
    "hue-rotate": HUE_ROTATE,
    "invert": TOGGLE_FILTER,
    "saturate": SATURATE,
    "sepia": TOGGLE_FILTER,
}


class FilterParser(BaseParser):
    """``blur-md``, ``brightness-110``, ``-hue-rotate-90``, ``drop-shadow-lg``, ``backdrop-blur-sm``."""

    def __init__(self, backdrop: bool = False) -> None:
        self.backdrop = backdrop
        self.prefix = "backdrop-" if backdrop else ""
        self.property = "backdrop-filter" if backdrop else "filter"
        self.name = self.property
        self.functions = dict(_FUNCTIONS)
        if backdrop:
            self.functions["opacity"] = OPACITY
        self.metadata = ParserMetadata(
            priority=30,
            category=ParserCategory.FILTERS,
            supported_patterns=tuple(
                [f"{self.prefix}filter-none"]
                + [f"{self.prefix}{fn}-{{value}}" for fn in self.functions]
                + ([] if backdrop else ["drop-shadow-{size}"])
            ),
        )

    def try_parse(self, base: str) -> Properties | None:
        negative, base = split_negative(base)
        if not base.startswith(self.prefix):
            return None
        body = base[len(self.prefix) :]
        if body == "filter-none" and not negative:
            return decls((self.property, "none"))
        if not self.backdrop and not negative:
            shadow = strip_prefix(body, "drop-shadow")
            if shadow is not None:
                value = lookup(shadow, DROP_SHADOWS)
                if value is None:
                    return None
                if shadow not in DROP_SHADOWS:
                    value = f"drop-shadow({value})"
                return decls((self.property, value))
        for fn, table in self.functions.items():
            rest = strip_prefix(body, fn)
            if rest is None:
                continue
            if negative and fn != "hue-rotate":
                return None
            value = signed(lookup(rest, table), negative)
            if value is None:
                return None
            return decls((self.property, f"{fn}({value})"))
        return None


FILTER = FilterParser()
BACKDROP_FILTER = FilterParser(backdrop=True)
