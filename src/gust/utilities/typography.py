"""Font, text and list utilities (everything text-related except colors)."""

from __future__ import annotations

from gust.arbitrary import arbitrary_value, hinted_value, looks_like_length, split_modifier
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
from gust.values.spacing import SPACING
from gust.values.typography import (
    DECORATION_THICKNESS,
    FONT_FAMILIES,
    FONT_SIZES,
    FONT_WEIGHTS,
    LETTER_SPACING,
    LINE_CLAMP,
    LINE_HEIGHTS,
    LIST_STYLE_TYPES,
    NUMERIC_VARIANTS,
    UNDERLINE_OFFSET,
)

Pairs = tuple[tuple[str, str], ...]


def _keywords() -> dict[str, Pairs]:
    table: dict[str, Pairs] = {
        "italic": (("font-style", "italic"),),
        "not-italic": (("font-style", "normal"),),
        "antialiased": (
            ("-webkit-font-smoothing", "antialiased"),
            ("-moz-osx-font-smoothing", "grayscale"),
        ),
        "subpixel-antialiased": (
            ("-webkit-font-smoothing", "auto"),
            ("-moz-osx-font-smoothing", "auto"),
        ),
        "underline": (("text-decoration-line", "underline"),),
        "overline": (("text-decoration-line", "overline"),),
        "line-through": (("text-decoration-line", "line-through"),),
        "no-underline": (("text-decoration-line", "none"),),
        "uppercase": (("text-transform", "uppercase"),),
        "lowercase": (("text-transform", "lowercase"),),
        "capitalize": (("text-transform", "capitalize"),),
        "normal-case": (("text-transform", "none"),),
        "truncate": (
            ("overflow", "hidden"),
            ("text-overflow", "ellipsis"),
            ("white-space", "nowrap"),
        ),
        "text-ellipsis": (("text-overflow", "ellipsis"),),
        "text-clip": (("text-overflow", "clip"),),
        "break-normal": (("overflow-wrap", "normal"), ("word-break", "normal")),
        "break-words": (("overflow-wrap", "break-word"),),
        "break-all": (("word-break", "break-all"),),
        "break-keep": (("word-break", "keep-all"),),
        "list-inside": (("list-style-position", "inside"),),
        "list-outside": (("list-style-position", "outside"),),
        "list-image-none": (("list-style-image", "none"),),
        "line-clamp-none": (
            ("overflow", "visible"),
            ("display", "block"),
            ("-webkit-box-orient", "horizontal"),
            ("-webkit-line-clamp", "none"),
        ),
        "content-none": (("content", "none"),),
    }
    for name, value in NUMERIC_VARIANTS.items():
        table[name] = (("font-variant-numeric", value),)
    for align in ("left", "center", "right", "justify", "start", "end"):
        table[f"text-{align}"] = (("text-align", align),)
    for wrap in ("wrap", "nowrap", "balance", "pretty"):
        table[f"text-{wrap}"] = (("text-wrap", wrap),)
    for style in ("solid", "double", "dotted", "dashed", "wavy"):
        table[f"decoration-{style}"] = (("text-decoration-style", style),)
    for space in ("normal", "nowrap", "pre", "pre-line", "pre-wrap", "break-spaces"):
        table[f"whitespace-{space}"] = (("white-space", space),)
    for hyphens in ("none", "manual", "auto"):
        table[f"hyphens-{hyphens}"] = (("hyphens", hyphens),)
    for align in ("baseline", "top", "middle", "bottom", "text-top", "text-bottom", "sub", "super"):
        table[f"align-{align}"] = (("vertical-align", align),)
    for name, value in LIST_STYLE_TYPES.items():
        table[f"list-{name}"] = (("list-style-type", value),)
    return table


class TypographyParser(BaseParser):
    """``text-lg``, ``text-sm/6``, ``font-bold``, ``tracking-tight``, ``leading-7``, ``line-clamp-3``..."""

    name = "typography"
    metadata = ParserMetadata(
        priority=65,
        category=ParserCategory.TYPOGRAPHY,
        supported_patterns=(
            "text-{size}",
            "text-{size}/{leading}",
            "text-{align}",
            "font-{weight}",
            "font-{family}",
            "tracking-{value}",
            "leading-{value}",
            "decoration-{style|thickness}",
            "underline-offset-{n}",
            "line-clamp-{n}",
            "indent-{n}",
            "whitespace-{value}",
            "italic",
            "uppercase",
            "truncate",
        ),
    )

    KEYWORDS = _keywords()

    def try_parse(self, base: str) -> Properties | None:
        pairs = self.KEYWORDS.get(base)
        if pairs is not None:
            return decls(*pairs)
        negative, body = split_negative(base)
        if body.startswith("tracking-"):
            value = signed(lookup(body[9:], LETTER_SPACING), negative)
            return decls(("letter-spacing", value)) if value else None
        if body.startswith("indent-"):
            value = signed(lookup(body[7:], SPACING), negative)
            return decls(("text-indent", value)) if value else None
        if negative:
            return None
        if base.startswith("text-"):
            return self._text(base[5:])
        if base.startswith("font-"):
            return self._font(base[5:])
        if base.startswith("leading-"):
            value = lookup(base[8:], LINE_HEIGHTS)
            return decls(("line-height", value)) if value else None
        if base.startswith("decoration-"):
            return self._decoration_thickness(base[11:])
        if base.startswith("underline-offset-"):
            value = lookup(base[17:], UNDERLINE_OFFSET)
            return decls(("text-underline-offset", value)) if value else None
        if base.startswith("line-clamp-"):
            return self._line_clamp(base[11:])
        if base.startswith("content-"):
            value = arbitrary_value(base[8:])
            return decls(("content", value)) if value else None
        return None

    def _text(self, body: str) -> Properties | None:
        size, leading = split_modifier(body)
        if size in FONT_SIZES:
            font_size, line_height = FONT_SIZES[size]
            if leading is not None:
                line_height = lookup(leading, LINE_HEIGHTS)
                if line_height is None:
                    return None
            return decls(("font-size", font_size), ("line-height", line_height))
        hinted = hinted_value(body)
        if hinted is None:
            return None
        hint, value = hinted
        if hint in ("length", "percentage", "absolute-size", "relative-size") or (
            hint is None and looks_like_length(value)
        ):
            return decls(("font-size", value))
        return None

    def _font(self, body: str) -> Properties | None:
        if body in FONT_WEIGHTS:
            return decls(("font-weight", FONT_WEIGHTS[body]))
        if body in FONT_FAMILIES:
            return decls(("font-family", FONT_FAMILIES[body]))
        hinted = hinted_value(body)
        if hinted is None:
            return None
        hint, value = hinted
        if hint == "number" or (hint is None and value.isdigit()):
            return decls(("font-weight", value))
        return decls(("font-family", value))

    def _decoration_thickness(self, body: str) -> Properties | None:
        if body in DECORATION_THICKNESS:
            return decls(("text-decoration-thickness", DECORATION_THICKNESS[body]))
        hinted = hinted_value(body)
        if hinted is None:
            return None
        hint, value = hinted
        if hint in ("length", "percentage") or (hint is None and looks_like_length(value)):
            return decls(("text-decoration-thickness", value))
        return None

    def _line_clamp(self, body: str) -> Properties | None:
        value = body if body in LINE_CLAMP else arbitrary_value(body)
        if value is None:
            return None
        return decls(
            ("overflow", "hidden"),
            ("display", "-webkit-box"),
            ("-webkit-box-orient", "vertical"),
            ("-webkit-line-clamp", value),
        )
