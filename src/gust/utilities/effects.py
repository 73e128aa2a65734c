"""Box and text shadow, opacity and blend-mode utilities."""

from __future__ import annotations

from gust.arbitrary import hinted_value, looks_like_color
from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    color_family_of,
    color_value,
    decls,
    lookup,
    strip_prefix,
)
from gust.values.effects import BLEND_MODES, BOX_SHADOWS, OPACITY, TEXT_SHADOWS


class ShadowParser(BaseParser):
    """``shadow``, ``shadow-lg``, ``shadow-none``, ``shadow-[0_0_2px_red]``, ``shadow-blue-500/50``.

    Presets and arbitrary shadows set ``box-shadow``; colors set ``--tw-shadow-color``.
    """

    name = "shadow"
    metadata = ParserMetadata(
        priority=88,
        category=ParserCategory.EFFECTS,
        supported_patterns=("shadow", "shadow-{size}", "shadow-inner", "shadow-none", "shadow-[...]", "shadow-{color}"),
    )

    def try_parse(self, base: str) -> Properties | None:
        body = strip_prefix(base, "shadow")
        if body is None:
            return None
        if body in BOX_SHADOWS:
            return decls(("box-shadow", BOX_SHADOWS[body]))
        hinted = hinted_value(body)
        if hinted is not None:
            hint, value = hinted
            if hint == "shadow" or (hint is None and not looks_like_color(value) and not value.startswith("var(")):
                return decls(("box-shadow", value))
        color = color_value(body)
        if color is None:
            return None
        return decls(("--tw-shadow-color", color.value))

    def color_family(self, base: str) -> str | None:
        body = strip_prefix(base, "shadow")
        return color_family_of(body) if body else None


class TextShadowParser(BaseParser):
    """``text-shadow-lg``, ``text-shadow-none``, ``text-shadow-[0_1px_2px_red]``, ``text-shadow-sky-500/50``.

    Presets, arbitrary shadows and ``(--x)`` references set ``text-shadow``;
    colors set ``--tw-text-shadow-color``.
    """

    name = "text-shadow"
    metadata = ParserMetadata(
        priority=88,
        category=ParserCategory.EFFECTS,
        supported_patterns=("text-shadow-{size}", "text-shadow-none", "text-shadow-[...]", "text-shadow-{color}"),
    )

    def try_parse(self, base: str) -> Properties | None:
        if not base.startswith("text-shadow-"):
            return None
        body = base[12:]
        if body in TEXT_SHADOWS:
            return decls(("text-shadow", TEXT_SHADOWS[body]))
        hinted = hinted_value(body)
        if hinted is not None:
            hint, value = hinted
            if hint == "shadow" or (hint is None and not looks_like_color(value)):
                return decls(("text-shadow", value))
        color = color_value(body)
        if color is None:
            return None
        return decls(("--tw-text-shadow-color", color.value))

    def color_family(self, base: str) -> str | None:
        if not base.startswith("text-shadow-"):
            return None
        return color_family_of(base[12:])


class OpacityParser(BaseParser):
    name = "opacity"
    metadata = ParserMetadata(
        priority=60,
        category=ParserCategory.EFFECTS,
        supported_patterns=("opacity-{n}",),
    )

    def try_parse(self, base: str) -> Properties | None:
        if not base.startswith("opacity-"):
            return None
        value = lookup(base[8:], OPACITY)
        return decls(("opacity", value)) if value else None


class BlendModeParser(BaseParser):
    name = "blend-mode"
    metadata = ParserMetadata(
        priority=60,
        category=ParserCategory.EFFECTS,
        supported_patterns=("mix-blend-{mode}", "bg-blend-{mode}"),
    )

    _PREFIXES = (("mix-blend-", "mix-blend-mode"), ("bg-blend-", "background-blend-mode"))

    def try_parse(self, base: str) -> Properties | None:
        for prefix, prop in self._PREFIXES:
            if base.startswith(prefix) and base[len(prefix) :] in BLEND_MODES:
                return decls((prop, base[len(prefix) :]))
        return None
