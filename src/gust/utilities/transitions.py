"""Transition and animation utilities."""

from __future__ import annotations

from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    decls,
    lookup,
    strip_prefix,
)
from gust.values.motion import (
    ANIMATIONS,
    DEFAULT_DURATION,
    DEFAULT_EASING,
    EASINGS,
    TIMINGS,
    TRANSITION_PROPERTIES,
)


class TransitionParser(BaseParser):
    """``transition``, ``transition-colors``, ``duration-300``, ``ease-in-out``, ``delay-150``."""

    name = "transition"
    metadata = ParserMetadata(
        priority=40,
        category=ParserCategory.TRANSITIONS,
        supported_patterns=(
            "transition",
            "transition-{property}",
            "transition-none",
            "duration-{ms}",
            "ease-{easing}",
            "delay-{ms}",
        ),
    )

    def try_parse(self, base: str) -> Properties | None:
        if base == "transition-none":
            return decls(("transition-property", "none"))
        body = strip_prefix(base, "transition")
        if body is not None:
            value = lookup(body, TRANSITION_PROPERTIES)
            if value is None:
                return None
            return decls(
                ("transition-property", value),
                ("transition-timing-function", DEFAULT_EASING),
                ("transition-duration", DEFAULT_DURATION),
            )
        if base.startswith("duration-"):
            value = lookup(base[9:], TIMINGS)
            return decls(("transition-duration", value)) if value else None
        if base.startswith("delay-"):
            value = lookup(base[6:], TIMINGS)
            return decls(("transition-delay", value)) if value else None
        if base.startswith("ease-"):
            value = lookup(base[5:], EASINGS)
            return decls(("transition-timing-function", value)) if value else None
        return None


class AnimationParser(BaseParser):
    """``animate-spin``, ``animate-fade-in``, ``animate-[wiggle_1s_ease-in-out_infinite]``."""

    name = "animation"
    metadata = ParserMetadata(
        priority=45,
        category=ParserCategory.ANIMATIONS,
        supported_patterns=tuple(f"animate-{name}" for name in ANIMATIONS),
    )

    def try_parse(self, base: str) -> Properties | None:
        if not base.startswith("animate-"):
            return None
        value = lookup(base[8:], ANIMATIONS)
        return decls(("animation", value)) if value else None
