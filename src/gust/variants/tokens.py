"""Variant vocabulary.

A variant maps to exactly one of: a selector *template* (containing ``&``,
the slot for the class selector) or a media query.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from gust.arbitrary import decode_underscores

if TYPE_CHECKING:
    from gust.config import CssGenerationConfig


class VariantKind(str, Enum):
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    GROUP = "group"
    PEER = "peer"
    DARK = "dark"
    ATTRIBUTE = "attribute"
    ARBITRARY = "arbitrary"
    RESPONSIVE = "responsive"
    DEVICE = "device"


@dataclass(frozen=True)
class VariantToken:
    name: str
    kind: VariantKind
    selector: str | None = None
    media_query: str | None = None

    def __post_init__(self) -> None:
        if (self.selector is None) == (self.media_query is None):
            raise ValueError(
                f"Variant {self.name!r} must map to a selector or a media query, not both"
            )

    @property
    def is_media(self) -> bool:
        return self.media_query is not None

    @property
    def is_pseudo_element(self) -> bool:
        return self.kind is VariantKind.PSEUDO_ELEMENT


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

PSEUDO_CLASSES: dict[str, str] = {
    "hover": ":hover",
    "focus": ":focus",
    "focus-within": ":focus-within",
    "focus-visible": ":focus-visible",
    "active": ":active",
    "visited": ":visited",
    "target": ":target",
    "disabled": ":disabled",
    "enabled": ":enabled",
    "checked": ":checked",
    "indeterminate": ":indeterminate",
    "required": ":required",
    "optional": ":optional",
    "valid": ":valid",
    "invalid": ":invalid",
    "read-only": ":read-only",
    "empty": ":empty",
    "placeholder-shown": ":placeholder-shown",
    "default": ":default",
    "first": ":first-child",
    "last": ":last-child",
    "only": ":only-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
    "first-of-type": ":first-of-type",
    "last-of-type": ":last-of-type",
    "only-of-type": ":only-of-type",
    "open": "[open]",
}

PSEUDO_ELEMENTS: dict[str, str] = {
    "before": "::before",
    "after": "::after",
    "placeholder": "::placeholder",
    "file": "::file-selector-button",
    "marker": "::marker",
    "selection": "::selection",
    "first-line": "::first-line",
    "first-letter": "::first-letter",
    "backdrop": "::backdrop",
}

DEVICE_QUERIES: dict[str, str] = {
    "motion-reduce": "(prefers-reduced-motion: reduce)",
    "motion-safe": "(prefers-reduced-motion: no-preference)",
    "pointer-coarse": "(pointer: coarse)",
    "pointer-fine": "(pointer: fine)",
    "pointer-none": "(pointer: none)",
    "light": "(prefers-color-scheme: light)",
    "print": "print",
    "portrait": "(orientation: portrait)",
    "landscape": "(orientation: landscape)",
    "contrast-more": "(prefers-contrast: more)",
    "contrast-less": "(prefers-contrast: less)",
    "forced-colors": "(forced-colors: active)",
}

# Selector templates that are neither pseudo-classes nor attributes.
STRUCTURAL: dict[str, str] = {
    "rtl": '[dir="rtl"] &',
    "ltr": '[dir="ltr"] &',
    "*": ":is(& > *)",
}

DARK_TEMPLATE = ".dark &"

STATIC_VARIANT_NAMES: frozenset[str] = frozenset(
    {
        *PSEUDO_CLASSES,
        *PSEUDO_ELEMENTS,
        *DEVICE_QUERIES,
        *STRUCTURAL,
        *(f"group-{name}" for name in PSEUDO_CLASSES),
        *(f"peer-{name}" for name in PSEUDO_CLASSES),
        "dark",
    }
)

_ATTRIBUTE_NAME_RE = re.compile(r"^[a-z][a-z0-9-]*$")
_ARBITRARY_ATTRIBUTE_RE = re.compile(r"^[a-z][a-z0-9-]*(=.+)?$")


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def _bracketed(text: str) -> str | None:
    if len(text) > 2 and text[0] == "[" and text[-1] == "]":
        return decode_underscores(text[1:-1])
    return None


def _responsive(segment: str, config: CssGenerationConfig) -> VariantToken | None:
    for name, query in config.breakpoints:
        if segment == name:
            return VariantToken(segment, VariantKind.RESPONSIVE, media_query=query)
    for prefix, feature in (("min-", "min-width"), ("max-", "max-width")):
        if segment.startswith(prefix):
            value = _bracketed(segment[len(prefix) :])
            if value:
                return VariantToken(
                    segment, VariantKind.RESPONSIVE, media_query=f"({feature}: {value})"
                )
    return None


def _attribute(segment: str) -> VariantToken | None:
    for prefix in ("data-", "aria-"):
        if not segment.startswith(prefix):
            continue
        rest = segment[len(prefix) :]
        inner = _bracketed(rest)
        if inner is not None:
            if not _ARBITRARY_ATTRIBUTE_RE.match(inner):
                return None
            return VariantToken(segment, VariantKind.ATTRIBUTE, selector=f"&[{prefix}{inner}]")
        if not _ATTRIBUTE_NAME_RE.match(rest):
            return None
        if prefix == "aria-":
            return VariantToken(
                segment, VariantKind.ATTRIBUTE, selector=f'&[aria-{rest}="true"]'
            )
        return VariantToken(segment, VariantKind.ATTRIBUTE, selector=f"&[data-{rest}]")
    return None


def _interactive(segment: str) -> VariantToken | None:
    if segment in PSEUDO_CLASSES:
        return VariantToken(segment, VariantKind.PSEUDO_CLASS, selector="&" + PSEUDO_CLASSES[segment])
    if segment in PSEUDO_ELEMENTS:
        return VariantToken(
            segment, VariantKind.PSEUDO_ELEMENT, selector="&" + PSEUDO_ELEMENTS[segment]
        )
    if segment in STRUCTURAL:
        return VariantToken(segment, VariantKind.PSEUDO_CLASS, selector=STRUCTURAL[segment])
    if segment.startswith("group-"):
        pseudo = PSEUDO_CLASSES.get(segment[len("group-") :])
        if pseudo is not None:
            return VariantToken(segment, VariantKind.GROUP, selector=f".group{pseudo} &")
    if segment.startswith("peer-"):
        pseudo = PSEUDO_CLASSES.get(segment[len("peer-") :])
        if pseudo is not None:
            return VariantToken(segment, VariantKind.PEER, selector=f".peer{pseudo} ~ &")
    return _attribute(segment)


def _arbitrary(segment: str) -> VariantToken | None:
    inner = _bracketed(segment)
    if inner is None:
        return None
    if inner.startswith("@media"):
        query = inner[len("@media") :].strip()
        if not query:
            return None
        return VariantToken(segment, VariantKind.ARBITRARY, media_query=query)
    if "&" not in inner:
        return None
    return VariantToken(segment, VariantKind.ARBITRARY, selector=inner)


def lookup_variant(segment: str, config: CssGenerationConfig) -> VariantToken | None:
    """Map one ``prefix`` segment to its token, honoring the config's variant toggles."""
    if config.include_responsive:
        token = _responsive(segment, config)
        if token is not None:
            return token
    if config.include_dark_mode and segment == "dark":
        return VariantToken(segment, VariantKind.DARK, selector=DARK_TEMPLATE)
    if config.include_device_variants and segment in DEVICE_QUERIES:
        return VariantToken(segment, VariantKind.DEVICE, media_query=DEVICE_QUERIES[segment])
    if config.include_interactive:
        token = _interactive(segment)
        if token is not None:
            return token
        token = _arbitrary(segment)
        if token is not None:
            return token
    return None
