"""Resolve a raw class into its variants, base utility and rule placement.

Every leading segment that names a variant is peeled off (full stacking:
``md:dark:hover:bg-sky-500`` works).  Selector templates are composed
innermost-first, so ``group-hover:focus:x`` becomes ``.group:hover .x:focus``;
pseudo-elements always land at the end of the selector.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gust.config import CssGenerationConfig
from gust.errors import UnrecognizedClass
from gust.lexer import ClassTokens, tokenize
from gust.selectors import apply_template, class_selector
from gust.variants.tokens import VariantToken, lookup_variant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedClass:
    raw: str
    variants: tuple[VariantToken, ...]
    base: str
    important: bool = False

    @property
    def selector_template(self) -> str:
        template = "&"
        for variant in reversed(self.variants):
            if variant.selector is None or variant.is_pseudo_element:
                continue
            template = apply_template(variant.selector, template)
        return template

    @property
    def pseudo_elements(self) -> str:
        return "".join(
            v.selector.replace("&", "")
            for v in self.variants
            if v.is_pseudo_element and v.selector
        )

    @property
    def media_query(self) -> str | None:
        queries: list[str] = []
        for variant in self.variants:
            if variant.media_query and variant.media_query not in queries:
                queries.append(variant.media_query)
        if not queries:
            return None
        # Media types (``print``) must precede feature expressions.
        queries.sort(key=lambda q: q.startswith("("))
        return " and ".join(queries)

    def selector(self, child_selector: str = "") -> str:
        selector = apply_template(self.selector_template, class_selector(self.raw))
        return selector + child_selector + self.pseudo_elements


def split_important(base: str) -> tuple[str, bool]:
    """``!p-4`` and ``p-4!`` both mark the class important."""
    if len(base) > 1 and base.startswith("!"):
        return base[1:], True
    if len(base) > 1 and base.endswith("!"):
        return base[:-1], True
    return base, False


def resolve(
    raw: str,
    config: CssGenerationConfig | None = None,
    tokens: ClassTokens | None = None,
) -> ResolvedClass:
    """Peel every variant off *raw*.

    Raises :class:`~gust.errors.UnrecognizedClass` for an unknown (or
    disabled) variant and lets lexer errors propagate.
    """
    config = config or CssGenerationConfig()
    tokens = tokens or tokenize(raw)
    variants: list[VariantToken] = []
    for segment in tokens.variant_segments:
        token = lookup_variant(segment, config)
        if token is None:
            raise UnrecognizedClass(raw, f"Unknown variant {segment!r} in class {raw!r}")
        variants.append(token)
    base, important = split_important(tokens.base)
    if variants:
        logger.debug("Resolved %r: variants=%s base=%r", raw, [v.name for v in variants], base)
    return ResolvedClass(raw=raw, variants=tuple(variants), base=base, important=important)
