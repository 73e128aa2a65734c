"""Stylesheet serialization: pretty and minified renderings of a RuleStore.

Output order is fixed: ``@keyframes`` preamble, ``:root`` custom
properties, base rules in insertion order, then one ``@media`` block per
bucket.  Both modes walk the same structure so they stay equivalent.
"""

from __future__ import annotations

import re

from gust.model.css import CssRule
from gust.store import RuleStore
from gust.values.motion import KEYFRAMES

INDENT = "  "

_QUERY_SPACING_RE = re.compile(r"\s*([:,])\s*")
_ANIMATION_PROPERTIES = ("animation", "animation-name")


def used_keyframes(store: RuleStore) -> list[str]:
    """Built-in keyframes referenced by an ``animation`` declaration in *store*."""
    words: set[str] = set()
    for rule in store.all_rules():
        for prop in rule.properties:
            if prop.name in _ANIMATION_PROPERTIES:
                words.update(re.split(r"[\s,]+", prop.value))
    return [name for name in KEYFRAMES if name in words]


def _minify_query(query: str) -> str:
    return _QUERY_SPACING_RE.sub(r"\1", query)


# ---------------------------------------------------------------------------
# Pretty
# ---------------------------------------------------------------------------


def _block(header: str, lines: list[str], indent: str) -> str:
    body = "".join(f"{indent}{INDENT}{line}\n" for line in lines)
    return f"{indent}{header} {{\n{body}{indent}}}"


def _pretty_keyframes(name: str) -> str:
    frames = []
    for selector, declarations in KEYFRAMES[name]:
        frames.append(
            _block(selector, [f"{prop}: {value};" for prop, value in declarations], INDENT)
        )
    return f"@keyframes {name} {{\n" + "\n".join(frames) + "\n}"


def _pretty_rule(rule: CssRule, indent: str, source_maps: bool) -> str:
    text = _block(rule.selector, [p.render() + ";" for p in rule.properties], indent)
    if source_maps and rule.source:
        comment = rule.source.replace("*/", "* /")
        return f"{indent}/* {comment} */\n{text}"
    return text


def _pretty(store: RuleStore, keyframes: list[str], source_maps: bool) -> str:
    blocks = [_pretty_keyframes(name) for name in keyframes]
    if store.custom_properties:
        blocks.append(
            _block(":root", [f"{n}: {v};" for n, v in store.custom_properties.items()], "")
        )
    blocks.extend(_pretty_rule(rule, "", source_maps) for rule in store.base_rules())
    for query, rules in store.media_groups():
        inner = "\n\n".join(_pretty_rule(rule, INDENT, source_maps) for rule in rules)
        blocks.append(f"@media {query} {{\n{inner}\n}}")
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


# ---------------------------------------------------------------------------
# Minified
# ---------------------------------------------------------------------------


def _minified_keyframes(name: str) -> str:
    frames = "".join(
        _minify_query(selector) + "{" + ";".join(f"{p}:{v}" for p, v in declarations) + "}"
        for selector, declarations in KEYFRAMES[name]
    )
    return f"@keyframes {name}{{{frames}}}"


def _minified_rule(rule: CssRule) -> str:
    return rule.selector + "{" + ";".join(p.render(minify=True) for p in rule.properties) + "}"


def _minified(store: RuleStore, keyframes: list[str]) -> str:
    parts = [_minified_keyframes(name) for name in keyframes]
    if store.custom_properties:
        parts.append(
            ":root{" + ";".join(f"{n}:{v}" for n, v in store.custom_properties.items()) + "}"
        )
    parts.extend(_minified_rule(rule) for rule in store.base_rules())
    for query, rules in store.media_groups():
        parts.append(
            f"@media {_minify_query(query)}{{" + "".join(_minified_rule(r) for r in rules) + "}"
        )
    return "".join(parts)


def serialize(
    store: RuleStore,
    *,
    minify: bool = False,
    source_maps: bool = False,
    tree_shake: bool = False,
) -> str:
    """Render *store* as CSS text.

    Every built-in ``@keyframes`` block is emitted unless *tree_shake* is set,
    in which case only the ones named by an ``animation`` value survive.
    *source_maps* adds a ``/* class */`` comment before each rule in pretty
    output; minified output never carries comments.
    """
    keyframes = used_keyframes(store) if tree_shake else list(KEYFRAMES)
    if minify:
        return _minified(store, keyframes)
    return _pretty(store, keyframes, source_maps)
