"""Lark-based lexer that splits a raw class into colon-separated segments."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from pathlib import Path

from lark import Lark, Tree
from lark.exceptions import LarkError

from gust.errors import MalformedArbitraryValue, ParseError, UnrecognizedClass

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_OPENERS = {"[": "]", "(": ")"}
_CLOSERS = {"]": "[", ")": "("}


@dataclass(frozen=True)
class ClassTokens:
    """A lexed class: every segment but the last is a variant candidate."""

    raw: str
    segments: tuple[str, ...]

    @property
    def variant_segments(self) -> tuple[str, ...]:
        return self.segments[:-1]

    @property
    def base(self) -> str:
        return self.segments[-1]


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )


def unbalanced_at(raw: str) -> int | None:
    """Return the index of the first unbalanced bracket/paren, or None."""
    stack: list[tuple[str, int]] = []
    for i, ch in enumerate(raw):
        if ch in _OPENERS:
            stack.append((ch, i))
        elif ch in _CLOSERS:
            if not stack or stack[-1][0] != _CLOSERS[ch]:
                return i
            stack.pop()
    if stack:
        return stack[0][1]
    return None


@functools.lru_cache(maxsize=4096)
def tokenize(raw: str) -> ClassTokens:
    """Lex *raw* into segments.

    Raises :class:`MalformedArbitraryValue` for unbalanced ``[...]``/``(...)``
    and :class:`UnrecognizedClass` for other lexical problems (empty class,
    empty segment such as ``hover:`` or ``a::b``).
    """
    if not raw or raw.strip() != raw:
        raise UnrecognizedClass(raw, f"Invalid class {raw!r}")
    column = unbalanced_at(raw)
    if column is not None:
        raise MalformedArbitraryValue(raw, column=column)
    try:
        tree = _parser().parse(raw)
    except LarkError as e:
        raise UnrecognizedClass(raw, f"Invalid class {raw!r}: empty segment") from e
    segments = tuple(
        raw[child.meta.start_pos : child.meta.end_pos]
        for child in tree.children
        if isinstance(child, Tree) and child.data == "segment"
    )
    if not segments:
        raise ParseError(raw)
    return ClassTokens(raw=raw, segments=segments)
