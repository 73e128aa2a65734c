"""Arbitrary property utilities: ``[mask-type:luminance]``, ``[--gutter:2rem]``."""

from __future__ import annotations

import re

from gust.arbitrary import decode_underscores
from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    Properties,
    decls,
)

_PROPERTY_RE = re.compile(r"^(--[A-Za-z0-9_-]+|-?[a-z][a-z0-9-]*)$")


class ArbitraryPropertyParser(BaseParser):
    name = "arbitrary-property"
    metadata = ParserMetadata(
        priority=10,
        category=ParserCategory.ARBITRARY,
        supported_patterns=("[property:value]",),
    )

    def try_parse(self, base: str) -> Properties | None:
        if len(base) < 5 or base[0] != "[" or base[-1] != "]":
            return None
        prop, sep, value = base[1:-1].partition(":")
        if not sep or not value or not _PROPERTY_RE.match(prop):
            return None
        return decls((prop, decode_underscores(value)))
