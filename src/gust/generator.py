"""CssGenerator: the session object that turns class strings into a stylesheet.

One generator owns one :class:`RuleStore`.  ``add_class`` runs the pipeline
(lex, resolve variants, dispatch to the first matching parser, upsert the
rule); ``generate_css`` / ``generate_minified_css`` serialize the store.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from gust.config import CssGenerationConfig
from gust.errors import ParseError, UnrecognizedClass
from gust.lexer import tokenize
from gust.model.css import CssProperty, CssRule
from gust.model.diagnostic import Diagnostic
from gust.model.report import BatchReport
from gust.registry import ParserRegistry, create_default_registry
from gust.serializer import serialize
from gust.store import UNRANKED, RuleStore
from gust.utilities import UtilityParser
from gust.validation import validate_or_raise
from gust.variants import ResolvedClass, VariantKind, resolve

logger = logging.getLogger(__name__)

# ``(--name)`` or ``(hint:--name)`` inside a class body.
_REFERENCE_RE = re.compile(r"\((?:[a-z-]+:)?(--[A-Za-z0-9_-]+)\)")


@dataclass(frozen=True)
class CompiledClass:
    """Everything the pipeline learned about one class."""

    resolved: ResolvedClass
    parser: UtilityParser
    properties: list[CssProperty]
    selector: str
    media_query: str | None


class CssGenerator:
    """Generation session: accumulates rules for the classes fed to it.

    Not thread-safe; callers serialize ``add_class`` calls per instance.
    """

    def __init__(
        self,
        config: CssGenerationConfig | None = None,
        registry: ParserRegistry | None = None,
    ) -> None:
        config = config or CssGenerationConfig()
        self.warnings: list[Diagnostic] = validate_or_raise(config)
        self._config = config
        self._registry = registry or create_default_registry()
        self._store = RuleStore()

    # -- configuration --------------------------------------------------------

    @property
    def config(self) -> CssGenerationConfig:
        return self._config

    def set_config(self, config: CssGenerationConfig) -> None:
        """Swap the configuration; rules already added are left untouched."""
        self.warnings = validate_or_raise(config)
        self._config = config

    @property
    def registry(self) -> ParserRegistry:
        return self._registry

    @property
    def store(self) -> RuleStore:
        return self._store

    # -- ingestion ------------------------------------------------------------

    def compile(self, raw: str) -> CompiledClass:
        """Run *raw* through the pipeline without touching the store.

        Raises :class:`~gust.errors.ParseError` (or a subclass) when the
        class is malformed, uses an unknown variant or no parser accepts it.
        """
        tokens = tokenize(raw)
        resolved = resolve(raw, self._config, tokens)
        match = self._registry.find(resolved.base, self._config)
        if match is None:
            raise UnrecognizedClass(raw)
        parser, properties = match
        if resolved.important:
            properties = [p.as_important() for p in properties]
        return CompiledClass(
            resolved=resolved,
            parser=parser,
            properties=properties,
            selector=resolved.selector(parser.metadata.child_selector),
            media_query=resolved.media_query,
        )

    def class_to_properties(self, raw: str) -> list[CssProperty]:
        """The declarations *raw* would produce, without registering it."""
        return self.compile(raw).properties

    def add_class(self, raw: str) -> CssRule:
        """Register *raw* and return the rule it landed in.

        Adding the same class twice does not duplicate declarations.
        """
        compiled = self.compile(raw)
        rule = self._store.upsert(
            compiled.selector,
            compiled.media_query,
            compiled.properties,
            source=raw,
            rank=self._rank(compiled.resolved),
        )
        for name in _REFERENCE_RE.findall(compiled.resolved.base):
            self._store.reference(name)
        logger.debug("Added %r via %s -> %s", raw, compiled.parser.name, compiled.selector)
        return rule

    def add_classes(self, classes: Iterable[str]) -> BatchReport:
        """Add every class, collecting failures instead of stopping at the first."""
        report = BatchReport()
        for raw in classes:
            try:
                self.add_class(raw)
            except ParseError as e:
                logger.debug("Skipped %r: %s", raw, e)
                report.record_failure(raw, e)
            else:
                report.record_success()
        logger.info("Batch complete: %s", report.summary())
        return report

    def add_custom_property(self, name: str, value: str) -> None:
        """Declare ``--name: value`` under ``:root``."""
        if not name.startswith("--"):
            name = "--" + name.lstrip("-")
        self._store.custom_property(name, value)

    def _rank(self, resolved: ResolvedClass) -> tuple[int, int]:
        names = [name for name, _ in self._config.breakpoints]
        for variant in resolved.variants:
            if variant.kind is VariantKind.RESPONSIVE and variant.name in names:
                return (0, names.index(variant.name))
        return UNRANKED

    # -- emission -------------------------------------------------------------

    def generate_css(self) -> str:
        return serialize(
            self._store,
            source_maps=self._config.source_maps,
            tree_shake=self._config.tree_shake,
        )

    def generate_minified_css(self) -> str:
        return serialize(self._store, minify=True, tree_shake=self._config.tree_shake)

    def render(self) -> str:
        """Pretty or minified output, as ``config.minify`` selects."""
        if self._config.minify:
            return self.generate_minified_css()
        return self.generate_css()

    # -- state ----------------------------------------------------------------

    def rule_count(self) -> int:
        return self._store.rule_count()

    def rules(self) -> list[CssRule]:
        return list(self._store.all_rules())

    @property
    def referenced_properties(self) -> list[str]:
        return list(self._store.referenced_properties)

    def merge(self, other: CssGenerator) -> None:
        """Fold *other*'s rules into this session, after the ones already here."""
        self._store.merge(other._store)

    def clear(self) -> None:
        self._store.clear()
