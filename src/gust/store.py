"""Rule store: the mutable state of one generation session."""

from __future__ import annotations

from typing import Iterator

from gust.model.css import CssProperty, CssRule

# Rank of media buckets that are not a configured breakpoint.
UNRANKED = (1, 0)


class RuleStore:
    """Rules keyed by ``(selector, media_query)`` in insertion order.

    Base rules (no media query) and media buckets are kept apart; media
    buckets are emitted by rank (breakpoint order) and then first insertion.
    No validation happens here.
    """

    def __init__(self) -> None:
        self._base: dict[str, CssRule] = {}
        self._media: dict[str, dict[str, CssRule]] = {}
        self._media_rank: dict[str, tuple[int, int]] = {}
        self.custom_properties: dict[str, str] = {}
        self.referenced_properties: list[str] = []

    def upsert(
        self,
        selector: str,
        media_query: str | None,
        properties: list[CssProperty],
        *,
        source: str = "",
        rank: tuple[int, int] = UNRANKED,
    ) -> CssRule:
        """Merge *properties* into the rule for ``(selector, media_query)``, creating it if absent."""
        if media_query is None:
            bucket = self._base
        else:
            if media_query not in self._media:
                self._media[media_query] = {}
                self._media_rank[media_query] = rank
            bucket = self._media[media_query]
        rule = bucket.get(selector)
        if rule is None:
            rule = CssRule(selector=selector, media_query=media_query, source=source)
            bucket[selector] = rule
        rule.extend(properties)
        return rule

    def custom_property(self, name: str, value: str) -> None:
        self.custom_properties[name] = value

    def reference(self, name: str) -> None:
        """Record a ``var(--name)`` reference made through class syntax."""
        if name not in self.referenced_properties:
            self.referenced_properties.append(name)

    # -- reading --------------------------------------------------------------

    def base_rules(self) -> list[CssRule]:
        return list(self._base.values())

    def media_groups(self) -> list[tuple[str, list[CssRule]]]:
        ordered = sorted(self._media, key=lambda q: self._media_rank[q])
        return [(query, list(self._media[query].values())) for query in ordered]

    def all_rules(self) -> Iterator[CssRule]:
        yield from self._base.values()
        for _, rules in self.media_groups():
            yield from rules

    def get(self, selector: str, media_query: str | None = None) -> CssRule | None:
        if media_query is None:
            return self._base.get(selector)
        return self._media.get(media_query, {}).get(selector)

    def rule_count(self) -> int:
        return len(self._base) + sum(len(rules) for rules in self._media.values())

    def __len__(self) -> int:
        return self.rule_count()

    def __bool__(self) -> bool:
        return bool(self._base or self._media or self.custom_properties)

    # -- bulk operations ------------------------------------------------------

    def merge(self, other: RuleStore) -> None:
        """Key-wise union; *other*'s rules are appended after this store's."""
        for rule in other._base.values():
            self.upsert(rule.selector, None, rule.properties, source=rule.source)
        for query, rules in other._media.items():
            for rule in rules.values():
                self.upsert(
                    rule.selector,
                    query,
                    rule.properties,
                    source=rule.source,
                    rank=other._media_rank[query],
                )
        for name, value in other.custom_properties.items():
            self.custom_property(name, value)
        for name in other.referenced_properties:
            self.reference(name)

    def clear(self) -> None:
        self._base.clear()
        self._media.clear()
        self._media_rank.clear()
        self.custom_properties.clear()
        self.referenced_properties.clear()
