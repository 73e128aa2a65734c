"""CSS model: CssProperty and CssRule dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class CssProperty:
    """A single ``name: value`` declaration."""

    name: str
    value: str
    important: bool = False

    def as_important(self) -> CssProperty:
        return replace(self, important=True)

    def render(self, minify: bool = False) -> str:
        """Render the declaration without the trailing semicolon."""
        if minify:
            suffix = "!important" if self.important else ""
            return f"{self.name}:{self.value}{suffix}"
        suffix = " !important" if self.important else ""
        return f"{self.name}: {self.value}{suffix}"


@dataclass
class CssRule:
    """A selector with its ordered declarations and optional media query.

    A rule is keyed in the store by ``(selector, media_query)``; declarations
    added later for the same key are appended, never replaced.
    """

    selector: str
    properties: list[CssProperty] = field(default_factory=list)
    media_query: str | None = None
    source: str = ""  # raw class string the rule was generated from

    def extend(self, properties: list[CssProperty]) -> int:
        """Append declarations that are not already present.

        Returns the number of declarations actually added.
        """
        added = 0
        for prop in properties:
            if prop not in self.properties:
                self.properties.append(prop)
                added += 1
        return added

    def declarations(self) -> list[tuple[str, str, bool]]:
        return [(p.name, p.value, p.important) for p in self.properties]
