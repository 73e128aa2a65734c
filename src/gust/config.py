"""Generation configuration: category toggles, variant toggles and output target."""

from __future__ import annotations

from dataclasses import dataclass, fields

from gust.utilities.base import ParserCategory

DEFAULT_BREAKPOINTS: tuple[tuple[str, str], ...] = (
    ("sm", "(min-width: 640px)"),
    ("md", "(min-width: 768px)"),
    ("lg", "(min-width: 1024px)"),
    ("xl", "(min-width: 1280px)"),
    ("2xl", "(min-width: 1536px)"),
)

# One toggle per parser category.
CATEGORY_TOGGLES: dict[ParserCategory, str] = {
    ParserCategory.SPACING: "include_spacing",
    ParserCategory.SIZING: "include_sizing",
    ParserCategory.LAYOUT: "include_layout",
    ParserCategory.FLEXBOX: "include_flexbox",
    ParserCategory.GRID: "include_grid",
    ParserCategory.TYPOGRAPHY: "include_typography",
    ParserCategory.COLOR: "include_colors",
    ParserCategory.BACKGROUND: "include_backgrounds",
    ParserCategory.BORDERS: "include_borders",
    ParserCategory.EFFECTS: "include_effects",
    ParserCategory.FILTERS: "include_filters",
    ParserCategory.TRANSFORMS: "include_transforms",
    ParserCategory.TRANSITIONS: "include_transitions",
    ParserCategory.ANIMATIONS: "include_animations",
    ParserCategory.INTERACTIVITY: "include_interactivity",
    ParserCategory.SVG: "include_svg",
    ParserCategory.TABLES: "include_tables",
    ParserCategory.ARBITRARY: "include_arbitrary",
}


@dataclass(frozen=True)
class CssGenerationConfig:
    # utility categories
    include_spacing: bool = True
    include_sizing: bool = True
    include_layout: bool = True
    include_flexbox: bool = True
    include_grid: bool = True
    include_typography: bool = True
    include_colors: bool = True
    include_backgrounds: bool = True
    include_borders: bool = True
    include_effects: bool = True
    include_filters: bool = True
    include_transforms: bool = True
    include_transitions: bool = True
    include_animations: bool = True
    include_interactivity: bool = True
    include_svg: bool = True
    include_tables: bool = True
    include_arbitrary: bool = True
    # variant families
    include_responsive: bool = True
    include_dark_mode: bool = True
    include_interactive: bool = True  # pseudo-class, group/peer, attribute variants
    include_device_variants: bool = True
    # restrictions
    color_palettes: tuple[str, ...] = ()  # empty = every palette family
    custom_breakpoints: tuple[tuple[str, str], ...] = ()  # (name, media query)
    # output target
    minify: bool = False
    source_maps: bool = False  # origin comment before each rule (pretty output only)
    tree_shake: bool = False  # keep only keyframes referenced by emitted rules

    @property
    def breakpoints(self) -> tuple[tuple[str, str], ...]:
        return self.custom_breakpoints or DEFAULT_BREAKPOINTS

    def category_enabled(self, category: ParserCategory) -> bool:
        return bool(getattr(self, CATEGORY_TOGGLES[category]))

    def enabled_categories(self) -> list[ParserCategory]:
        return [c for c in ParserCategory if self.category_enabled(c)]

    def palette_allowed(self, family: str) -> bool:
        if not self.color_palettes:
            return True
        return family in self.color_palettes

    @classmethod
    def toggle_names(cls) -> list[str]:
        return [f.name for f in fields(cls) if f.name.startswith("include_")]
