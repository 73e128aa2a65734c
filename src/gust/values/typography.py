"""Font, line-height and letter-spacing tables."""

from __future__ import annotations

# size -> (font-size, line-height)
FONT_SIZES: dict[str, tuple[str, str]] = {
    "xs": ("0.75rem", "1rem"),
    "sm": ("0.875rem", "1.25rem"),
    "base": ("1rem", "1.5rem"),
    "lg": ("1.125rem", "1.75rem"),
    "xl": ("1.25rem", "1.75rem"),
    "2xl": ("1.5rem", "2rem"),
    "3xl": ("1.875rem", "2.25rem"),
    "4xl": ("2.25rem", "2.5rem"),
    "5xl": ("3rem", "1"),
    "6xl": ("3.75rem", "1"),
    "7xl": ("4.5rem", "1"),
    "8xl": ("6rem", "1"),
    "9xl": ("8rem", "1"),
}

FONT_WEIGHTS: dict[str, str] = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

FONT_FAMILIES: dict[str, str] = {
    "sans": (
        'ui-sans-serif, system-ui, sans-serif, "Apple Color Emoji", '
        '"Segoe UI Emoji", "Segoe UI Symbol", "Noto Color Emoji"'
    ),
    "serif": 'ui-serif, Georgia, Cambria, "Times New Roman", Times, serif',
    "mono": (
        'ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, '
        '"Liberation Mono", "Courier New", monospace'
    ),
}

LINE_HEIGHTS: dict[str, str] = {
    "none": "1",
    "tight": "1.25",
    "snug": "1.375",
    "normal": "1.5",
    "relaxed": "1.625",
    "loose": "2",
    "3": "0.75rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
}

LETTER_SPACING: dict[str, str] = {
    "tighter": "-0.05em",
    "tight": "-0.025em",
    "normal": "0em",
    "wide": "0.025em",
    "wider": "0.05em",
    "widest": "0.1em",
}

DECORATION_THICKNESS: dict[str, str] = {
    "auto": "auto",
    "from-font": "from-font",
    "0": "0px",
    "1": "1px",
    "2": "2px",
    "4": "4px",
    "8": "8px",
}

UNDERLINE_OFFSET: dict[str, str] = {
    "auto": "auto",
    "0": "0px",
    "1": "1px",
    "2": "2px",
    "4": "4px",
    "8": "8px",
}

LINE_CLAMP = ("1", "2", "3", "4", "5", "6")

# font-variant-numeric keywords
NUMERIC_VARIANTS: dict[str, str] = {
    "normal-nums": "normal",
    "ordinal": "ordinal",
    "slashed-zero": "slashed-zero",
    "lining-nums": "lining-nums",
    "oldstyle-nums": "oldstyle-nums",
    "proportional-nums": "proportional-nums",
    "tabular-nums": "tabular-nums",
    "diagonal-fractions": "diagonal-fractions",
    "stacked-fractions": "stacked-fractions",
}

LIST_STYLE_TYPES: dict[str, str] = {
    "none": "none",
    "disc": "disc",
    "decimal": "decimal",
}

# Typography-plugin palette, emitted as ``--tw-prose-*`` custom properties.
PROSE_COLORS: dict[str, str] = {
    "body": "#374151",
    "headings": "#111827",
    "links": "#2563eb",
    "bold": "#111827",
    "code": "#111827",
    "pre-code": "#e5e7eb",
    "pre-bg": "#1f2937",
    "quotes": "#111827",
    "quote-borders": "#e5e7eb",
    "captions": "#6b7280",
    "bullets": "#d1d5db",
    "hr": "#e5e7eb",
}

PROSE_INVERT_COLORS: dict[str, str] = {
    "body": "#d1d5db",
    "headings": "#f9fafb",
    "links": "#60a5fa",
    "bold": "#f9fafb",
    "code": "#f9fafb",
    "pre-code": "#d1d5db",
    "pre-bg": "#0f172a",
    "quotes": "#f9fafb",
    "quote-borders": "#374151",
    "captions": "#9ca3af",
    "bullets": "#4b5563",
    "hr": "#374151",
}

# (font-size, line-height)
PROSE_SIZES: dict[str, tuple[str, str]] = {
    "sm": ("0.875rem", "1.7142857"),
    "base": ("1rem", "1.75"),
    "lg": ("1.125rem", "1.7777778"),
    "xl": ("1.25rem", "1.8"),
    "2xl": ("1.5rem", "1.6666667"),
}
