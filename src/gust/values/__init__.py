"""Static value tables shared by the utility parsers.

Every table is a plain module-level mapping built at import time and never
mutated afterwards.
"""

from gust.values.colors import (
    NAMED_COLORS,
    PALETTE,
    alpha_from_percent,
    apply_opacity,
    palette_color,
)
from gust.values.spacing import FRACTIONS, SPACING, fraction, spacing

__all__ = [
    "FRACTIONS",
    "NAMED_COLORS",
    "PALETTE",
    "SPACING",
    "alpha_from_percent",
    "apply_opacity",
    "fraction",
    "palette_color",
    "spacing",
]
