"""Shadow, radius, border and filter tables."""

from __future__ import annotations

# Keyed by suffix; "" is the bare utility (``shadow``, ``rounded``, ``blur``).
BOX_SHADOWS: dict[str, str] = {
    "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
    "none": "0 0 #0000",
}

TEXT_SHADOWS: dict[str, str] = {
    "2xs": "0px 1px 0px rgb(0 0 0 / 0.15)",
    "xs": "0px 1px 1px rgb(0 0 0 / 0.2)",
    "sm": "0px 1px 0px rgb(0 0 0 / 0.075), 0px 1px 1px rgb(0 0 0 / 0.075), 0px 2px 2px rgb(0 0 0 / 0.075)",
    "md": "0px 1px 1px rgb(0 0 0 / 0.1), 0px 1px 2px rgb(0 0 0 / 0.1), 0px 2px 4px rgb(0 0 0 / 0.1)",
    "lg": "0px 1px 2px rgb(0 0 0 / 0.1), 0px 3px 2px rgb(0 0 0 / 0.1), 0px 4px 8px rgb(0 0 0 / 0.1)",
    "none": "none",
}

DROP_SHADOWS: dict[str, str] = {
    "sm": "drop-shadow(0 1px 1px rgb(0 0 0 / 0.05))",
    "": "drop-shadow(0 1px 2px rgb(0 0 0 / 0.1)) drop-shadow(0 1px 1px rgb(0 0 0 / 0.06))",
    "md": "drop-shadow(0 4px 3px rgb(0 0 0 / 0.07)) drop-shadow(0 2px 2px rgb(0 0 0 / 0.06))",
    "lg": "drop-shadow(0 10px 8px rgb(0 0 0 / 0.04)) drop-shadow(0 4px 3px rgb(0 0 0 / 0.1))",
    "xl": "drop-shadow(0 20px 13px rgb(0 0 0 / 0.03)) drop-shadow(0 8px 5px rgb(0 0 0 / 0.08))",
    "2xl": "drop-shadow(0 25px 25px rgb(0 0 0 / 0.15))",
    "none": "drop-shadow(0 0 #0000)",
}

BORDER_RADIUS: dict[str, str] = {
    "none": "0px",
    "sm": "0.125rem",
    "": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

BORDER_WIDTHS: dict[str, str] = {
    "": "1px",
    "0": "0px",
    "2": "2px",
    "4": "4px",
    "8": "8px",
}

RING_WIDTHS: dict[str, str] = {
    "": "3px",
    "0": "0px",
    "1": "1px",
    "2": "2px",
    "4": "4px",
    "8": "8px",
}

RING_OFFSETS: dict[str, str] = {
    "0": "0px",
    "1": "1px",
    "2": "2px",
    "4": "4px",
    "8": "8px",
}

OUTLINE_WIDTHS: dict[str, str] = {
    "0": "0px",
    "1": "1px",
    "2": "2px",
    "4": "4px",
    "8": "8px",
}

OUTLINE_OFFSETS = OUTLINE_WIDTHS

BORDER_STYLES = ("solid", "dashed", "dotted", "double", "hidden", "none")

OPACITY: dict[str, str] = {
    str(step): ("1" if step == 100 else f"{step / 100:g}")
    for step in (0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85, 90, 95, 100)
}

BLEND_MODES = (
    "normal",
    "multiply",
    "screen",
    "overlay",
    "darken",
    "lighten",
    "color-dodge",
    "color-burn",
    "hard-light",
    "soft-light",
    "difference",
    "exclusion",
    "hue",
    "saturation",
    "color",
    "luminosity",
    "plus-darker",
    "plus-lighter",
)

# -- filters ----------------------------------------------------------------

BLUR: dict[str, str] = {
    "none": "0",
    "sm": "4px",
    "": "8px",
    "md": "12px",
    "lg": "16px",
    "xl": "24px",
    "2xl": "40px",
    "3xl": "64px",
}

BRIGHTNESS: dict[str, str] = {
    "0": "0",
    "50": ".5",
    "75": ".75",
    "90": ".9",
    "95": ".95",
    "100": "1",
    "105": "1.05",
    "110": "1.1",
    "125": "1.25",
    "150": "1.5",
    "200": "2",
}

CONTRAST: dict[str, str] = {
    "0": "0",
    "50": ".5",
    "75": ".75",
    "100": "1",
    "125": "1.25",
    "150": "1.5",
    "200": "2",
}

SATURATE: dict[str, str] = {
    "0": "0",
    "50": ".5",
    "100": "1",
    "150": "1.5",
    "200": "2",
}

HUE_ROTATE: dict[str, str] = {
    "0": "0deg",
    "15": "15deg",
    "30": "30deg",
    "60": "60deg",
    "90": "90deg",
    "180": "180deg",
}

# grayscale / invert / sepia: bare utility is 100%
TOGGLE_FILTER: dict[str, str] = {
    "": "100%",
    "0": "0",
}
