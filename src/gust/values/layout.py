"""Layout, flexbox and grid tables."""

from __future__ import annotations

DISPLAY: dict[str, str] = {
    "block": "block",
    "inline-block": "inline-block",
    "inline": "inline",
    "flex": "flex",
    "inline-flex": "inline-flex",
    "table": "table",
    "inline-table": "inline-table",
    "table-caption": "table-caption",
    "table-cell": "table-cell",
    "table-column": "table-column",
    "table-column-group": "table-column-group",
    "table-footer-group": "table-footer-group",
    "table-header-group": "table-header-group",
    "table-row-group": "table-row-group",
    "table-row": "table-row",
    "flow-root": "flow-root",
    "grid": "grid",
    "inline-grid": "inline-grid",
    "contents": "contents",
    "list-item": "list-item",
    "hidden": "none",
}

POSITIONS = ("static", "fixed", "absolute", "relative", "sticky")

OVERFLOW = ("auto", "hidden", "clip", "visible", "scroll")
OVERSCROLL = ("auto", "contain", "none")

OBJECT_FIT = ("contain", "cover", "fill", "none", "scale-down")

# object-position and background-position share these.
POSITION_NAMES: dict[str, str] = {
    "bottom": "bottom",
    "center": "center",
    "left": "left",
    "left-bottom": "left bottom",
    "left-top": "left top",
    "right": "right",
    "right-bottom": "right bottom",
    "right-top": "right top",
    "top": "top",
}

Z_INDEX: dict[str, str] = {
    "auto": "auto",
    **{step: step for step in ("0", "10", "20", "30", "40", "50")},
}

ORDER: dict[str, str] = {
    "first": "-9999",
    "last": "9999",
    "none": "0",
    **{str(n): str(n) for n in range(1, 13)},
}

ASPECT_RATIOS: dict[str, str] = {
    "auto": "auto",
    "square": "1 / 1",
    "video": "16 / 9",
}

COLUMNS: dict[str, str] = {
    "auto": "auto",
    **{str(n): str(n) for n in range(1, 13)},
    "3xs": "16rem",
    "2xs": "18rem",
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
}

BREAK_VALUES = ("auto", "avoid", "all", "avoid-page", "page", "left", "right", "column")
BREAK_INSIDE_VALUES = ("auto", "avoid", "avoid-page", "avoid-column")

# -- flexbox ----------------------------------------------------------------

FLEX: dict[str, str] = {
    "1": "1 1 0%",
    "auto": "1 1 auto",
    "initial": "0 1 auto",
    "none": "none",
}

FLEX_DIRECTIONS: dict[str, str] = {
    "row": "row",
    "row-reverse": "row-reverse",
    "col": "column",
    "col-reverse": "column-reverse",
}

FLEX_WRAP: dict[str, str] = {
    "wrap": "wrap",
    "wrap-reverse": "wrap-reverse",
    "nowrap": "nowrap",
}

JUSTIFY_CONTENT: dict[str, str] = {
    "normal": "normal",
    "start": "flex-start",
    "end": "flex-end",
    "center": "center",
    "between": "space-between",
    "around": "space-around",
    "evenly": "space-evenly",
    "stretch": "stretch",
}

ALIGN_CONTENT: dict[str, str] = {
    "normal": "normal",
    "center": "center",
    "start": "flex-start",
    "end": "flex-end",
    "between": "space-between",
    "around": "space-around",
    "evenly": "space-evenly",
    "baseline": "baseline",
    "stretch": "stretch",
}

ALIGN_ITEMS: dict[str, str] = {
    "start": "flex-start",
    "end": "flex-end",
    "center": "center",
    "baseline": "baseline",
    "stretch": "stretch",
}

ALIGN_SELF: dict[str, str] = {
    "auto": "auto",
    **ALIGN_ITEMS,
}

JUSTIFY_ITEMS: dict[str, str] = {
    "start": "start",
    "end": "end",
    "center": "center",
    "stretch": "stretch",
}

JUSTIFY_SELF: dict[str, str] = {
    "auto": "auto",
    **JUSTIFY_ITEMS,
}

PLACE_CONTENT: dict[str, str] = {
    "center": "center",
    "start": "start",
    "end": "end",
    "between": "space-between",
    "around": "space-around",
    "evenly": "space-evenly",
    "baseline": "baseline",
    "stretch": "stretch",
}

PLACE_ITEMS: dict[str, str] = {
    "start": "start",
    "end": "end",
    "center": "center",
    "baseline": "baseline",
    "stretch": "stretch",
}

PLACE_SELF: dict[str, str] = {
    "auto": "auto",
    "start": "start",
    "end": "end",
    "center": "center",
    "stretch": "stretch",
}

# -- grid -------------------------------------------------------------------

GRID_TEMPLATE: dict[str, str] = {
    "none": "none",
    "subgrid": "subgrid",
    **{str(n): f"repeat({n}, minmax(0, 1fr))" for n in range(1, 13)},
}

GRID_SPAN: dict[str, str] = {
    "auto": "auto",
    "span-full": "1 / -1",
    **{f"span-{n}": f"span {n} / span {n}" for n in range(1, 13)},
}

GRID_LINE: dict[str, str] = {
    "auto": "auto",
    **{str(n): str(n) for n in range(1, 14)},
}

GRID_AUTO_FLOW: dict[str, str] = {
    "row": "row",
    "col": "column",
    "dense": "dense",
    "row-dense": "row dense",
    "col-dense": "column dense",
}

GRID_AUTO_SIZE: dict[str, str] = {
    "auto": "auto",
    "min": "min-content",
    "max": "max-content",
    "fr": "minmax(0, 1fr)",
}
