"""Width / height keyword tables."""

from __future__ import annotations

_INTRINSIC: dict[str, str] = {
    "auto": "auto",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}

WIDTH: dict[str, str] = {
    **_INTRINSIC,
    "screen": "100vw",
    "svw": "100svw",
    "lvw": "100lvw",
    "dvw": "100dvw",
}

HEIGHT: dict[str, str] = {
    **_INTRINSIC,
    "screen": "100vh",
    "svh": "100svh",
    "lvh": "100lvh",
    "dvh": "100dvh",
}

SIZE: dict[str, str] = dict(_INTRINSIC)

MIN_WIDTH: dict[str, str] = {
    "0": "0px",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}

MIN_HEIGHT: dict[str, str] = {
    "0": "0px",
    "full": "100%",
    "screen": "100vh",
    "svh": "100svh",
    "lvh": "100lvh",
    "dvh": "100dvh",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}

# Named container sizes (max-width, columns).
NAMED_SIZES: dict[str, str] = {
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

MAX_WIDTH: dict[str, str] = {
    "0": "0rem",
    "none": "none",
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
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
    "prose": "65ch",
    "screen-sm": "640px",
    "screen-md": "768px",
    "screen-lg": "1024px",
    "screen-xl": "1280px",
    "screen-2xl": "1536px",
}

MAX_HEIGHT: dict[str, str] = {
    "none": "none",
    "full": "100%",
    "screen": "100vh",
    "svh": "100svh",
    "lvh": "100lvh",
    "dvh": "100dvh",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}

FLEX_BASIS: dict[str, str] = {
    "auto": "auto",
    "full": "100%",
}
