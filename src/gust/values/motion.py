"""Transform, transition and animation tables, plus the built-in keyframes."""

from __future__ import annotations

SCALE: dict[str, str] = {
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
}

ROTATE: dict[str, str] = {
    "0": "0deg",
    "1": "1deg",
    "2": "2deg",
    "3": "3deg",
    "6": "6deg",
    "12": "12deg",
    "45": "45deg",
    "90": "90deg",
    "180": "180deg",
}

SKEW: dict[str, str] = {
    "0": "0deg",
    "1": "1deg",
    "2": "2deg",
    "3": "3deg",
    "6": "6deg",
    "12": "12deg",
}

TRANSFORM_ORIGINS: dict[str, str] = {
    "center": "center",
    "top": "top",
    "top-right": "top right",
    "right": "right",
    "bottom-right": "bottom right",
    "bottom": "bottom",
    "bottom-left": "bottom left",
    "left": "left",
    "top-left": "top left",
}

# Shared by duration-* and delay-*.
TIMINGS: dict[str, str] = {
    step: f"{step}ms" for step in ("0", "75", "100", "150", "200", "300", "500", "700", "1000")
}

EASINGS: dict[str, str] = {
    "linear": "linear",
    "in": "cubic-bezier(0.4, 0, 1, 1)",
    "out": "cubic-bezier(0, 0, 0.2, 1)",
    "in-out": "cubic-bezier(0.4, 0, 0.2, 1)",
}

DEFAULT_EASING = EASINGS["in-out"]
DEFAULT_DURATION = "150ms"

# transition-<suffix> -> transition-property; "" is the bare ``transition``.
TRANSITION_PROPERTIES: dict[str, str] = {
    "": (
        "color, background-color, border-color, text-decoration-color, fill, "
        "stroke, opacity, box-shadow, transform, filter, backdrop-filter"
    ),
    "all": "all",
    "colors": "color, background-color, border-color, text-decoration-color, fill, stroke",
    "opacity": "opacity",
    "shadow": "box-shadow",
    "transform": "transform",
}

ANIMATIONS: dict[str, str] = {
    "none": "none",
    "spin": "spin 1s linear infinite",
    "ping": "ping 1s cubic-bezier(0, 0, 0.2, 1) infinite",
    "pulse": "pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite",
    "bounce": "bounce 1s infinite",
    "fade-in": "fade-in 0.5s ease-in",
    "fade-out": "fade-out 0.5s ease-out",
    "slide-in-left": "slide-in-left 0.5s ease-out",
    "slide-in-right": "slide-in-right 0.5s ease-out",
    "slide-in-top": "slide-in-top 0.5s ease-out",
    "slide-in-bottom": "slide-in-bottom 0.5s ease-out",
    "zoom-in": "zoom-in 0.5s ease-out",
    "zoom-out": "zoom-out 0.5s ease-in",
    "wobble": "wobble 1s ease-in-out",
    "shake": "shake 0.5s ease-in-out",
    "flip": "flip 1s ease-in-out",
    "heartbeat": "heartbeat 1.5s ease-in-out infinite",
}

Frame = tuple[str, tuple[tuple[str, str], ...]]

# name -> ((selector, ((property, value), ...)), ...)
KEYFRAMES: dict[str, tuple[Frame, ...]] = {
    "spin": (("to", (("transform", "rotate(360deg)"),)),),
    "ping": (("75%, 100%", (("transform", "scale(2)"), ("opacity", "0"))),),
    "pulse": (("50%", (("opacity", ".5"),)),),
    "bounce": (
        (
            "0%, 100%",
            (
                ("transform", "translateY(-25%)"),
                ("animation-timing-function", "cubic-bezier(0.8, 0, 1, 1)"),
            ),
        ),
        (
            "50%",
            (
                ("transform", "none"),
                ("animation-timing-function", "cubic-bezier(0, 0, 0.2, 1)"),
            ),
        ),
    ),
    "fade-in": (("from", (("opacity", "0"),)), ("to", (("opacity", "1"),))),
    "fade-out": (("from", (("opacity", "1"),)), ("to", (("opacity", "0"),))),
    "slide-in-left": (
        ("from", (("transform", "translateX(-100%)"),)),
        ("to", (("transform", "translateX(0)"),)),
    ),
    "slide-in-right": (
        ("from", (("transform", "translateX(100%)"),)),
        ("to", (("transform", "translateX(0)"),)),
    ),
    "slide-in-top": (
        ("from", (("transform", "translateY(-100%)"),)),
        ("to", (("transform", "translateY(0)"),)),
    ),
    "slide-in-bottom": (
        ("from", (("transform", "translateY(100%)"),)),
        ("to", (("transform", "translateY(0)"),)),
    ),
    "zoom-in": (
        ("from", (("transform", "scale(0.5)"), ("opacity", "0"))),
        ("to", (("transform", "scale(1)"), ("opacity", "1"))),
    ),
    "zoom-out": (
        ("from", (("transform", "scale(1)"), ("opacity", "1"))),
        ("to", (("transform", "scale(0.5)"), ("opacity", "0"))),
    ),
    "wobble": (
        ("0%, 100%", (("transform", "translateX(0)"),)),
        ("15%", (("transform", "translateX(-25%) rotate(-5deg)"),)),
        ("30%", (("transform", "translateX(20%) rotate(3deg)"),)),
        ("45%", (("transform", "translateX(-15%) rotate(-3deg)"),)),
        ("60%", (("transform", "translateX(10%) rotate(2deg)"),)),
        ("75%", (("transform", "translateX(-5%) rotate(-1deg)"),)),
    ),
    "shake": (
        ("0%, 100%", (("transform", "translateX(0)"),)),
        ("10%, 30%, 50%, 70%, 90%", (("transform", "translateX(-10px)"),)),
        ("20%, 40%, 60%, 80%", (("transform", "translateX(10px)"),)),
    ),
    "flip": (
        ("from", (("transform", "perspective(400px) rotateY(0)"),)),
        ("to", (("transform", "perspective(400px) rotateY(360deg)"),)),
    ),
    "heartbeat": (
        ("0%, 28%, 70%, 100%", (("transform", "scale(1)"),)),
        ("14%, 42%", (("transform", "scale(1.3)"),)),
    ),
}
