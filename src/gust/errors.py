"""Error hierarchy for gust.

Utility parsers never raise: "no match" is ``None``.  Only the generator turns
a class that no parser accepted into a :class:`ParseError`, and only config
validation raises :class:`ConfigurationError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gust.model.diagnostic import Diagnostic


class GustError(Exception):
    """Base error for all gust errors."""

    def __init__(self, message: str, *, class_name: str | None = None) -> None:
        super().__init__(message)
        self.class_name = class_name


class ParseError(GustError):
    """A single class string could not be turned into CSS.

    Recoverable and per-class: callers keep feeding other classes.
    """

    kind = "parse-error"

    def __init__(self, class_name: str, message: str | None = None) -> None:
        super().__init__(message or f"Cannot parse class {class_name!r}", class_name=class_name)


class UnrecognizedClass(ParseError):
    """No registered utility parser accepted the class."""

    kind = "unrecognized-class"

    def __init__(self, class_name: str, message: str | None = None) -> None:
        super().__init__(class_name, message or f"Unrecognized class {class_name!r}")


class MalformedArbitraryValue(ParseError):
    """A ``[...]`` or ``(...)`` value was opened but never closed (or vice versa)."""

    kind = "malformed-arbitrary-value"

    def __init__(
        self, class_name: str, message: str | None = None, column: int | None = None
    ) -> None:
        self.column = column
        super().__init__(
            class_name, message or f"Unbalanced brackets in class {class_name!r}"
        )


class ConfigurationError(GustError):
    """Raised when a CssGenerationConfig fails validation."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Invalid configuration with {len(messages)} error(s): " + "; ".join(messages)
        )
