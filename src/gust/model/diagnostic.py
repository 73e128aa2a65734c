"""Diagnostic model: structured messages for config validation and coverage checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a configuration or a class string.

    Attributes:
        rule: Identifier for the rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        class_name: The class involved, if applicable.
        field: The config field involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    class_name: str | None = None
    field: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.class_name:
            location = f" [class={self.class_name}]"
        elif self.field:
            location = f" [field={self.field}]"
        return f"{self.severity.value}{location}: {self.message}"
