"""Batch ingestion report: how many classes a generator recognized."""

from __future__ import annotations

from dataclasses import dataclass, field

from gust.errors import MalformedArbitraryValue, ParseError
from gust.model.diagnostic import Diagnostic, Severity


@dataclass
class BatchReport:
    """Outcome of :meth:`CssGenerator.add_classes`.

    Partial coverage is an expected result, not a failure of the batch.
    """

    succeeded: int = 0
    failed: list[tuple[str, ParseError]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.succeeded + len(self.failed)

    @property
    def coverage(self) -> float:
        """Percentage of classes recognized (100.0 for an empty batch)."""
        if not self.total:
            return 100.0
        return self.succeeded * 100.0 / self.total

    @property
    def failed_classes(self) -> list[str]:
        return [name for name, _ in self.failed]

    def record_success(self) -> None:
        self.succeeded += 1

    def record_failure(self, class_name: str, error: ParseError) -> None:
        self.failed.append((class_name, error))

    def diagnostics(self) -> list[Diagnostic]:
        """One diagnostic per failed class."""
        result: list[Diagnostic] = []
        for class_name, error in self.failed:
            fix = None
            if isinstance(error, MalformedArbitraryValue):
                fix = "Close every '[' with ']' and every '(' with ')'."
            result.append(
                Diagnostic(
                    rule=error.kind,
                    severity=Severity.WARNING,
                    message=str(error),
                    class_name=class_name,
                    fix=fix,
                )
            )
        return result

    def summary(self) -> str:
        return f"{self.succeeded}/{self.total} classes recognized ({self.coverage:.1f}%)"

    def __str__(self) -> str:
        return self.summary()
