"""Diagnostic model: structured messages produced while resolving styles."""

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
    """A single finding about a style declaration.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        selector: The selector of the offending rule, if applicable.
        line: Source line of the offending declaration, if known.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    selector: str | None = None
    line: int | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        parts = []
        if self.selector:
            parts.append(f"selector={self.selector}")
        if self.line is not None:
            parts.append(f"line={self.line}")
        location = f" [{' '.join(parts)}]" if parts else ""
        return f"{self.severity.value}{location}: {self.message}"
