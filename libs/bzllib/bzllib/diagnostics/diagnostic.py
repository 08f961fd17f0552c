"""Diagnostic message representation."""

from __future__ import annotations

from dataclasses import dataclass

from bzllib.diagnostics.location import SourceLocation
from bzllib.diagnostics.severity import DiagnosticSeverity


@dataclass(frozen=True)
class Diagnostic:
    """A single advisory message produced while tokenizing or parsing."""

    severity: DiagnosticSeverity
    message: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        return f"{loc}{self.severity}: {self.message}"
