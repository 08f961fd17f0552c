"""Diagnostic collector shared by the tokenizer and the parser."""

from __future__ import annotations

from bzllib.diagnostics.diagnostic import Diagnostic
from bzllib.diagnostics.location import SourceLocation
from bzllib.diagnostics.severity import DiagnosticSeverity


class DiagnosticCollector:
    """Accumulates diagnostics in the order they were reported.

    Diagnostics are advisory: success or failure of an operation is signalled
    by its return value, never by the contents of the collector.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def error(self, message: str, location: SourceLocation | None = None) -> None:
        """Record an error diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.ERROR, message, location))

    def note(self, message: str, location: SourceLocation | None = None) -> None:
        """Record a note that adds context to a preceding error."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.NOTE, message, location))

    def has_errors(self) -> bool:
        """Return True if any error diagnostics have been recorded."""
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)
