"""Diagnostics subpackage (Layer 0 — zero internal dependencies)."""

from bzllib.diagnostics.collector import DiagnosticCollector
from bzllib.diagnostics.diagnostic import Diagnostic
from bzllib.diagnostics.location import SourceLocation
from bzllib.diagnostics.severity import DiagnosticSeverity

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
