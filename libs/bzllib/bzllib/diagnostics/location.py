"""Source location tracking for tokenizer and parser diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A position in Starlark source text."""

    file: str
    line: int  # 1-indexed
    column: int  # 1-indexed
    offset: int = 0  # 0-indexed character offset

    @classmethod
    def from_offset(cls, source: str, offset: int, file: str = "<string>") -> SourceLocation:
        """Build a location for *offset* by counting newlines before it."""
        offset = max(0, min(offset, len(source)))
        line = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(file=file, line=line, column=offset - line_start + 1, offset=offset)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
