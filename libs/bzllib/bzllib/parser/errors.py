"""Parse error types for the Starlark parser."""

from __future__ import annotations

from bzllib.diagnostics.location import SourceLocation


class ParseError(Exception):
    """Raised inside the parser to abandon the current parse.

    :func:`bzllib.parser.parser.parse` catches it and reports failure as
    ``None``; it does not escape the public API.
    """

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        super().__init__(message)
        self.location = location
