"""Tokenizer for Starlark source code.

Scanning is pull-based: each :meth:`Tokenizer.next_token` call skips
whitespace and comments, then classifies exactly one token.  The cursor only
ever moves forward and there is no backtracking.
"""

from __future__ import annotations

import string

from bzllib.diagnostics.collector import DiagnosticCollector
from bzllib.diagnostics.location import SourceLocation
from bzllib.parser.tokens import (
    KEYWORDS,
    PUNCTUATORS,
    Eof,
    Identifier,
    StringLiteral,
    Token,
)

_WHITESPACE = frozenset(" \t\n\r")
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")

_TRIPLE_QUOTE = '"""'


class Tokenizer:
    """Split Starlark source into tokens one at a time.

    Lexical errors (an unterminated string or a character that starts no
    token) are reported to the diagnostic collector and make
    :meth:`next_token` return ``None``.  There is no recovery: callers are
    expected to stop scanning on the first failure.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<string>",
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self._source = source
        self._filename = filename
        self._diag = diagnostics if diagnostics is not None else DiagnosticCollector()
        self._pos = 0
        self._token_start = 0

    # ------------------------------------------------------------------
    # Public state
    # ------------------------------------------------------------------

    @property
    def diagnostics(self) -> DiagnosticCollector:
        return self._diag

    @property
    def remaining_input(self) -> str:
        """The part of the source the cursor has not reached yet."""
        return self._source[self._pos :]

    @property
    def token_start(self) -> int:
        """Offset at which the most recently scanned token began."""
        return self._token_start

    def location(self, offset: int | None = None) -> SourceLocation:
        """Return the location of *offset* (default: the last token start)."""
        if offset is None:
            offset = self._token_start
        return SourceLocation.from_offset(self._source, offset, self._filename)

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._source[self._pos] in _WHITESPACE:
            self._pos += 1

    def _skip_comment(self) -> bool:
        """Skip from '#' to end of line. Returns True if a comment was skipped."""
        if self._at_end() or self._source[self._pos] != "#":
            return False
        end = self._source.find("\n", self._pos)
        self._pos = len(self._source) if end == -1 else end
        return True

    def _skip_trivia(self) -> None:
        skipping = True
        while skipping:
            self._skip_whitespace()
            skipping = self._skip_comment()

    def _scan_string(self, delimiter: str) -> StringLiteral | None:
        """Scan a string literal whose opening *delimiter* is at the cursor."""
        start = self._pos + len(delimiter)
        end = self._source.find(delimiter, start)
        if end == -1:
            what = "multi-line string literal" if delimiter == _TRIPLE_QUOTE else "string literal"
            self._diag.error(f"Unterminated {what}", self.location())
            return None
        self._pos = end + len(delimiter)
        return StringLiteral(self._source[start:end])

    def _scan_identifier_or_keyword(self) -> Token:
        begin = self._pos
        while not self._at_end() and self._source[self._pos] in _IDENT_CHARS:
            self._pos += 1
        text = self._source[begin : self._pos]
        keyword = KEYWORDS.get(text)
        if keyword is not None:
            return keyword
        return Identifier(text)

    def _scan_punctuator(self) -> Token | None:
        for punctuator in PUNCTUATORS:
            if self._source.startswith(punctuator.value, self._pos):
                self._pos += len(punctuator.value)
                return punctuator
        self._diag.error(
            f"Unexpected character: {self._source[self._pos]!r}",
            self.location(),
        )
        return None

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    def next_token(self) -> Token | None:
        """Scan and return the next token.

        Returns ``Eof()`` at end of input (repeatedly, if called again) and
        ``None`` on a lexical error.
        """
        self._skip_trivia()
        self._token_start = self._pos

        if self._at_end():
            return Eof()

        if self._source.startswith(_TRIPLE_QUOTE, self._pos):
            return self._scan_string(_TRIPLE_QUOTE)

        ch = self._source[self._pos]
        if ch == '"':
            return self._scan_string('"')

        if ch in _IDENT_START:
            return self._scan_identifier_or_keyword()

        return self._scan_punctuator()


def tokenize(
    source: str,
    filename: str = "<string>",
    diagnostics: DiagnosticCollector | None = None,
) -> list[Token] | None:
    """Tokenize all of *source*.

    Returns:
        The tokens in source order, excluding the terminating ``Eof``, or
        ``None`` if any token fails to scan.
    """
    tokenizer = Tokenizer(source, filename, diagnostics)
    tokens: list[Token] = []
    while True:
        token = tokenizer.next_token()
        if token is None:
            return None
        if isinstance(token, Eof):
            return tokens
        tokens.append(token)
