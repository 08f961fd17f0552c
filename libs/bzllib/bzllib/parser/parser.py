"""Recursive-descent parser for Starlark source code.

Handles:
- ``load("module", "sym", alias = "sym", ...)`` statements

Anything else at the top level is a parse error.  The parser pulls tokens
from its own :class:`Tokenizer` one at a time and never pushes a token back.
"""

from __future__ import annotations

from typing import TypeVar

from bzllib.diagnostics.collector import DiagnosticCollector
from bzllib.parser.ast_nodes import LoadStmt, Program, Statement
from bzllib.parser.errors import ParseError
from bzllib.parser.tokenizer import Tokenizer
from bzllib.parser.tokens import (
    Eof,
    Identifier,
    Keyword,
    Punctuator,
    StringLiteral,
    Token,
    to_string,
)

_T = TypeVar("_T")


class Parser:
    """Recursive-descent parser for Starlark programs."""

    def __init__(
        self,
        source: str,
        filename: str = "<string>",
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self._diag = diagnostics if diagnostics is not None else DiagnosticCollector()
        self._tokenizer = Tokenizer(source, filename, self._diag)

    @property
    def diagnostics(self) -> DiagnosticCollector:
        return self._diag

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def _next(self) -> Token:
        """Consume the next token; a lexical error aborts the parse."""
        token = self._tokenizer.next_token()
        if token is None:
            # The tokenizer has already reported the problem.
            raise ParseError("Invalid token", self._tokenizer.location())
        return token

    def _error(self, message: str) -> ParseError:
        """Report *message* at the last token and return an error to raise."""
        loc = self._tokenizer.location()
        self._diag.error(message, loc)
        return ParseError(message, loc)

    def _expect_token(self, expected: Token, message: str) -> None:
        """Consume a token equal to *expected* or report an error."""
        token = self._next()
        if token != expected:
            raise self._error(f"{message} (got {to_string(token)})")

    def _expect_kind(self, kind: type[_T], message: str) -> _T:
        """Consume a token of variant *kind* and return it, or report an error."""
        token = self._next()
        if not isinstance(token, kind):
            raise self._error(f"{message} (got {to_string(token)})")
        return token

    # ------------------------------------------------------------------
    # Top-level program parsing
    # ------------------------------------------------------------------

    def parse(self) -> Program | None:
        """Parse the whole source.

        Returns the program, or ``None`` on the first lexical or syntactic
        error.  Errors are recorded on the diagnostic collector.
        """
        statements: list[Statement] = []

        while True:
            token = self._tokenizer.next_token()
            if token is None:
                break
            if isinstance(token, Eof):
                return Program(statements=tuple(statements))

            loc = self._tokenizer.location()
            if token is Keyword.LOAD:
                try:
                    statements.append(self._parse_load_stmt())
                except ParseError:
                    self._diag.note("Failed to parse load statement", loc)
                    return None
                continue

            if isinstance(token, Keyword):
                # No other statement keyword is supported yet.
                self._diag.error(f"Unexpected keyword: {to_string(token)}", loc)
                break

            self._diag.error(f"Unexpected token: {to_string(token)}", loc)
            return None

        return None

    # ------------------------------------------------------------------
    # load statement
    # ------------------------------------------------------------------

    def _parse_load_stmt(self) -> LoadStmt:
        """Parse ``'(' string {',' [identifier '='] string} [','] ')'``.

        The ``load`` keyword has already been consumed by the caller.
        """
        self._expect_token(Punctuator.LPAREN, "Expected '(' after 'load'")
        module = self._expect_kind(StringLiteral, "Expected module name in load statement")

        symbols: list[tuple[str, str]] = []
        while True:
            token = self._next()
            if token is Punctuator.RPAREN:
                break
            if token is not Punctuator.COMMA:
                raise self._error(
                    f"Expected ',' or ')' in load statement, got {to_string(token)}"
                )

            token = self._next()
            if token is Punctuator.RPAREN:
                # Trailing comma.
                break
            if isinstance(token, StringLiteral):
                symbols.append((token.value, token.value))
                continue
            if isinstance(token, Identifier):
                self._expect_token(Punctuator.EQUALS, f"Expected '=' after '{token.name}'")
                exported = self._expect_kind(StringLiteral, "Expected symbol name after '='")
                symbols.append((token.name, exported.value))
                continue
            raise self._error(
                f"Expected symbol or alias in load statement, got {to_string(token)}"
            )

        if not symbols:
            raise self._error("Expected at least one symbol in load statement")

        return LoadStmt(module_name=module.value, symbols=tuple(symbols))


# ------------------------------------------------------------------
# Convenience function
# ------------------------------------------------------------------


def parse(
    source: str,
    filename: str = "<string>",
    diagnostics: DiagnosticCollector | None = None,
) -> Program | None:
    """Parse Starlark source code.

    Returns:
        The parsed program, or ``None`` if the source does not parse.  Pass a
        ``diagnostics`` collector to inspect the reason.
    """
    return Parser(source, filename, diagnostics).parse()
