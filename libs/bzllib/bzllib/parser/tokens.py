"""Token definitions for the Starlark tokenizer.

A token is one of five variants: :class:`Punctuator`, :class:`Keyword`,
:class:`Identifier`, :class:`StringLiteral` or :class:`Eof`.  Enum members
carry their source spelling as their value; the remaining variants are
frozen dataclasses so that tokens compare by value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union


class Punctuator(Enum):
    """Operators, delimiters and augmented-assignment symbols."""

    # Arithmetic / bitwise operators
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    DOUBLE_SLASH = "//"
    PERCENT = "%"
    DOUBLE_STAR = "**"
    TILDE = "~"
    AMPERSAND = "&"
    PIPE = "|"
    CARET = "^"
    LSHIFT = "<<"
    RSHIFT = ">>"

    # Delimiters
    DOT = "."
    COMMA = ","
    EQUALS = "="
    SEMICOLON = ";"
    COLON = ":"
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    LBRACE = "{"
    RBRACE = "}"

    # Comparisons
    LESS = "<"
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="
    EQUAL_EQUAL = "=="
    NOT_EQUAL = "!="

    # Augmented assignment
    PLUS_EQUALS = "+="
    MINUS_EQUALS = "-="
    STAR_EQUALS = "*="
    SLASH_EQUALS = "/="
    DOUBLE_SLASH_EQUALS = "//="
    PERCENT_EQUALS = "%="
    AMPERSAND_EQUALS = "&="
    PIPE_EQUALS = "|="
    CARET_EQUALS = "^="
    LSHIFT_EQUALS = "<<="
    RSHIFT_EQUALS = ">>="

    def __str__(self) -> str:
        return self.value


class Keyword(Enum):
    """Reserved words of the language."""

    AND = "and"
    ELSE = "else"
    LOAD = "load"
    BREAK = "break"
    FOR = "for"
    NOT = "not"
    CONTINUE = "continue"
    IF = "if"
    OR = "or"
    DEF = "def"
    IN = "in"
    PASS = "pass"
    ELIF = "elif"
    LAMBDA = "lambda"
    RETURN = "return"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Identifier:
    """A non-reserved name: ``[A-Za-z_][A-Za-z0-9_]*``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class StringLiteral:
    """Raw text between string delimiters. Escapes are not decoded."""

    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class Eof:
    """End-of-input sentinel."""

    def __str__(self) -> str:
        return "<eof>"


Token = Union[Punctuator, Keyword, Identifier, StringLiteral, Eof]

# Tuple form of the union, for isinstance() checks.
TOKEN_TYPES: tuple[type, ...] = (Punctuator, Keyword, Identifier, StringLiteral, Eof)

# Keyword spelling -> Keyword mapping.
# Identifier-shaped text is checked against this table during tokenizing.
KEYWORDS: dict[str, Keyword] = {kw.value: kw for kw in Keyword}

# Longest spelling first, so "//=" is tried before "//" and "/".
PUNCTUATORS: tuple[Punctuator, ...] = tuple(
    sorted(Punctuator, key=lambda p: len(p.value), reverse=True)
)


def to_string(token: Token) -> str:
    """Return the canonical rendering of *token*.

    Raises:
        TypeError: if *token* is not one of the five token variants.
    """
    if isinstance(token, (Punctuator, Keyword)):
        return token.value
    if isinstance(token, Identifier):
        return token.name
    if isinstance(token, StringLiteral):
        return f'"{token.value}"'
    if isinstance(token, Eof):
        return "<eof>"
    raise TypeError(f"Not a token: {token!r}")


def render_tokens(tokens: Iterable[Token]) -> str:
    """Render *tokens* separated by single spaces."""
    return " ".join(to_string(t) for t in tokens)
