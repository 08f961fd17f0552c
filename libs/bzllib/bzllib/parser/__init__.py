"""Starlark parser subpackage (Layer 1/2 -- depends on diagnostics)."""

from bzllib.parser.ast_nodes import LoadStmt, Program, Statement
from bzllib.parser.errors import ParseError
from bzllib.parser.parser import Parser, parse
from bzllib.parser.tokenizer import Tokenizer, tokenize
from bzllib.parser.tokens import (
    KEYWORDS,
    PUNCTUATORS,
    Eof,
    Identifier,
    Keyword,
    Punctuator,
    StringLiteral,
    Token,
    render_tokens,
    to_string,
)

__all__ = [
    "Punctuator",
    "Keyword",
    "Identifier",
    "StringLiteral",
    "Eof",
    "Token",
    "KEYWORDS",
    "PUNCTUATORS",
    "to_string",
    "render_tokens",
    "Tokenizer",
    "tokenize",
    "LoadStmt",
    "Statement",
    "Program",
    "Parser",
    "parse",
    "ParseError",
]
