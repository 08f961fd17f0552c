"""Tokenizer and ``load()`` parser for Starlark build files."""

from bzllib.parser import Program, parse, tokenize

__all__ = ["tokenize", "parse", "Program"]

__version__ = "0.1.0"
