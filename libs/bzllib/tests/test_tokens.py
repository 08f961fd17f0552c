"""Tests for token values, tables and rendering."""

from __future__ import annotations

import pytest

from bzllib.parser.tokenizer import tokenize
from bzllib.parser.tokens import (
    KEYWORDS,
    PUNCTUATORS,
    TOKEN_TYPES,
    Eof,
    Identifier,
    Keyword,
    Punctuator,
    StringLiteral,
    render_tokens,
    to_string,
)


class TestTables:
    def test_keyword_count(self) -> None:
        assert len(Keyword) == 15
        assert len(KEYWORDS) == 15

    def test_keyword_lookup(self) -> None:
        assert KEYWORDS["load"] is Keyword.LOAD
        assert "Load" not in KEYWORDS

    def test_punctuator_spellings_unique(self) -> None:
        spellings = [p.value for p in Punctuator]
        assert len(spellings) == len(set(spellings))

    def test_punctuator_table_covers_enum(self) -> None:
        assert set(PUNCTUATORS) == set(Punctuator)

    def test_punctuator_table_longest_first(self) -> None:
        lengths = [len(p.value) for p in PUNCTUATORS]
        assert lengths == sorted(lengths, reverse=True)

    def test_every_prefix_comes_after_its_extension(self) -> None:
        order = {p: i for i, p in enumerate(PUNCTUATORS)}
        for short in Punctuator:
            for long in Punctuator:
                if long is not short and long.value.startswith(short.value):
                    assert order[long] < order[short], (long, short)


class TestEquality:
    def test_identifier_equality(self) -> None:
        assert Identifier("a") == Identifier("a")
        assert Identifier("a") != Identifier("b")

    def test_string_vs_identifier(self) -> None:
        assert StringLiteral("a") != Identifier("a")

    def test_eof_equality(self) -> None:
        assert Eof() == Eof()

    def test_enum_vs_payload(self) -> None:
        assert Keyword.LOAD != Identifier("load")
        assert Punctuator.COMMA != StringLiteral(",")

    def test_tokens_are_hashable(self) -> None:
        assert len({Identifier("a"), Identifier("a"), Keyword.IF, Eof()}) == 3


# Samples covering every variant of the Token union.
_SAMPLES = [
    (Punctuator.DOUBLE_SLASH_EQUALS, "//="),
    (Keyword.LAMBDA, "lambda"),
    (Identifier("cc_test"), "cc_test"),
    (StringLiteral("a b"), '"a b"'),
    (StringLiteral(""), '""'),
    (Eof(), "<eof>"),
]


class TestRendering:
    @pytest.mark.parametrize("token,expected", _SAMPLES, ids=lambda v: repr(v))
    def test_to_string(self, token, expected: str) -> None:
        assert to_string(token) == expected

    @pytest.mark.parametrize("token,expected", _SAMPLES, ids=lambda v: repr(v))
    def test_str_matches_to_string(self, token, expected: str) -> None:
        assert str(token) == expected

    def test_samples_cover_every_variant(self) -> None:
        covered = {type(token) for token, _ in _SAMPLES}
        assert covered == set(TOKEN_TYPES)

    def test_unknown_variant_rejected(self) -> None:
        with pytest.raises(TypeError):
            to_string("load")  # type: ignore[arg-type]

    def test_render_load_statement(self) -> None:
        tokens = tokenize('load("@rules_cc//cc:defs.bzl", "cc_library", "cc_test")')
        assert tokens is not None
        assert render_tokens(tokens) == (
            'load ( "@rules_cc//cc:defs.bzl" , "cc_library" , "cc_test" )'
        )

    def test_render_split_recovers_spellings(self) -> None:
        tokens = tokenize('x += y ** two if not z else "s" # trailing')
        assert tokens is not None
        assert render_tokens(tokens).split(" ") == [to_string(t) for t in tokens]

    def test_render_empty(self) -> None:
        assert render_tokens([]) == ""
