"""
Conformance: sources that must fail to parse
Reference: Starlark grammar, LoadStmt; only load statements are supported
"""
import pytest

# Each case: (description, source, expected diagnostic fragment or None)
CASES = [
    ("empty_binding_list", 'load("x")', "at least one symbol"),
    ("only_trailing_comma", 'load("x",)', "at least one symbol"),
    ("missing_lparen", 'load "x"', "'('"),
    ("missing_module", "load(, \"a\")", "module name"),
    ("alias_without_string", 'load("x", a = b)', None),
    ("unclosed", 'load("x", "a"', None),
    ("unknown_statement", "foo()", "Unexpected token"),
    ("other_keyword", 'def f(): pass', "Unexpected keyword"),
    ("unterminated_string", '"abc', "Unterminated"),
    ("bad_character", 'load("x", "a") $', "Unexpected character"),
]


@pytest.mark.parametrize("description,source,expected", CASES, ids=[c[0] for c in CASES])
def test_load_rejected(runner, description, source, expected):
    """Malformed sources fail as a whole; no partial program is returned."""
    result = runner.parse(source)
    assert not result.ok, "Expected failure but parse succeeded"
    assert result.loads == []
    assert result.diagnostics, "A failed parse should explain itself"
    if expected is not None:
        assert any(expected.lower() in d.lower() for d in result.diagnostics), \
            f"Expected '{expected}' in diagnostics: {result.diagnostics}"
