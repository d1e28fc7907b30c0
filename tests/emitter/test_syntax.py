# topmark:header:start
#
#   project      : SharpShape
#   file         : test_syntax.py
#   file_relpath : tests/emitter/test_syntax.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for C# spellings and string literal escaping."""

from __future__ import annotations

from sharpshape.emitter.syntax import (
    array_of,
    dictionary_of,
    escape_string_literal,
    nullable,
    string_literal,
)
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("plain key", "plain key"),
        ('say "hi"', 'say \\"hi\\"'),
        ("back\\slash", "back\\\\slash"),
        ("line\nbreak\t", "line\\nbreak\\t"),
        ("é", "\\u00e9"),
        ("😀", "\\ud83d\\ude00"),
        ("\x7f", "\\u007f"),
    ],
)
def test_escape_string_literal(raw: str, expected: str) -> None:
    assert escape_string_literal(raw) == expected


def test_string_literal_is_quoted() -> None:
    assert string_literal("$type") == '"$type"'


@parametrize(
    "type_expr, expected",
    [
        ("long", "long?"),
        ("double", "double?"),
        ("bool", "bool?"),
        ("string", "string"),
        ("IntegerOrString", "IntegerOrString"),
        ("long[]", "long[]"),
    ],
)
def test_nullable(type_expr: str, expected: str) -> None:
    assert nullable(type_expr) == expected


def test_containers() -> None:
    assert array_of(dictionary_of("long")) == "Dictionary<string, long>[]"
