# topmark:header:start
#
#   project      : SharpShape
#   file         : test_legalize_property.py
#   file_relpath : tests/naming/test_legalize_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for identifier legalization.

For arbitrary input strings (surrogates excluded):
1) legalization is idempotent, and
2) its result is always a valid identifier.
"""

from __future__ import annotations

from hypothesis import given, settings

from sharpshape.naming.legalize import (
    is_continue_character,
    is_start_character,
    legalize,
    style_name,
)
from tests.strategies_sharpshape import s_raw_name


def _is_identifier(name: str) -> bool:
    return (
        bool(name)
        and is_start_character(name[0])
        and all(is_continue_character(ch) for ch in name[1:])
    )


@settings(max_examples=300)
@given(raw=s_raw_name)
def test_legalize_is_idempotent(raw: str) -> None:
    once = legalize(raw)
    assert legalize(once) == once


@settings(max_examples=300)
@given(raw=s_raw_name)
def test_legalize_yields_identifier(raw: str) -> None:
    assert _is_identifier(legalize(raw))


@settings(max_examples=300)
@given(raw=s_raw_name)
def test_style_name_yields_identifier(raw: str) -> None:
    """Every styled name is legal, including names built from punctuation only."""
    assert _is_identifier(style_name(raw))
