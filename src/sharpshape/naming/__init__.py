# topmark:header:start
#
#   project      : SharpShape
#   file         : __init__.py
#   file_relpath : src/sharpshape/naming/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Identifier legalization and name allocation."""

from __future__ import annotations

from sharpshape.naming.legalize import (
    camel_case,
    capitalize,
    is_continue_character,
    is_start_character,
    legalize,
    style_name,
)
from sharpshape.naming.registry import NameRegistry, NameScope, dedupe, prefix_other

__all__ = [
    "NameRegistry",
    "NameScope",
    "camel_case",
    "capitalize",
    "dedupe",
    "is_continue_character",
    "is_start_character",
    "legalize",
    "prefix_other",
    "style_name",
]
