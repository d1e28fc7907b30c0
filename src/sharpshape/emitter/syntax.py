# topmark:header:start
#
#   project      : SharpShape
#   file         : syntax.py
#   file_relpath : src/sharpshape/emitter/syntax.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""C# spellings and literal escaping."""

from __future__ import annotations

from typing import Final

OBJECT: Final[str] = "object"
LONG: Final[str] = "long"
DOUBLE: Final[str] = "double"
BOOL: Final[str] = "bool"
STRING: Final[str] = "string"

# Primitive spellings that are value types and need `?` to hold null.
VALUE_TYPES: Final[frozenset[str]] = frozenset({LONG, DOUBLE, BOOL})

_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def array_of(element: str) -> str:
    """Return the array type of ``element``."""
    return f"{element}[]"


def dictionary_of(value: str) -> str:
    """Return the string-keyed dictionary type with ``value`` values."""
    return f"Dictionary<string, {value}>"


def nullable(type_expr: str) -> str:
    """Mark value types nullable; reference types are returned unchanged."""
    return f"{type_expr}?" if type_expr in VALUE_TYPES else type_expr


def escape_string_literal(raw: str) -> str:
    """Escape ``raw`` for use between double quotes in a regular C# string literal.

    Printable ASCII is kept as is; everything else is written as ``\\uXXXX`` UTF-16
    code units so the generated source stays ASCII.
    """
    out: list[str] = []
    for ch in raw:
        if ch in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[ch])
        elif " " <= ch <= "~":
            out.append(ch)
        else:
            units = ch.encode("utf-16-be", "surrogatepass")
            for i in range(0, len(units), 2):
                out.append(f"\\u{units[i]:02x}{units[i + 1]:02x}")
    return "".join(out)


def string_literal(raw: str) -> str:
    """Return ``raw`` as a quoted C# string literal."""
    return f'"{escape_string_literal(raw)}"'
