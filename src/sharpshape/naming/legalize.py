# topmark:header:start
#
#   project      : SharpShape
#   file         : legalize.py
#   file_relpath : src/sharpshape/naming/legalize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn arbitrary strings into valid C# identifiers.

Character classes follow the C# identifier grammar, expressed as Unicode general
categories:

- a *start* character is a letter (``Lu``, ``Ll``, ``Lt``, ``Lm``, ``Lo``), a
  letter number (``Nl``) or ``_``;
- a *continue* character is a start character, a decimal digit (``Nd``),
  connector punctuation (``Pc``), a combining mark (``Mn``, ``Mc``) or a
  formatting character (``Cf``).

[`legalize`][sharpshape.naming.legalize.legalize] only guarantees validity.
Case conventions are applied beforehand by
[`style_name`][sharpshape.naming.legalize.style_name], which is the pipeline used
for every emitted class, union, property and field name.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Final

from sharpshape.constants import EMPTY_NAME_PLACEHOLDER

START_CATEGORIES: Final[frozenset[str]] = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Nl"})
CONTINUE_CATEGORIES: Final[frozenset[str]] = START_CATEGORIES | {"Nd", "Pc", "Mn", "Mc", "Cf"}

# Reserved C# keywords. Contextual keywords (``var``, ``value``, ...) are valid identifiers.
CSHARP_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch", "char",
        "checked", "class", "const", "continue", "decimal", "default", "delegate", "do",
        "double", "else", "enum", "event", "explicit", "extern", "false", "finally",
        "fixed", "float", "for", "foreach", "goto", "if", "implicit", "in", "int",
        "interface", "internal", "is", "lock", "long", "namespace", "new", "null",
        "object", "operator", "out", "override", "params", "private", "protected",
        "public", "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
        "stackalloc", "static", "string", "struct", "switch", "this", "throw", "true",
        "try", "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort", "using",
        "virtual", "void", "volatile", "while",
    }
)  # fmt: skip

# Runs of letters and digits; everything else separates words.
_WORD_RUN_RE: Final[re.Pattern[str]] = re.compile(r"[^\W_]+")


def is_start_character(ch: str) -> bool:
    """Return True if ``ch`` may start an identifier."""
    return ch == "_" or unicodedata.category(ch) in START_CATEGORIES


def is_continue_character(ch: str) -> bool:
    """Return True if ``ch`` may appear after the first identifier character."""
    return ch == "_" or unicodedata.category(ch) in CONTINUE_CATEGORIES


def is_keyword(name: str) -> bool:
    """Return True if ``name`` is a reserved C# keyword."""
    return name in CSHARP_KEYWORDS


def legalize(raw: str) -> str:
    """Return a valid, non-empty identifier derived from ``raw``.

    Args:
        raw (str): Any string, including the empty string.

    Returns:
        str: ``raw`` prefixed with ``_`` when it does not start with a start character,
        with every non-continue character replaced by ``_``. The empty string maps to
        ``"Empty"``.
    """
    if not raw:
        return EMPTY_NAME_PLACEHOLDER
    if not is_start_character(raw[0]):
        return legalize("_" + raw)
    return "".join(ch if is_continue_character(ch) else "_" for ch in raw)


def _split_run(run: str) -> list[str]:
    """Split one alphanumeric run at case boundaries.

    ``"fooBar"`` → ``["foo", "Bar"]``; ``"HTTPServer"`` → ``["HTTP", "Server"]``.
    """
    words: list[str] = []
    start = 0
    for i in range(1, len(run)):
        prev, cur = run[i - 1], run[i]
        nxt = run[i + 1] if i + 1 < len(run) else ""
        lower_to_upper = (prev.islower() or prev.isdigit()) and cur.isupper()
        acronym_end = prev.isupper() and cur.isupper() and nxt.islower()
        if lower_to_upper or acronym_end:
            words.append(run[start:i])
            start = i
    words.append(run[start:])
    return words


def camel_case(raw: str) -> str:
    """Case-fold ``raw`` to lower camel case.

    Non-alphanumeric characters separate words and are dropped, as are case
    boundaries inside words. Returns ``""`` when ``raw`` contains no letters or digits.
    """
    words: list[str] = [
        word.lower() for run in _WORD_RUN_RE.findall(raw) for word in _split_run(run)
    ]
    if not words:
        return ""
    return words[0] + "".join(capitalize(w) for w in words[1:])


def capitalize(s: str) -> str:
    """Upper-case the first character of ``s``, leaving the rest untouched."""
    return s[:1].upper() + s[1:]


def style_name(raw: str) -> str:
    """Return the styled C# identifier for ``raw`` (PascalCase, legalized)."""
    return legalize(capitalize(camel_case(raw)))
