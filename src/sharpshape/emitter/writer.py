# topmark:header:start
#
#   project      : SharpShape
#   file         : writer.py
#   file_relpath : src/sharpshape/emitter/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation-aware line writer.

Indentation is only changed through context managers, so every exit path
(including exceptions) restores the previous level and nested emitters compose
without leaking indentation.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


class SourceWriter:
    """Accumulate source lines with scoped indentation.

    Args:
        indent_unit (str): Text inserted once per indentation level.
        newline (str): Line terminator used by `getvalue`.
    """

    def __init__(self, *, indent_unit: str = "    ", newline: str = "\n") -> None:
        self.indent_unit = indent_unit
        self.newline = newline
        self._level = 0
        self._lines: list[str] = []

    @property
    def level(self) -> int:
        """Current indentation level."""
        return self._level

    def line(self, text: str = "") -> None:
        """Emit one line at the current indentation (blank lines carry no indentation)."""
        self._lines.append(self.indent_unit * self._level + text if text else "")

    def blank(self) -> None:
        """Emit one blank line."""
        self._lines.append("")

    def lines(self, texts: Iterable[str]) -> None:
        """Emit several lines at the current indentation."""
        for text in texts:
            self.line(text)

    @contextmanager
    def indented(self) -> Iterator[None]:
        """Increase the indentation level for the duration of the ``with`` block."""
        self._level += 1
        try:
            yield
        finally:
            self._level -= 1

    @contextmanager
    def block(self, header: str | None = None) -> Iterator[None]:
        """Emit ``header`` (if any), then a braced, indented block."""
        if header is not None:
            self.line(header)
        self.line("{")
        with self.indented():
            yield
        self.line("}")

    def separated(self, emitters: Iterable[Callable[[], None]]) -> None:
        """Call each emitter in turn, with one blank line between their outputs."""
        for i, emit in enumerate(emitters):
            if i:
                self.blank()
            emit()

    def getvalue(self) -> str:
        """Return the accumulated text, terminated by a final newline."""
        return self.newline.join(self._lines) + self.newline
