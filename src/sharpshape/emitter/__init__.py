# topmark:header:start
#
#   project      : SharpShape
#   file         : __init__.py
#   file_relpath : src/sharpshape/emitter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""C# emitter: name planning, type mapping and source rendering."""

from __future__ import annotations

from sharpshape.emitter.renderer import CSharpRenderer

__all__ = ["CSharpRenderer"]
