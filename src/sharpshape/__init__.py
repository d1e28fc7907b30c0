# topmark:header:start
#
#   project      : SharpShape
#   file         : __init__.py
#   file_relpath : src/sharpshape/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SharpShape package.

SharpShape is a C# code emitter for JSON data shapes. It takes a typed
intermediate representation (classes, arrays, maps and unions inferred from
sample documents) and renders C# types plus the Newtonsoft.Json glue needed
to read such documents, including token-driven decoders for union fields.
"""

from __future__ import annotations
