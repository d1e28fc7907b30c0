# topmark:header:start
#
#   project      : SharpShape
#   file         : constants.py
#   file_relpath : src/sharpshape/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SharpShape Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    SHARPSHAPE_VERSION: str = get_version("sharpshape")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    SHARPSHAPE_VERSION = "0.0.0"

# Config file names looked up in the working directory:
LOCAL_CONFIG_NAME: str = "sharpshape.toml"
PYPROJECT_NAME: str = "pyproject.toml"

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "SHARPSHAPE_LOG_LEVEL"

DEFAULT_NAMESPACE: str = "QuickType"
DEFAULT_INDENT_WIDTH: int = 4

# Placeholder used when a name is derived from an empty string:
EMPTY_NAME_PLACEHOLDER: str = "Empty"

# Prefix applied repeatedly when a candidate name is already taken:
COLLISION_PREFIX: str = "Other"

# Separator between member names of a generated union type:
UNION_NAME_SEPARATOR: str = "Or"

# Top-level identifiers that generated types must never take. A type declared in
# the output namespace hides the one imported by the ``using`` directives there.
GLOBAL_FORBIDDEN_NAMES: tuple[str, ...] = (
    # Emitted by SharpShape itself
    "Convert",
    "Converter",
    # Namespaces the output imports
    "System",
    "Newtonsoft",
    # Library types the emitted code references
    "Type",
    "Exception",
    "NotImplementedException",
    "Dictionary",
    "JsonConverter",
    "JsonConvert",
    "JsonProperty",
    "JsonPropertyAttribute",
    "JsonReader",
    "JsonWriter",
    "JsonSerializer",
    "JsonSerializerSettings",
    "JsonToken",
    "MetadataPropertyHandling",
    "DateParseHandling",
)
