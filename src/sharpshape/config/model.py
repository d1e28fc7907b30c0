# topmark:header:start
#
#   project      : SharpShape
#   file         : model.py
#   file_relpath : src/sharpshape/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SharpShape configuration model.

`MutableConfig` is the builder: it is loaded from defaults and TOML sources,
merged, and patched with CLI overrides. `MutableConfig.freeze` validates it and
returns the immutable `Config` snapshot the renderer consumes.

TOML layout (``sharpshape.toml`` or ``[tool.sharpshape]`` in ``pyproject.toml``)::

    [output]
    namespace = "QuickType"
    header_comment = true

    [formatting]
    indent_width = 4
    newline = "lf"

    [naming]
    forbidden_names = []
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from sharpshape.config.io import get_table_value, load_toml_dict
from sharpshape.config.logging import get_logger
from sharpshape.constants import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_NAMESPACE,
    GLOBAL_FORBIDDEN_NAMES,
    LOCAL_CONFIG_NAME,
    PYPROJECT_NAME,
)
from sharpshape.core.errors import ConfigError
from sharpshape.naming.legalize import is_keyword, legalize

if TYPE_CHECKING:
    from pathlib import Path

    from sharpshape.config.io import TomlTable
    from sharpshape.config.logging import SharpShapeLogger

logger: SharpShapeLogger = get_logger(__name__)


class Newline(Enum):
    """Line terminator of the generated source."""

    LF = "\n"
    CRLF = "\r\n"

    @classmethod
    def from_name(cls, name: str) -> Newline:
        """Parse ``"lf"``/``"crlf"`` (case-insensitive).

        Raises:
            ConfigError: If ``name`` is not a known newline style.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(m.name.lower() for m in cls)
            raise ConfigError(
                f"Unknown newline style '{name}' (expected one of: {choices})"
            ) from None


def validate_namespace(namespace: str) -> str:
    """Return ``namespace`` if every dotted segment is a valid identifier.

    Raises:
        ConfigError: If a segment is empty, a reserved keyword or not a valid C# identifier.
    """
    for segment in namespace.split("."):
        if not segment or is_keyword(segment) or legalize(segment) != segment:
            raise ConfigError(f"Invalid namespace '{namespace}'")
    return namespace


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        namespace (str): C# namespace wrapping the generated code.
        header_comment (bool): Whether to emit the usage comment at the top.
        indent_width (int): Spaces per indentation level.
        newline (Newline): Line terminator of the generated source.
        forbidden_names (tuple[str, ...]): Extra top-level names generated types must avoid.
        config_files (tuple[str, ...]): Config sources merged into this snapshot.
    """

    namespace: str = DEFAULT_NAMESPACE
    header_comment: bool = True
    indent_width: int = DEFAULT_INDENT_WIDTH
    newline: Newline = Newline.LF
    forbidden_names: tuple[str, ...] = ()
    config_files: tuple[str, ...] = ()

    @property
    def effective_forbidden_names(self) -> tuple[str, ...]:
        """Built-in forbidden names followed by the configured extras."""
        return GLOBAL_FORBIDDEN_NAMES + tuple(
            n for n in self.forbidden_names if n not in GLOBAL_FORBIDDEN_NAMES
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this config in TOML table form."""
        return {
            "output": {"namespace": self.namespace, "header_comment": self.header_comment},
            "formatting": {
                "indent_width": self.indent_width,
                "newline": self.newline.name.lower(),
            },
            "naming": {"forbidden_names": list(self.forbidden_names)},
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            namespace=self.namespace,
            header_comment=self.header_comment,
            indent_width=self.indent_width,
            newline=self.newline,
            forbidden_names=list(self.forbidden_names),
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Fields left as None inherit from the config this draft is merged onto.
    """

    namespace: str | None = None
    header_comment: bool | None = None
    indent_width: int | None = None
    newline: Newline | None = None
    forbidden_names: list[str] = field(default_factory=lambda: [])
    config_files: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this draft and return the immutable `Config`.

        Raises:
            ConfigError: If a value is invalid.
        """
        defaults = Config()
        namespace = validate_namespace(
            defaults.namespace if self.namespace is None else self.namespace
        )
        indent_width = defaults.indent_width if self.indent_width is None else self.indent_width
        if indent_width < 0:
            raise ConfigError(f"indent_width must be >= 0, got {indent_width}")
        for name in self.forbidden_names:
            if legalize(name) != name:
                raise ConfigError(f"Forbidden name '{name}' is not a valid identifier")
        return Config(
            namespace=namespace,
            header_comment=(
                defaults.header_comment if self.header_comment is None else self.header_comment
            ),
            indent_width=indent_width,
            newline=self.newline or defaults.newline,
            forbidden_names=tuple(dict.fromkeys(self.forbidden_names)),
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft with ``other``'s explicit values layered over this one."""
        return MutableConfig(
            namespace=other.namespace if other.namespace is not None else self.namespace,
            header_comment=(
                other.header_comment if other.header_comment is not None else self.header_comment
            ),
            indent_width=(
                other.indent_width if other.indent_width is not None else self.indent_width
            ),
            newline=other.newline if other.newline is not None else self.newline,
            forbidden_names=[*self.forbidden_names, *other.forbidden_names],
            config_files=[*self.config_files, *other.config_files],
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the built-in defaults."""
        return Config().thaw()

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Create a draft from a parsed TOML table.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        output_tbl: TomlTable = get_table_value(data, "output")
        formatting_tbl: TomlTable = get_table_value(data, "formatting")
        naming_tbl: TomlTable = get_table_value(data, "naming")
        logger.trace("TOML [output]: %s", output_tbl)
        logger.trace("TOML [formatting]: %s", formatting_tbl)
        logger.trace("TOML [naming]: %s", naming_tbl)

        draft = cls()
        draft.namespace = _typed(output_tbl, "namespace", str)
        draft.header_comment = _typed(output_tbl, "header_comment", bool)
        draft.indent_width = _typed(formatting_tbl, "indent_width", int)
        newline = _typed(formatting_tbl, "newline", str)
        draft.newline = Newline.from_name(newline) if newline is not None else None

        names: Any = naming_tbl.get("forbidden_names", [])
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ConfigError("[naming].forbidden_names must be a list of strings")
        draft.forbidden_names = [str(n) for n in names]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from ``sharpshape.toml`` or the ``[tool.sharpshape]`` table.

        Returns:
            MutableConfig | None: The draft, or None when ``path`` is a
            ``pyproject.toml`` without a ``[tool.sharpshape]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_NAME:
            tool_section: Any = data.get("tool", {}).get("sharpshape")
            if not isinstance(tool_section, dict):
                logger.debug("No [tool.sharpshape] section in %s", path)
                return None
            data = tool_section
        draft = cls.from_toml_dict(data)
        draft.config_files = [str(path)]
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config: Path | None = None,
    ) -> MutableConfig:
        """Merge defaults, local config files and an explicit config file.

        Precedence (lowest to highest): defaults, ``pyproject.toml``,
        ``sharpshape.toml`` (both in ``cwd``), ``extra_config``.
        """
        merged = cls.from_defaults()
        candidates: list[Path] = []
        if cwd is not None:
            candidates.extend([cwd / PYPROJECT_NAME, cwd / LOCAL_CONFIG_NAME])
        if extra_config is not None:
            candidates.append(extra_config)
        for path in candidates:
            if path is not extra_config and not path.is_file():
                continue
            draft = cls.from_toml_file(path)
            if draft is not None:
                merged = merged.merge_with(draft)
        return merged


def _typed(table: TomlTable, key: str, expected: type) -> Any:
    value = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; reject it where an int is expected
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ConfigError(f"'{key}' must be of type {expected.__name__}")
    return value
