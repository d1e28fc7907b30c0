# topmark:header:start
#
#   project      : SharpShape
#   file         : config_resolver.py
#   file_relpath : src/sharpshape/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective configuration for a CLI invocation."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from sharpshape.cli.errors import SharpShapeFileNotFoundError, from_core_error
from sharpshape.config.logging import get_logger
from sharpshape.config.model import MutableConfig
from sharpshape.core.errors import ConfigError

if TYPE_CHECKING:
    from sharpshape.config.logging import SharpShapeLogger
    from sharpshape.config.model import Config

logger: SharpShapeLogger = get_logger(__name__)


def resolve_config(
    *,
    config_path: Path | None,
    overrides: MutableConfig | None = None,
    cwd: Path | None = None,
) -> Config:
    """Merge config files from ``cwd``, ``config_path`` and CLI ``overrides``.

    Raises:
        SharpShapeFileNotFoundError: If ``config_path`` does not exist.
        SharpShapeConfigError: If a config source is invalid.
    """
    if config_path is not None and not config_path.is_file():
        raise SharpShapeFileNotFoundError(f"Config file not found: {config_path}")
    try:
        draft = MutableConfig.load_merged(cwd=cwd or Path.cwd(), extra_config=config_path)
        if overrides is not None:
            draft = draft.merge_with(overrides)
        config = draft.freeze()
    except ConfigError as exc:
        raise from_core_error(exc) from exc
    logger.debug("Effective config: %s", config)
    return config
