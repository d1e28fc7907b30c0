# topmark:header:start
#
#   project      : SharpShape
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE-aware logging setup."""

from __future__ import annotations

import logging

import pytest

from sharpshape.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    SharpShapeLogger,
    get_logger,
    resolve_env_log_level,
)
from sharpshape.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("sharpshape.tests.trace")
    assert isinstance(logger, SharpShapeLogger)
    with caplog.at_level(TRACE_LEVEL, logger="sharpshape.tests.trace"):
        logger.trace("planned %d names", 3)
    assert [r.levelname for r in caplog.records] == ["TRACE"]
    assert caplog.records[0].getMessage() == "planned 3 names"


def test_chalk_formatter_keeps_message() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert "careful" in ChalkFormatter("%(message)s").format(record)
