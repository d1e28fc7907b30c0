# topmark:header:start
#
#   project      : SharpShape
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running SharpShape in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so that config discovery (``pyproject.toml``,
``sharpshape.toml``) and relative IR paths resolve against the temporary test
directory instead of the repository.
"""

from __future__ import annotations

import json
import os
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from sharpshape.cli.exit_codes import ExitCode
from sharpshape.cli.main import cli
from sharpshape.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

SIMPLE_IR: dict[str, Any] = {
    "top_level": {"kind": "class", "ref": "TopLevel"},
    "classes": {
        "TopLevel": {
            "properties": {
                "id": {"kind": "union", "members": ["integer", "string"]},
                "name": "string",
            }
        }
    },
}


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reattach test logging after each CLI run.

    The CLI points the root handler at the runner's temporary stderr.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


def write_ir(directory: Path, name: str = "shapes.json", doc: Any = None) -> Path:
    """Write an IR document (``SIMPLE_IR`` by default) into ``directory``."""
    path = directory / name
    path.write_text(json.dumps(SIMPLE_IR if doc is None else doc), encoding="utf-8")
    return path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["render", "x.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass to the
            command.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files or config
    discovery (e.g., ``--help`` / ``version``).
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output
