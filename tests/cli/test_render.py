# topmark:header:start
#
#   project      : SharpShape
#   file         : test_render.py
#   file_relpath : tests/cli/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `render` command output, overrides and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from sharpshape.cli.exit_codes import ExitCode
from tests.cli.conftest import SIMPLE_IR, assert_SUCCESS, run_cli_in, write_ir
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_render_to_stdout(tmp_path: Path) -> None:
    write_ir(tmp_path)
    result = run_cli_in(tmp_path, ["render", "shapes.json"])
    assert_SUCCESS(result)
    assert result.output.startswith("// To parse this JSON data")
    assert "namespace QuickType\n{\n" in result.output
    assert "public struct IntegerOrString" in result.output
    assert "public IntegerOrString Id { get; set; }" in result.output


@mark_cli
def test_render_from_stdin(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["render", "-"], input_text=json.dumps(SIMPLE_IR))
    assert_SUCCESS(result)
    assert "public partial class TopLevel" in result.output


@mark_cli
def test_render_to_file_keeps_crlf(tmp_path: Path) -> None:
    write_ir(tmp_path)
    result = run_cli_in(
        tmp_path, ["render", "shapes.json", "-o", "Shapes.cs", "--newline", "crlf"]
    )
    assert_SUCCESS(result)
    assert result.output == ""
    data = (tmp_path / "Shapes.cs").read_bytes()
    assert data.endswith(b"}\r\n")
    assert data.count(b"\n") == data.count(b"\r\n")


@mark_cli
def test_render_overrides(tmp_path: Path) -> None:
    write_ir(tmp_path)
    result = run_cli_in(
        tmp_path,
        [
            "render",
            "shapes.json",
            "--namespace",
            "Acme.Models",
            "--no-header",
            "--indent-width",
            "2",
        ],
    )
    assert_SUCCESS(result)
    assert result.output.startswith("namespace Acme.Models\n{\n  using System;\n")


@mark_cli
def test_render_uses_local_config(tmp_path: Path) -> None:
    write_ir(tmp_path)
    (tmp_path / "sharpshape.toml").write_text(
        '[output]\nnamespace = "FromConfig"\nheader_comment = false\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["render", "shapes.json"])
    assert_SUCCESS(result)
    assert result.output.startswith("namespace FromConfig\n")


@mark_cli
def test_cli_overrides_win_over_config(tmp_path: Path) -> None:
    write_ir(tmp_path)
    extra = tmp_path / "extra.toml"
    extra.write_text('[output]\nnamespace = "FromExtra"\n', encoding="utf-8")
    result = run_cli_in(
        tmp_path, ["render", "shapes.json", "--config", str(extra), "--namespace", "FromCli"]
    )
    assert_SUCCESS(result)
    assert "namespace FromCli\n" in result.output


@mark_cli
def test_render_missing_input(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["render", "missing.json"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "IR document not found" in result.output


@mark_cli
def test_render_malformed_document(tmp_path: Path) -> None:
    write_ir(tmp_path, doc={"top_level": {"kind": "class", "ref": "Nope"}})
    result = run_cli_in(tmp_path, ["render", "shapes.json"])
    assert result.exit_code == ExitCode.INPUT_ERROR
    assert "undefined class 'Nope'" in result.output


@mark_cli
def test_render_invalid_json(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["render", "-"], input_text="{nope")
    assert result.exit_code == ExitCode.INPUT_ERROR
    assert "invalid JSON" in result.output


@mark_cli
def test_render_invalid_namespace(tmp_path: Path) -> None:
    write_ir(tmp_path)
    result = run_cli_in(tmp_path, ["render", "shapes.json", "--namespace", "1bad"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Invalid namespace '1bad'" in result.output


@mark_cli
def test_render_keyword_namespace(tmp_path: Path) -> None:
    write_ir(tmp_path)
    result = run_cli_in(tmp_path, ["render", "shapes.json", "--namespace", "Acme.class"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Invalid namespace 'Acme.class'" in result.output


@mark_cli
def test_render_missing_config_file(tmp_path: Path) -> None:
    write_ir(tmp_path)
    result = run_cli_in(tmp_path, ["render", "shapes.json", "--config", "nope.toml"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND


@mark_cli
def test_render_broken_config_file(tmp_path: Path) -> None:
    write_ir(tmp_path)
    (tmp_path / "sharpshape.toml").write_text("[output\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "shapes.json"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Invalid TOML" in result.output


@mark_cli
def test_render_bad_newline_choice(tmp_path: Path) -> None:
    write_ir(tmp_path)
    result = run_cli_in(tmp_path, ["render", "shapes.json", "--newline", "cr"])
    assert result.exit_code == 2
