# topmark:header:start
#
#   project      : antsi
#   file         : test_cli_options.py
#   file_relpath : tests/cli/test_cli_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: group options, configuration files and help."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from antsi.cli.exit_codes import ExitCode
from antsi.cli.errors import AntsiUsageError
from antsi.cli.options import resolve_cli_color_mode, resolve_verbosity
from antsi.config.logging import TRACE_LEVEL
from antsi.rendering.capability import ColorMode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = [pytest.mark.cli, pytest.mark.usefixtures("clean_color_env")]


@parametrize(
    "verbose, quiet, level",
    [
        (0, 0, 30),
        (1, 0, 20),
        (2, 0, 10),
        (3, 0, TRACE_LEVEL),
        (0, 1, 40),
        (0, 2, 40),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, level: int) -> None:
    assert resolve_verbosity(verbose, quiet) == level


def test_verbose_and_quiet_are_exclusive() -> None:
    with pytest.raises(AntsiUsageError):
        resolve_verbosity(1, 1)

    result = run_cli(["--no-config", "-v", "-q", "version"])
    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "mutually exclusive" in result.stderr


def test_resolve_cli_color_mode_precedence() -> None:
    assert resolve_cli_color_mode(
        color_mode=ColorMode.ALWAYS, no_color=True, config_mode=ColorMode.AUTO
    ) is ColorMode.NEVER
    assert resolve_cli_color_mode(
        color_mode=ColorMode.ALWAYS, no_color=False, config_mode=ColorMode.NEVER
    ) is ColorMode.ALWAYS
    assert resolve_cli_color_mode(
        color_mode=None, no_color=False, config_mode=ColorMode.NEVER
    ) is ColorMode.NEVER


def test_color_option_accepts_aliases() -> None:
    result = run_cli(["--no-config", "--color", "on", "render", "[fg:red](x)"])

    assert_SUCCESS(result)
    assert result.stdout == "\x1b[31mx\x1b[0m\n"


def test_color_option_rejects_unknown_value() -> None:
    result = run_cli(["--no-config", "--color", "rainbow", "render", "x"])
    assert result.exit_code == 2


def test_group_without_command_prints_help() -> None:
    result = run_cli(["--no-config"])

    assert_SUCCESS(result)
    assert "Hint: use 'antsi render TEXT'" in result.stdout
    for command in ("render", "strip", "check", "escape", "version"):
        assert command in result.stdout


def test_config_file_sets_color(tmp_path: Path) -> None:
    (tmp_path / "antsi.toml").write_text('root = true\ncolor = "always"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["render", "[fg:red](x)"])

    assert_SUCCESS(result)
    assert result.stdout == "\x1b[31mx\x1b[0m\n"


def test_cli_flag_beats_config_file(tmp_path: Path) -> None:
    (tmp_path / "antsi.toml").write_text('root = true\ncolor = "always"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["--color", "never", "render", "[fg:red](x)"])

    assert_SUCCESS(result)
    assert result.stdout == "x\n"


def test_config_file_sets_newline(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.antsi]\nroot = true\nnewline = false\n", encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["render", "x"])
    assert result.stdout == "x"

    result = run_cli_in(tmp_path, ["render", "--newline", "x"])
    assert result.stdout == "x\n"


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    (tmp_path / "antsi.toml").write_text('root = true\ncolor = "always"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-config", "render", "[fg:red](x)"])

    assert_SUCCESS(result)
    assert result.stdout == "x\n"


def test_explicit_config_file(tmp_path: Path) -> None:
    (tmp_path / "colors.toml").write_text('color = "always"\n', encoding="utf-8")

    result = run_cli_in(
        tmp_path, ["--no-config", "--config", "colors.toml", "render", "[fg:red](x)"]
    )

    assert_SUCCESS(result)
    assert result.stdout == "\x1b[31mx\x1b[0m\n"


def test_invalid_config_file(tmp_path: Path) -> None:
    (tmp_path / "antsi.toml").write_text('root = true\ncolor = "rainbow"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["render", "x"])

    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "rainbow" in result.stderr


def test_missing_explicit_config_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-config", "--config", "nope.toml", "render", "x"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
