# topmark:header:start
#
#   project      : antsi
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

import pytest
from packaging.version import InvalidVersion, Version

from antsi.constants import ANTSI_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

pytestmark = pytest.mark.cli


def test_version_outputs_pep440_version() -> None:
    """It should output the PEP 440 version string (exact match)."""
    result = run_cli(["--no-config", "--no-color", "version"])

    assert_SUCCESS(result)
    out: str = result.stdout.strip()
    assert out == ANTSI_VERSION
    try:
        Version(out)
    except InvalidVersion as exc:
        pytest.fail(f"Not a valid PEP 440 version: {out!r} ({exc})")


def test_version_json() -> None:
    result = run_cli(["--no-config", "version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": ANTSI_VERSION}


@mark_cli
def test_version_verbose_has_heading() -> None:
    result = run_cli(["--no-config", "--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert result.stdout.splitlines() == ["antsi version:", f"    {ANTSI_VERSION}"]


def test_version_rejects_unknown_format() -> None:
    result = run_cli(["--no-config", "version", "--format", "yaml"])
    assert result.exit_code == 2
    assert "Must be one of: text, json" in result.stderr
