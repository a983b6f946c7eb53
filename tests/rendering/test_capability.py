# topmark:header:start
#
#   project      : antsi
#   file         : test_capability.py
#   file_relpath : tests/rendering/test_capability.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color capability detection (`--color`, FORCE_COLOR, NO_COLOR, TTY)."""

from __future__ import annotations

import io
import os

import pytest

from antsi.rendering.capability import ColorMode, resolve_color_mode, stream_isatty
from tests.conftest import parametrize

pytestmark = pytest.mark.usefixtures("clean_color_env")


class _Stream(io.StringIO):
    def __init__(self, tty: bool) -> None:
        super().__init__()
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


class _Closed:
    def isatty(self) -> bool:
        raise ValueError("I/O operation on closed file")


def test_explicit_modes_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(ColorMode.ALWAYS, isatty=False) is True

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(ColorMode.NEVER, isatty=True) is False


def test_force_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(ColorMode.AUTO, isatty=False) is True


def test_force_color_zero_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert resolve_color_mode(None, isatty=True) is True
    assert resolve_color_mode(None, isatty=False) is False


@parametrize("value", ["1", ""])
def test_no_color_disables_even_when_empty(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("NO_COLOR", value)
    assert resolve_color_mode(None, isatty=True) is False


def test_auto_follows_the_stream() -> None:
    assert resolve_color_mode(ColorMode.AUTO, stream=_Stream(tty=True)) is True
    assert resolve_color_mode(ColorMode.AUTO, stream=_Stream(tty=False)) is False


def test_stream_isatty_is_defensive() -> None:
    assert stream_isatty(None) is False
    assert stream_isatty(io.StringIO()) is False
    assert stream_isatty(_Closed()) is False  # type: ignore[arg-type]


@parametrize(
    "raw, expected",
    [
        ("auto", ColorMode.AUTO),
        ("Always", ColorMode.ALWAYS),
        ("on", ColorMode.ALWAYS),
        ("never", ColorMode.NEVER),
        ("false", ColorMode.NEVER),
        ("sometimes", None),
    ],
)
def test_color_mode_parse(raw: str, expected: ColorMode | None) -> None:
    assert ColorMode.parse(raw) is expected


def test_clean_color_env_removes_overrides(clean_color_env: None) -> None:
    assert "FORCE_COLOR" not in os.environ
    assert "NO_COLOR" not in os.environ
    assert resolve_color_mode(None, isatty=False) is False


@parametrize(
    "raw, isatty, expected",
    [
        ("always", False, True),
        ("ON", False, True),
        ("never", True, False),
        ("auto", True, True),
        ("auto", False, False),
    ],
)
def test_keywords_are_accepted_as_modes(raw: str, isatty: bool, expected: bool) -> None:
    assert resolve_color_mode(raw, isatty=isatty) is expected


def test_unknown_keyword_is_rejected() -> None:
    with pytest.raises(ValueError, match="Invalid color mode 'sometimes'"):
        resolve_color_mode("sometimes", isatty=True)
