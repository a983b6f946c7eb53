# topmark:header:start
#
#   project      : antsi
#   file         : test_ansi.py
#   file_relpath : tests/rendering/test_ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI and plain rendering of document trees."""

from __future__ import annotations

from antsi.rendering.ansi import remove_sgr, render_ansi, render_plain
from tests.conftest import nodes_of, parametrize


def ansi(source: str) -> str:
    return render_ansi(nodes_of(source))


@parametrize(
    "source, expected",
    [
        ("plain", "plain"),
        ("[fg:red](hi)", "\x1b[31mhi\x1b[0m"),
        ("[bg:bright-blue](x)", "\x1b[104mx\x1b[0m"),
        ("[deco:bold,italic;fg:red](x)", "\x1b[31;1;3mx\x1b[0m"),
        ("[fg:default;bg:black](x)", "\x1b[39;40mx\x1b[0m"),
        ("a [deco:underline](b) c", "a \x1b[4mb\x1b[0m c"),
    ],
)
def test_render_ansi(source: str, expected: str) -> None:
    assert ansi(source) == expected


def test_nested_block_restores_parent_style() -> None:
    assert ansi("[fg:red](a [bg:blue](b) c)") == "\x1b[31ma \x1b[44mb\x1b[0m\x1b[31m c\x1b[0m"


def test_deeply_nested_blocks_restore_effective_style() -> None:
    assert ansi("[deco:bold]([fg:red](a[fg:blue](b)))") == (
        "\x1b[1m"
        "\x1b[31m"
        "a"
        "\x1b[34mb\x1b[0m\x1b[31;1m"
        "\x1b[0m\x1b[1m"
        "\x1b[0m"
    )


@parametrize(
    "source, expected",
    [
        ("[fg:red]()", ""),
        ("a[fg:red]()b", "ab"),
        ("[fg:red]([bg:blue]())", ""),
        ("[fg:red](\\\n  )", ""),
    ],
)
def test_empty_blocks_render_nothing(source: str, expected: str) -> None:
    assert ansi(source) == expected


def test_render_plain() -> None:
    nodes = nodes_of("[fg:red](a [deco:bold](\\[b\\]) c) d")
    assert render_plain(nodes) == "a [b] c d"


def test_remove_sgr() -> None:
    assert remove_sgr("\x1b[31;1mx\x1b[0m y \x1b[m") == "x y "
    assert remove_sgr("no escapes") == "no escapes"
