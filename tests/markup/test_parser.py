# topmark:header:start
#
#   project      : antsi
#   file         : test_parser.py
#   file_relpath : tests/markup/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document trees built from valid markup."""

from __future__ import annotations

from antsi.markup.nodes import Content, Nodes, Styled
from antsi.styles import Color, Decoration, Style
from tests.conftest import nodes_of, parametrize


def test_plain_text() -> None:
    assert nodes_of("just text") == [Content("just text")]


def test_empty_source() -> None:
    assert nodes_of("") == []


def test_single_block() -> None:
    assert nodes_of("[fg:red](hi)") == [Styled(Style(foreground=Color.RED), [Content("hi")])]


def test_text_around_block() -> None:
    assert nodes_of("a [bg:blue](b) c") == [
        Content("a "),
        Styled(Style(background=Color.BLUE), [Content("b")]),
        Content(" c"),
    ]


def test_nested_blocks() -> None:
    assert nodes_of("[fg:red](a [bg:blue](b) c)") == [
        Styled(
            Style(foreground=Color.RED),
            [
                Content("a "),
                Styled(Style(background=Color.BLUE), [Content("b")]),
                Content(" c"),
            ],
        )
    ]


def test_all_specifiers() -> None:
    (node,) = nodes_of("[fg:green;bg:bright-black;deco:bold,underline](x)")
    assert isinstance(node, Styled)
    assert node.style == Style(
        foreground=Color.GREEN,
        background=Color.BRIGHT_BLACK,
        decorations=(Decoration.BOLD, Decoration.UNDERLINE),
    )


@parametrize(
    "source, expected",
    [
        ("[fg:red;fg:blue](x)", Style(foreground=Color.BLUE)),
        ("[bg:red;bg:default](x)", Style(background=Color.DEFAULT)),
        ("[deco:bold;deco:italic](x)", Style(decorations=(Decoration.ITALIC,))),
        ("[deco:bold,italic,bold](x)", Style(decorations=(Decoration.BOLD, Decoration.ITALIC))),
    ],
)
def test_repeated_specifiers_last_wins(source: str, expected: Style) -> None:
    (node,) = nodes_of(source)
    assert isinstance(node, Styled)
    assert node.style == expected


def test_whitespace_and_case_around_keywords() -> None:
    (node,) = nodes_of("[ FG : Red ; deco : Bold , Italic ](x)")
    assert isinstance(node, Styled)
    assert node.style == Style(
        foreground=Color.RED, decorations=(Decoration.BOLD, Decoration.ITALIC)
    )


def test_keywords_and_punctuation_in_content_are_text() -> None:
    assert nodes_of("[fg:red](fg: red; bold, x)") == [
        Styled(Style(foreground=Color.RED), [Content("fg: red; bold, x")])
    ]


def test_escaped_characters() -> None:
    assert nodes_of("\\[not\\] \\(markup\\) \\\\") == [Content("[not] (markup) \\")]


def test_escaped_whitespace_is_removed() -> None:
    assert nodes_of("one \\\n    two") == [Content("one two")]


def test_escapes_inside_content() -> None:
    assert nodes_of("[deco:bold](a\\)b)") == [
        Styled(Style(decorations=(Decoration.BOLD,)), [Content("a)b")])
    ]


def test_empty_content() -> None:
    assert nodes_of("[fg:red]()") == [Styled(Style(foreground=Color.RED), [])]


def test_nodes_coalesce_text() -> None:
    nodes = Nodes()
    nodes.push_text("a")
    nodes.push_text("b")
    nodes.push(Styled(Style()))
    nodes.extend([Content("c"), Content("d")])

    assert nodes == [Content("ab"), Styled(Style()), Content("cd")]
    assert len(nodes) == 3
