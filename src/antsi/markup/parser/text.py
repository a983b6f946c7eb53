# topmark:header:start
#
#   project      : antsi
#   file         : text.py
#   file_relpath : src/antsi/markup/parser/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grammar rules for text, styled blocks and their content.

```text
text    ::= ( markup | ESCAPE_CHARACTER | ESCAPE_WHITESPACE | any other lexeme )*
markup  ::= style content
content ::= "(" text ")"
```

`text` stops in front of ``(``, ``)`` and ``]`` (and at end of input) and leaves
it to the caller to decide whether that lexeme is expected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from antsi.markup.errors import NestingTooDeep, UnknownEscapeSequence
from antsi.markup.lexer import SyntaxKind
from antsi.markup.nodes import Nodes, Styled
from antsi.markup.parser.core import MAX_NESTING_DEPTH
from antsi.markup.parser.style import style

if TYPE_CHECKING:
    from antsi.markup.lexer import Lexeme
    from antsi.markup.parser.core import Parser
    from antsi.styles.style import Style

_STOP: frozenset[SyntaxKind] = frozenset(
    {
        SyntaxKind.PARENTHESIS_OPEN,
        SyntaxKind.PARENTHESIS_CLOSE,
        SyntaxKind.SQUARE_BRACKET_CLOSE,
    }
)


def text(p: Parser) -> Nodes | None:
    """Parse a run of text that may contain nested styled markup.

    Returns:
        Nodes | None: The parsed nodes, or None if a nested block failed to parse.
    """
    nodes: Nodes = Nodes()

    while True:
        kind: SyntaxKind | None = p.peek()
        if kind is None or kind in _STOP:
            break

        if kind is SyntaxKind.SQUARE_BRACKET_OPEN:
            node: Styled | None = markup(p)
            if node is None:
                return None
            nodes.push(node)
        elif kind is SyntaxKind.ESCAPE_WHITESPACE:
            p.bump()
        elif kind is SyntaxKind.ESCAPE_CHARACTER:
            lexeme: Lexeme = p.bump()
            nodes.push_text(str(lexeme.value))
        elif kind is SyntaxKind.ERROR:
            bad: Lexeme = cast("Lexeme", p.peek_lexeme())
            p.error(UnknownEscapeSequence(cast("str | None", bad.value)))
            p.bump()
        else:
            nodes.push_text(p.bump().text)

    return nodes


def markup(p: Parser) -> Styled | None:
    """Parse a styled block ``[specifiers](content)``.

    Blocks nested deeper than `MAX_NESTING_DEPTH` are rejected.
    """
    if p.depth >= MAX_NESTING_DEPTH:
        p.error(NestingTooDeep(MAX_NESTING_DEPTH))
        return None
    block_style: Style | None = style(p)
    if block_style is None:
        return None
    p.depth += 1
    try:
        children: Nodes | None = content(p)
    finally:
        p.depth -= 1
    if children is None:
        return None
    return Styled(style=block_style, children=children.to_list())


def content(p: Parser) -> Nodes | None:
    """Parse the parenthesized content of a styled block."""
    if p.expect(SyntaxKind.PARENTHESIS_OPEN) is None:
        return None
    nodes: Nodes | None = text(p)
    if nodes is None:
        return None
    if p.expect(SyntaxKind.PARENTHESIS_CLOSE) is None:
        return None
    return nodes
