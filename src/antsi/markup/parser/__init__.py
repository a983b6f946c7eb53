# topmark:header:start
#
#   project      : antsi
#   file         : __init__.py
#   file_relpath : src/antsi/markup/parser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive-descent parser for styled markup.

`parse` never raises for invalid markup: it returns every error it could
collect together with the nodes it managed to build. The public API turns a
non-empty error list into `antsi.markup.errors.MarkupError`.

Recovery strategy:
    A nested block that fails abandons the surrounding run of text. The top
    level then reports the lexeme it is stuck on (a stray ``(``, ``)`` or ``]``,
    or whatever prevented the block from parsing), skips it and resumes. The
    lexeme is reported even when the failed block already pointed at it.

    A block nested deeper than `MAX_NESTING_DEPTH` ends the parse with a single
    `NestingTooDeep` error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from antsi.markup.errors import Expected, NestingTooDeep, UnescapedControlCharacter
from antsi.markup.lexer import SyntaxKind
from antsi.markup.nodes import Node, Nodes
from antsi.markup.parser.core import MAX_NESTING_DEPTH, Parser
from antsi.markup.parser.text import text

if TYPE_CHECKING:
    from antsi.markup.errors import ParseError
    from antsi.markup.lexer import Lexeme


class ParseResult(NamedTuple):
    """Nodes built from the source and the errors collected along the way."""

    nodes: list[Node]
    errors: list[ParseError]

    @property
    def ok(self) -> bool:
        """True when no error was collected."""
        return not self.errors


def parse(source: str) -> ParseResult:
    """Parse ``source`` into a document tree, collecting errors.

    Args:
        source (str): Markup text.

    Returns:
        ParseResult: The document nodes and any parse errors.
    """
    p: Parser = Parser(source)
    nodes: Nodes = Nodes()

    while True:
        run: Nodes | None = text(p)
        if run is not None:
            nodes.extend(run)
        if p.errors and isinstance(p.errors[-1].reason, NestingTooDeep):
            break

        lexeme: Lexeme | None = p.peek_lexeme()
        if lexeme is None:
            break
        kind: SyntaxKind = lexeme.kind
        if kind.is_control:
            p.error(UnescapedControlCharacter(kind.value))
        else:
            p.error(Expected((SyntaxKind.EOF,)))
        p.bump()

    return ParseResult(nodes=nodes.to_list(), errors=p.errors)


__all__ = [
    "MAX_NESTING_DEPTH",
    "ParseResult",
    "Parser",
    "parse",
]
