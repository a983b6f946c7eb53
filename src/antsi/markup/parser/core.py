# topmark:header:start
#
#   project      : antsi
#   file         : core.py
#   file_relpath : src/antsi/markup/parser/core.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser state: a peekable lexeme stream plus the collected errors.

Grammar rules live in `antsi.markup.parser.text` and
`antsi.markup.parser.style`; they receive the `Parser` and use the
primitives defined here (`peek`, `at`, `bump`, `expect`, `error`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from antsi.config.logging import get_logger
from antsi.markup.errors import Expected, ParseError
from antsi.markup.lexer import Lexeme, Lexer, SyntaxKind

if TYPE_CHECKING:
    from antsi.config.logging import AntsiLogger
    from antsi.markup.errors import Reason

logger: AntsiLogger = get_logger(__name__)

#: Deepest nesting of styled blocks accepted by the parser.
MAX_NESTING_DEPTH: Final[int] = 128


class Parser:
    """Cursor over the lexemes of a markup source.

    Args:
        source (str): Markup text to parse.
    """

    def __init__(self, source: str) -> None:
        self.source: str = source
        self._lexemes: list[Lexeme] = list(Lexer(source))
        self._pos: int = 0
        self.errors: list[ParseError] = []
        self.depth: int = 0

    def peek_lexeme(self) -> Lexeme | None:
        """Return the next lexeme without consuming it."""
        if self._pos < len(self._lexemes):
            return self._lexemes[self._pos]
        return None

    def peek(self) -> SyntaxKind | None:
        """Return the kind of the next lexeme without consuming it."""
        lexeme: Lexeme | None = self.peek_lexeme()
        return lexeme.kind if lexeme is not None else None

    def at(self, kind: SyntaxKind) -> bool:
        """Check if the parser is currently at the given kind."""
        return self.peek() is kind

    def bump(self) -> Lexeme:
        """Consume and return the next lexeme.

        Raises:
            IndexError: If the stream is exhausted; rules must check first.
        """
        lexeme: Lexeme = self._lexemes[self._pos]
        self._pos += 1
        return lexeme

    def expect(self, kind: SyntaxKind) -> Lexeme | None:
        """Consume a lexeme of ``kind``, or record an error and return None."""
        if self.at(kind):
            return self.bump()
        self.error(Expected((kind,)))
        return None

    def error(self, reason: Reason) -> None:
        """Record an error located at the next lexeme (or at end of input)."""
        lexeme: Lexeme | None = self.peek_lexeme()
        err: ParseError
        if lexeme is None:
            err = ParseError(span=None, at=SyntaxKind.EOF, reason=reason)
        else:
            err = ParseError(span=lexeme.span, at=lexeme.kind, reason=reason)
        logger.debug("parse error: %s", err.message)
        self.errors.append(err)
