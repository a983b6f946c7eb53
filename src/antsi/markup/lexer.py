# topmark:header:start
#
#   project      : antsi
#   file         : lexer.py
#   file_relpath : src/antsi/markup/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lexer for styled markup.

The lexer is context-free: it does not know whether it is inside a style
specifier list or inside content. Words are classified eagerly (``fg``, ``red``,
``bold`` ...) and keep their raw text, so the parser can treat them as plain
text when they appear in content.

Lexing rules:
    * ``[ ] ( ) : ; ,`` are single-character lexemes.
    * ``\\`` followed by one of ``\\ [ ] ( )`` is an escaped character.
    * ``\\`` followed by spaces, tabs, carriage returns or newlines consumes the
      whole whitespace run (escaped whitespace).
    * ``\\`` followed by anything else is an ERROR lexeme.
    * Any other maximal run of characters is a word. A word whose stripped,
      case-folded form is a keyword becomes a specifier, color or decoration;
      everything else is TEXT.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final, Union

from antsi.config.logging import get_logger
from antsi.styles.color import Color
from antsi.styles.decoration import Decoration

if TYPE_CHECKING:
    from collections.abc import Iterator

    from antsi.config.logging import AntsiLogger

logger: AntsiLogger = get_logger(__name__)


class SyntaxKind(Enum):
    """Kinds of lexemes produced by `Lexer`, valued by their display name."""

    SQUARE_BRACKET_OPEN = "["
    SQUARE_BRACKET_CLOSE = "]"
    PARENTHESIS_OPEN = "("
    PARENTHESIS_CLOSE = ")"
    COLON = ":"
    SEMICOLON = ";"
    COMMA = ","
    FOREGROUND_SPECIFIER = "foreground specifier"
    BACKGROUND_SPECIFIER = "background specifier"
    DECORATION_SPECIFIER = "decoration specifier"
    COLOR = "color"
    DECORATION = "decoration"
    ESCAPE_CHARACTER = "escape character"
    ESCAPE_WHITESPACE = "escape whitespace"
    TEXT = "text"
    ERROR = "invalid escape sequence"
    # Never produced by the lexer; used by the parser to report end of input.
    EOF = "end of input"

    def __str__(self) -> str:
        return self.value

    @property
    def is_control(self) -> bool:
        """Whether this kind delimits markup (``[ ] ( )``)."""
        return self in _CONTROL_KINDS


_CONTROL_KINDS: Final[frozenset[SyntaxKind]] = frozenset(
    {
        SyntaxKind.SQUARE_BRACKET_OPEN,
        SyntaxKind.SQUARE_BRACKET_CLOSE,
        SyntaxKind.PARENTHESIS_OPEN,
        SyntaxKind.PARENTHESIS_CLOSE,
    }
)

_PUNCTUATION: Final[dict[str, SyntaxKind]] = {
    "[": SyntaxKind.SQUARE_BRACKET_OPEN,
    "]": SyntaxKind.SQUARE_BRACKET_CLOSE,
    "(": SyntaxKind.PARENTHESIS_OPEN,
    ")": SyntaxKind.PARENTHESIS_CLOSE,
    ":": SyntaxKind.COLON,
    ";": SyntaxKind.SEMICOLON,
    ",": SyntaxKind.COMMA,
}

_SPECIFIERS: Final[dict[str, SyntaxKind]] = {
    "fg": SyntaxKind.FOREGROUND_SPECIFIER,
    "bg": SyntaxKind.BACKGROUND_SPECIFIER,
    "deco": SyntaxKind.DECORATION_SPECIFIER,
}

#: Characters that may follow a backslash to produce themselves.
ESCAPABLE: Final[str] = "\\[]()"

#: Whitespace that may be swallowed by a preceding backslash.
ESCAPABLE_WHITESPACE: Final[str] = " \t\r\n"

_WORD_STOP: Final[frozenset[str]] = frozenset("\\" + "".join(_PUNCTUATION))

LexemeValue = Union[Color, Decoration, str, None]


@dataclass(frozen=True)
class Span:
    """Half-open range of character offsets into the source."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True)
class Lexeme:
    """A classified slice of the source.

    Attributes:
        kind (SyntaxKind): Classification of the slice.
        text (str): Raw source text of the slice.
        span (Span): Location of the slice in the source.
        value (LexemeValue): Decoded payload: the `Color` or `Decoration` for keyword
            lexemes, the escaped character for ESCAPE_CHARACTER, the offending character
            (or None at end of input) for ERROR. None otherwise.
    """

    kind: SyntaxKind
    text: str
    span: Span
    value: LexemeValue = None


def classify_word(word: str) -> tuple[SyntaxKind, LexemeValue]:
    """Classify a word (a run without punctuation or backslashes).

    Surrounding whitespace is ignored for classification, so ``" bg "`` is a
    background specifier.
    """
    folded: str = word.strip().lower()
    specifier: SyntaxKind | None = _SPECIFIERS.get(folded)
    if specifier is not None:
        return specifier, None
    color: Color | None = Color.lookup(folded)
    if color is not None:
        return SyntaxKind.COLOR, color
    decoration: Decoration | None = Decoration.lookup(folded)
    if decoration is not None:
        return SyntaxKind.DECORATION, decoration
    return SyntaxKind.TEXT, None


class Lexer:
    """Iterator of `Lexeme` over a markup source.

    Args:
        source (str): Markup text to tokenize.
    """

    def __init__(self, source: str) -> None:
        self.source: str = source
        self._pos: int = 0

    def __iter__(self) -> Iterator[Lexeme]:
        return self

    def __next__(self) -> Lexeme:
        if self._pos >= len(self.source):
            raise StopIteration
        lexeme: Lexeme = self._lex_one()
        logger.trace("lexeme %s %r at %s", lexeme.kind.name, lexeme.text, lexeme.span)
        return lexeme

    def _emit(self, kind: SyntaxKind, end: int, value: LexemeValue = None) -> Lexeme:
        start: int = self._pos
        self._pos = end
        return Lexeme(kind=kind, text=self.source[start:end], span=Span(start, end), value=value)

    def _lex_one(self) -> Lexeme:
        src: str = self.source
        pos: int = self._pos
        ch: str = src[pos]

        punctuation: SyntaxKind | None = _PUNCTUATION.get(ch)
        if punctuation is not None:
            return self._emit(punctuation, pos + 1)

        if ch == "\\":
            return self._lex_escape()

        end: int = pos + 1
        while end < len(src) and src[end] not in _WORD_STOP:
            end += 1
        kind, value = classify_word(src[pos:end])
        return self._emit(kind, end, value)

    def _lex_escape(self) -> Lexeme:
        src: str = self.source
        pos: int = self._pos
        if pos + 1 >= len(src):
            return self._emit(SyntaxKind.ERROR, pos + 1, None)

        nxt: str = src[pos + 1]
        if nxt in ESCAPABLE:
            return self._emit(SyntaxKind.ESCAPE_CHARACTER, pos + 2, nxt)
        if nxt in ESCAPABLE_WHITESPACE:
            end: int = pos + 2
            while end < len(src) and src[end] in ESCAPABLE_WHITESPACE:
                end += 1
            return self._emit(SyntaxKind.ESCAPE_WHITESPACE, end)
        return self._emit(SyntaxKind.ERROR, pos + 2, nxt)


def tokenize(source: str) -> list[Lexeme]:
    """Return all lexemes of ``source``."""
    return list(Lexer(source))
