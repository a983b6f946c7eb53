# topmark:header:start
#
#   project      : antsi
#   file         : style.py
#   file_relpath : src/antsi/markup/parser/style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grammar rules for the ``[ ... ]`` style specifier list.

```text
style     ::= "[" specifier ( ";" specifier )* "]"
specifier ::= ("fg" | "bg") ":" COLOR
            | "deco" ":" DECORATION ( "," DECORATION )*
```

When a tag is repeated, the last occurrence wins.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Final, cast

from antsi.markup.errors import Expected
from antsi.markup.lexer import SyntaxKind
from antsi.styles.style import Style

if TYPE_CHECKING:
    from antsi.markup.lexer import Lexeme
    from antsi.markup.parser.core import Parser
    from antsi.styles.color import Color
    from antsi.styles.decoration import Decoration

SPECIFIER_KINDS: Final[tuple[SyntaxKind, ...]] = (
    SyntaxKind.FOREGROUND_SPECIFIER,
    SyntaxKind.BACKGROUND_SPECIFIER,
    SyntaxKind.DECORATION_SPECIFIER,
)


def style(p: Parser) -> Style | None:
    """Parse a bracketed specifier list into a `Style`.

    Returns:
        Style | None: The parsed style, or None if an error was recorded.
    """
    if p.expect(SyntaxKind.SQUARE_BRACKET_OPEN) is None:
        return None

    result: Style = Style()
    first: bool = True

    while True:
        if not first:
            if p.at(SyntaxKind.SEMICOLON):
                p.bump()
            else:
                break
        first = False

        if p.at(SyntaxKind.FOREGROUND_SPECIFIER):
            color: Color | None = color_specifier(p, SyntaxKind.FOREGROUND_SPECIFIER)
            if color is None:
                return None
            result = replace(result, foreground=color)
        elif p.at(SyntaxKind.BACKGROUND_SPECIFIER):
            color = color_specifier(p, SyntaxKind.BACKGROUND_SPECIFIER)
            if color is None:
                return None
            result = replace(result, background=color)
        elif p.at(SyntaxKind.DECORATION_SPECIFIER):
            decorations: list[Decoration] | None = decorations_specifier(
                p, SyntaxKind.DECORATION_SPECIFIER
            )
            if decorations is None:
                return None
            result = result.with_decorations(decorations)
        else:
            p.error(Expected(SPECIFIER_KINDS))
            return None

    if p.expect(SyntaxKind.SQUARE_BRACKET_CLOSE) is None:
        return None
    return result


def color_specifier(p: Parser, tag: SyntaxKind) -> Color | None:
    """Parse ``<tag> : <color>``."""
    if p.expect(tag) is None or p.expect(SyntaxKind.COLON) is None:
        return None
    token: Lexeme | None = p.expect(SyntaxKind.COLOR)
    if token is None:
        return None
    return cast("Color", token.value)


def decorations_specifier(p: Parser, tag: SyntaxKind) -> list[Decoration] | None:
    """Parse ``<tag> : <decoration> ( , <decoration> )*``, deduplicating values."""
    if p.expect(tag) is None or p.expect(SyntaxKind.COLON) is None:
        return None

    decorations: list[Decoration] = []
    first: bool = True
    while True:
        if not first:
            if p.at(SyntaxKind.COMMA):
                p.bump()
            else:
                break
        first = False

        token: Lexeme | None = p.expect(SyntaxKind.DECORATION)
        if token is None:
            return None
        decoration: Decoration = cast("Decoration", token.value)
        if decoration not in decorations:
            decorations.append(decoration)

    return decorations
