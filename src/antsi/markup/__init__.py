# topmark:header:start
#
#   project      : antsi
#   file         : __init__.py
#   file_relpath : src/antsi/markup/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Styled markup: lexer, parser, document tree and parse errors.

Markup syntax:

```text
[ <style specifiers> ]( <content> )

<style specifiers> ::= <style specifier> ( ; <style specifier> )*
 <style specifier> ::= fg : <color> | bg : <color> | deco : <decoration> ( , <decoration> )*
         <content> ::= text and nested markup; \\ [ ] ( ) must be escaped with \\
```

A backslash followed by whitespace removes that whitespace.
"""

from __future__ import annotations

from antsi.markup.errors import (
    Expected,
    MarkupError,
    NestingTooDeep,
    ParseError,
    UnescapedControlCharacter,
    UnknownEscapeSequence,
)
from antsi.markup.lexer import Lexeme, Lexer, Span, SyntaxKind, tokenize
from antsi.markup.nodes import Content, Node, Nodes, Styled
from antsi.markup.parser import ParseResult, parse

__all__ = [
    "Content",
    "Expected",
    "Lexeme",
    "Lexer",
    "MarkupError",
    "NestingTooDeep",
    "Node",
    "Nodes",
    "ParseError",
    "ParseResult",
    "Span",
    "Styled",
    "SyntaxKind",
    "UnescapedControlCharacter",
    "UnknownEscapeSequence",
    "parse",
    "tokenize",
]
