# topmark:header:start
#
#   project      : antsi
#   file         : api.py
#   file_relpath : src/antsi/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public, typed API for converting styled markup.

All functions that accept markup raise `antsi.markup.errors.MarkupError`
(a `ValueError`) when the markup is invalid; text without markup passes through
unchanged.

Styled markup is defined as follows:

```text
[ <style specifiers> ]( <content> )

<style specifiers> ::= <style specifier> ( ; <style specifier> )*
 <style specifier> ::= <tag> : <value>
         <content> ::= any character except \\, [, ], (, ) (unless escaped)
```

Tags:
    * ``fg``: foreground color; ``bg``: background color. Values: ``black``,
      ``red``, ``green``, ``yellow``, ``blue``, ``magenta``, ``cyan``, ``white``,
      each optionally prefixed with ``bright-``, and ``default``.
    * ``deco``: comma-separated text decorations: ``bold``, ``dim``/``faint``,
      ``italic``, ``underline``, ``slow-blink``, ``fast-blink``,
      ``invert``/``reverse``, ``hide``/``conceal``,
      ``strike-through``/``strikethrough``.

Escapes: ``\\\\``, ``\\[``, ``\\]``, ``\\(``, ``\\)`` produce the character itself;
a backslash followed by whitespace removes that whitespace.

Notes:
    - If tags are repeated in a style specifier, the last one takes precedence.
    - Nested markup inherits the styles of its parents unless overridden.
    - Decorations of a parent cannot be removed by nested markup.

Example:
    ```python
    import antsi

    antsi.colorize("[fg:red;deco:bold](error:) something failed")
    # '\\x1b[31;1merror:\\x1b[0m something failed'
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from antsi.config.logging import get_logger
from antsi.markup.errors import MarkupError
from antsi.markup.lexer import ESCAPABLE
from antsi.markup.parser import ParseResult
from antsi.markup.parser import parse as parse_markup
from antsi.rendering.ansi import render_ansi, render_plain
from antsi.rendering.capability import ColorMode, resolve_color_mode

if TYPE_CHECKING:
    from typing import TextIO

    from antsi.config.logging import AntsiLogger
    from antsi.markup.nodes import Node

logger: AntsiLogger = get_logger(__name__)

_ESCAPE_TABLE: Final[dict[int, str]] = {ord(c): f"\\{c}" for c in ESCAPABLE}


def parse(source: str) -> list[Node]:
    """Parse ``source`` into a document tree.

    Args:
        source (str): Text possibly containing styled markup.

    Returns:
        list[Node]: Top-level `Content` and `Styled` nodes.

    Raises:
        MarkupError: If the markup is invalid; carries every collected error.
    """
    result: ParseResult = parse_markup(source)
    if result.errors:
        logger.debug("markup rejected with %d error(s)", len(result.errors))
        raise MarkupError(source, result.errors)
    return result.nodes


def colorize(source: str) -> str:
    """Convert styled markup in ``source`` to ANSI escape codes.

    Raises:
        MarkupError: If the markup is invalid.
    """
    return render_ansi(parse(source))


def strip(source: str) -> str:
    """Remove styled markup from ``source``, keeping only its text.

    Escapes are resolved exactly as `colorize` resolves them.

    Raises:
        MarkupError: If the markup is invalid.
    """
    return render_plain(parse(source))


def render(
    source: str,
    *,
    color: ColorMode | str | bool | None = None,
    stream: TextIO | None = None,
) -> str:
    """Colorize or strip ``source`` depending on the color policy.

    Args:
        source (str): Text possibly containing styled markup.
        color (ColorMode | str | bool | None): True/False force the decision; a
            `ColorMode` or its keyword (or None for ``auto``) is resolved against
            ``stream``.
        stream (TextIO | None): Destination used for TTY detection; defaults to stdout.

    Returns:
        str: The rendered text.

    Raises:
        MarkupError: If the markup is invalid.
        ValueError: If ``color`` is a string that names no color mode.
    """
    enabled: bool = color if isinstance(color, bool) else resolve_color_mode(color, stream=stream)
    return colorize(source) if enabled else strip(source)


def escape(text: str) -> str:
    """Escape markup control characters so ``text`` renders literally.

    ``strip(escape(text)) == text`` holds for any string.
    """
    return text.translate(_ESCAPE_TABLE)


def validate(source: str) -> ParseResult:
    """Parse ``source`` without raising, returning nodes and all errors."""
    return parse_markup(source)
