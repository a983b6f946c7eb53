# topmark:header:start
#
#   project      : antsi
#   file         : diagnostics.py
#   file_relpath : src/antsi/rendering/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-facing rendering of markup parse errors.

Each error is shown as a header line, the offending source line and a caret
underline below the offending lexeme:

```text
error: unknown escape sequence '\\a' at 7..9
 --> line 1, column 8
  |
1 | before \\a after
  |        ^^
```

Colors come from `yachalk` and are applied only when requested; machine
consumers should use `antsi.markup.errors.ParseError` directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from antsi.markup.errors import ParseError


class Location(NamedTuple):
    """1-based line and column plus the text of that line."""

    line: int
    column: int
    line_text: str


def locate(source: str, offset: int) -> Location:
    """Return the line/column of character ``offset`` in ``source``.

    Offsets at or beyond the end point just past the last character.
    """
    offset = max(0, min(offset, len(source)))
    line_start: int = source.rfind("\n", 0, offset) + 1
    line_end: int = source.find("\n", offset)
    if line_end == -1:
        line_end = len(source)
    line_no: int = source.count("\n", 0, offset) + 1
    return Location(
        line=line_no,
        column=offset - line_start + 1,
        line_text=source[line_start:line_end],
    )


def _identity(text: str) -> str:
    return text


def format_error(
    source: str,
    error: ParseError,
    *,
    color: bool = False,
    origin: str | None = None,
) -> str:
    """Render a single parse error with a source excerpt.

    Args:
        source (str): The markup the error refers to.
        error (ParseError): The error to render.
        color (bool): Apply yachalk colors when True.
        origin (str | None): Name of the input (e.g. a file path) shown in the
            location line.

    Returns:
        str: Multi-line diagnostic text (no trailing newline).
    """
    red: Callable[[str], str] = chalk.red_bright if color else _identity
    blue: Callable[[str], str] = chalk.blue if color else _identity
    bold: Callable[[str], str] = chalk.bold if color else _identity

    start: int = error.span.start if error.span is not None else len(source)
    width: int = max(1, len(error.span)) if error.span is not None else 1
    loc: Location = locate(source, start)
    # Carets never run past the end of the excerpted line.
    width = max(1, min(width, len(loc.line_text) - loc.column + 1))

    gutter: str = " " * len(str(loc.line))
    where: str = f"{origin}, " if origin else ""
    lines: list[str] = [
        f"{red(bold('error'))}: {bold(error.message)}",
        f"{gutter}{blue('-->')} {where}line {loc.line}, column {loc.column}",
        f"{gutter} {blue('|')}",
        f"{blue(str(loc.line))} {blue('|')} {_visible(loc.line_text)}",
        f"{gutter} {blue('|')} {' ' * (loc.column - 1)}{red('^' * width)}",
    ]
    return "\n".join(lines)


def format_errors(
    source: str,
    errors: Iterable[ParseError],
    *,
    color: bool = False,
    origin: str | None = None,
) -> str:
    """Render all ``errors``, separated by blank lines, followed by a summary line."""
    blocks: list[str] = [format_error(source, e, color=color, origin=origin) for e in errors]
    if not blocks:
        return ""
    n: int = len(blocks)
    summary: str = f"found {n} markup error{'s' if n != 1 else ''}"
    blocks.append(chalk.red_bright(summary) if color else summary)
    return "\n\n".join(blocks)


def _visible(line: str) -> str:
    # Tabs and carriage returns would misalign the caret line.
    return line.replace("\t", " ").replace("\r", " ")
