# topmark:header:start
#
#   project      : antsi
#   file         : errors.py
#   file_relpath : src/antsi/markup/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse errors and the exceptions raised for invalid markup.

`ParseError` is a plain value collected by the parser; `MarkupError` is the
exception the public API raises when at least one was collected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from antsi.core.errors import AntsiError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from antsi.markup.lexer import Span, SyntaxKind


@dataclass(frozen=True)
class Expected:
    """Expected one of ``kinds`` but found something else."""

    kinds: tuple[SyntaxKind, ...]

    def describe(self) -> str:
        names: list[str] = [f"'{k}'" if len(k.value) == 1 else k.value for k in self.kinds]
        if len(names) == 1:
            return f"expected {names[0]}"
        return f"expected one of {', '.join(names[:-1])} or {names[-1]}"


@dataclass(frozen=True)
class UnknownEscapeSequence:
    """A backslash followed by a character that cannot be escaped."""

    char: str | None

    def describe(self) -> str:
        if self.char is None:
            return "unfinished escape sequence"
        return f"unknown escape sequence '\\{self.char}'"


@dataclass(frozen=True)
class UnescapedControlCharacter:
    """A markup control character where no markup can start or end."""

    char: str

    def describe(self) -> str:
        return f"unescaped control character '{self.char}' (write '\\{self.char}')"


@dataclass(frozen=True)
class NestingTooDeep:
    """A styled block nested deeper than the parser accepts."""

    limit: int

    def describe(self) -> str:
        return f"styled blocks nested deeper than {self.limit} levels"


Reason = Union[Expected, UnknownEscapeSequence, UnescapedControlCharacter, NestingTooDeep]


@dataclass(frozen=True)
class ParseError:
    """An error that occurred while parsing.

    Attributes:
        span (Span | None): Location of the offending lexeme; None at end of input.
        at (SyntaxKind): Kind of the offending lexeme (EOF at end of input).
        reason (Reason): What went wrong.
    """

    span: Span | None
    at: SyntaxKind
    reason: Reason

    @property
    def message(self) -> str:
        """Human readable description including what was found."""
        if self.span is None:
            if isinstance(self.reason, Expected):
                return f"{self.reason.describe()}, found end of input"
            return self.reason.describe()
        if isinstance(self.reason, Expected):
            return f"{self.reason.describe()}, found {self.at} at {self.span}"
        return f"{self.reason.describe()} at {self.span}"

    def __str__(self) -> str:
        return self.message


class MarkupError(AntsiError, ValueError):
    """Raised when the source contains invalid styled markup.

    Attributes:
        source (str): The markup that failed to parse.
        errors (tuple[ParseError, ...]): All errors collected by the parser, in source order.
    """

    def __init__(self, source: str, errors: Sequence[ParseError]) -> None:
        self.source: str = source
        self.errors: tuple[ParseError, ...] = tuple(errors)
        first: str = self.errors[0].message if self.errors else "invalid markup"
        extra: int = len(self.errors) - 1
        suffix: str = f" (and {extra} more error{'s' if extra > 1 else ''})" if extra > 0 else ""
        super().__init__(f"{first}{suffix}")
