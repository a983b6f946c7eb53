# topmark:header:start
#
#   project      : antsi
#   file         : cli_types.py
#   file_relpath : src/antsi/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the antsi CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, NoReturn, TypeVar

import click

from antsi.core.enum_mixins import KeyedStrEnum, join_keys

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

# Type variable bounded to KeyedStrEnum for generic EnumChoiceParam
E = TypeVar("E", bound=KeyedStrEnum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given enum.

    Keywords and aliases are accepted case-insensitively (see `KeyedStrEnum.parse`).
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = self.enum_cls.keys()

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the keywords as ``[a|b|c]`` in help output."""
        return f"[{join_keys(self.enum_cls, '|')}]"

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self.enum_cls.parse(str(value))
        if member is not None:
            return member
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_ANTSI_COMPLETE=bash_source antsi)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [RuntimeCompletionItem(c) for c in self.choices if c.startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
