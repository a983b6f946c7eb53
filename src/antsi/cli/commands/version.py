# topmark:header:start
#
#   project      : antsi
#   file         : version.py
#   file_relpath : src/antsi/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""antsi `version` command.

Prints the current antsi version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from antsi.cli.cli_types import EnumChoiceParam
from antsi.cli.cmd_common import get_console, get_effective_verbosity
from antsi.constants import ANTSI_VERSION
from antsi.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from antsi.cli.console import ClickConsole


class OutputFormat(KeyedStrEnum):
    """Output formats of informational commands."""

    TEXT = ("text",)
    JSON = ("json",)

    def __init__(self, key: str) -> None:
        self.aliases = ()


@click.command(
    name="version",
    help="Show the current version of antsi.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help="Output format (text, json).",
)
@click.pass_context
def version_command(ctx: click.Context, output_format: OutputFormat | None = None) -> None:
    """Show the current version of antsi.

    Args:
        ctx (click.Context): Click context holding the shared CLI state.
        output_format (OutputFormat | None): Output format (plain text by default).
    """
    console: ClickConsole = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt is OutputFormat.JSON:
        console.print(json.dumps({"version": ANTSI_VERSION}))
    elif get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("antsi version:", bold=True, underline=True))
        console.print(f"    {console.styled(ANTSI_VERSION, bold=True)}")
    else:
        console.print(console.styled(ANTSI_VERSION, bold=True))
