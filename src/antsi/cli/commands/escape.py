# topmark:header:start
#
#   project      : antsi
#   file         : escape.py
#   file_relpath : src/antsi/cli/commands/escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""antsi `escape` command.

Prints text with the markup control characters escaped, so that it renders
literally when embedded in markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from antsi.api import escape
from antsi.cli.cmd_common import emit, get_config, get_console
from antsi.cli.commands.render import newline_option
from antsi.cli.io import collect_sources
from antsi.cli.options import CONTEXT_SETTINGS, common_input_options

if TYPE_CHECKING:
    from antsi.cli.console import ClickConsole
    from antsi.config.model import Config


@click.command(
    name="escape",
    context_settings=CONTEXT_SETTINGS,
    help="Escape markup control characters so the text renders literally.",
)
@common_input_options
@newline_option
@click.pass_context
def escape_command(
    ctx: click.Context,
    texts: tuple[str, ...],
    files: tuple[str, ...],
    newline: bool | None,
) -> None:
    """Print the escaped form of the input."""
    console: ClickConsole = get_console(ctx)
    config: Config = get_config(ctx)
    text: str = "".join(src.text for src in collect_sources(texts, files))
    emit(console, escape(text), newline=config.newline if newline is None else newline)
