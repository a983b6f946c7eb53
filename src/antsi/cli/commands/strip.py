# topmark:header:start
#
#   project      : antsi
#   file         : strip.py
#   file_relpath : src/antsi/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""antsi `strip` command.

Removes styled markup, keeping the text with escapes resolved, regardless of
the color mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from antsi.cli.cmd_common import emit, get_config, get_console, parse_sources
from antsi.cli.commands.render import newline_option
from antsi.cli.io import collect_sources
from antsi.cli.options import CONTEXT_SETTINGS, common_input_options
from antsi.rendering.ansi import render_plain

if TYPE_CHECKING:
    from antsi.cli.console import ClickConsole
    from antsi.config.model import Config
    from antsi.markup.nodes import Node


@click.command(
    name="strip",
    context_settings=CONTEXT_SETTINGS,
    help="Remove styled markup and print the plain text.",
)
@common_input_options
@newline_option
@click.pass_context
def strip_command(
    ctx: click.Context,
    texts: tuple[str, ...],
    files: tuple[str, ...],
    newline: bool | None,
) -> None:
    """Print the text content of styled markup."""
    console: ClickConsole = get_console(ctx)
    config: Config = get_config(ctx)
    documents: list[list[Node]] = parse_sources(ctx, collect_sources(texts, files))
    emit(
        console,
        "".join(render_plain(doc) for doc in documents),
        newline=config.newline if newline is None else newline,
    )
