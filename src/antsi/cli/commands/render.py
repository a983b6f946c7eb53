# topmark:header:start
#
#   project      : antsi
#   file         : render.py
#   file_relpath : src/antsi/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""antsi `render` command.

Converts styled markup to ANSI escape codes, or to plain text when color is
disabled (``--no-color``, ``NO_COLOR``, output not a terminal, ...).

Examples:
  antsi render "[fg:red;deco:bold](error:) something failed"
  antsi --color always render --file motd.txt
  echo "[fg:green](ok)" | antsi render
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from antsi.cli.cmd_common import emit, get_config, get_console, parse_sources
from antsi.cli.io import collect_sources
from antsi.cli.options import CONTEXT_SETTINGS, common_input_options
from antsi.config.logging import get_logger
from antsi.rendering.ansi import render_ansi, render_plain

if TYPE_CHECKING:
    from collections.abc import Callable

    from antsi.cli.console import ClickConsole
    from antsi.config.logging import AntsiLogger
    from antsi.config.model import Config
    from antsi.markup.nodes import Node

logger: AntsiLogger = get_logger(__name__)


def newline_option(f: Callable[..., None]) -> Callable[..., None]:
    """Adds --newline/--no-newline; unset falls back to the ``newline`` config key."""
    return click.option(
        "--newline/--no-newline",
        "newline",
        default=None,
        help="Terminate the output with a newline (default: on, or the 'newline' config key).",
    )(f)


@click.command(
    name="render",
    context_settings=CONTEXT_SETTINGS,
    help="Render styled markup as ANSI escape codes (plain text when color is off).",
)
@common_input_options
@newline_option
@click.pass_context
def render_command(
    ctx: click.Context,
    texts: tuple[str, ...],
    files: tuple[str, ...],
    newline: bool | None,
) -> None:
    """Render styled markup.

    Args:
        ctx (click.Context): Click context holding the shared CLI state.
        texts (tuple[str, ...]): Markup given as arguments (joined with spaces).
        files (tuple[str, ...]): Files to read markup from (``-`` for STDIN).
        newline (bool | None): Force or suppress the trailing newline.
    """
    console: ClickConsole = get_console(ctx)
    config: Config = get_config(ctx)
    documents: list[list[Node]] = parse_sources(ctx, collect_sources(texts, files))

    colored: bool = bool(ctx.obj["color_enabled"])
    logger.debug("Rendering %d document(s), color=%s", len(documents), colored)
    renderer: Callable[[list[Node]], str] = render_ansi if colored else render_plain
    emit(
        console,
        "".join(renderer(doc) for doc in documents),
        newline=config.newline if newline is None else newline,
    )
