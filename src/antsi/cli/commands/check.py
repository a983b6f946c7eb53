# topmark:header:start
#
#   project      : antsi
#   file         : check.py
#   file_relpath : src/antsi/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""antsi `check` command.

Validates styled markup without rendering it. Exits with ``MARKUP_ERROR`` (65)
and a diagnostic report on stderr if any input is invalid.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from antsi.cli.cmd_common import get_console, get_effective_verbosity, parse_sources
from antsi.cli.io import collect_sources
from antsi.cli.options import CONTEXT_SETTINGS, common_input_options

if TYPE_CHECKING:
    from antsi.cli.console import ClickConsole
    from antsi.cli.io import InputSource


@click.command(
    name="check",
    context_settings=CONTEXT_SETTINGS,
    help="Validate styled markup; report errors and exit non-zero if any.",
)
@common_input_options
@click.pass_context
def check_command(
    ctx: click.Context,
    texts: tuple[str, ...],
    files: tuple[str, ...],
) -> None:
    """Validate styled markup."""
    console: ClickConsole = get_console(ctx)
    sources: list[InputSource] = collect_sources(texts, files)
    parse_sources(ctx, sources)

    # Quiet mode only reports failures.
    if get_effective_verbosity(ctx) > logging.WARNING:
        return
    for src in sources:
        console.print(f"{src.name}: {console.styled('ok', fg='green', bold=True)}")
