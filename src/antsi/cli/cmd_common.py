# topmark:header:start
#
#   project      : antsi
#   file         : cmd_common.py
#   file_relpath : src/antsi/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by antsi subcommands.

State initialized by the group (see `antsi.cli.main.init_common_state`) lives
in ``ctx.obj``; these accessors keep commands from poking at dictionary keys.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click

from antsi.cli.errors import AntsiMarkupError
from antsi.cli.io import ARGUMENTS_NAME
from antsi.config.logging import get_logger
from antsi.markup.parser import parse
from antsi.rendering.capability import ColorMode, resolve_color_mode
from antsi.rendering.diagnostics import format_errors

if TYPE_CHECKING:
    from collections.abc import Sequence

    from antsi.cli.console import ClickConsole
    from antsi.cli.io import InputSource
    from antsi.config.logging import AntsiLogger
    from antsi.config.model import Config
    from antsi.markup.nodes import Node
    from antsi.markup.parser import ParseResult

logger: AntsiLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the program-output console."""
    return ctx.obj["console"]


def get_config(ctx: click.Context) -> Config:
    """Return the frozen configuration resolved by the group."""
    return ctx.obj["config"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity as a logging level (WARNING by default)."""
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def get_color_mode(ctx: click.Context) -> ColorMode:
    """Return the effective color mode (CLI flags over configuration)."""
    return ctx.obj.get("color_mode", ColorMode.AUTO)


def diagnostics_color(ctx: click.Context) -> bool:
    """Return whether diagnostics written to stderr should be colored."""
    return resolve_color_mode(get_color_mode(ctx), stream=sys.stderr)


def report_errors(ctx: click.Context, failed: Sequence[tuple[InputSource, ParseResult]]) -> str:
    """Format the diagnostics of every failed source into one report."""
    color: bool = diagnostics_color(ctx)
    return "\n\n".join(
        format_errors(
            src.text,
            result.errors,
            color=color,
            origin=None if src.name == ARGUMENTS_NAME else src.name,
        )
        for src, result in failed
    )


def parse_sources(ctx: click.Context, sources: Sequence[InputSource]) -> list[list[Node]]:
    """Parse every source, or fail with a diagnostic report.

    Returns:
        list[list[Node]]: One document tree per source, in order.

    Raises:
        AntsiMarkupError: If any source holds invalid markup.
    """
    results: list[tuple[InputSource, ParseResult]] = [(src, parse(src.text)) for src in sources]
    failed = [(src, res) for src, res in results if not res.ok]
    if failed:
        logger.info("%d of %d input(s) hold invalid markup", len(failed), len(results))
        raise AntsiMarkupError(report_errors(ctx, failed))
    return [res.nodes for _, res in results]


def emit(console: ClickConsole, text: str, *, newline: bool) -> None:
    """Write command output, adding a final newline unless ``text`` has one."""
    if newline and not text.endswith("\n"):
        text += "\n"
    console.write(text)
