# topmark:header:start
#
#   project      : antsi
#   file         : main.py
#   file_relpath : src/antsi/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""antsi command-line entry point.

Key ideas:
- Group-level options (verbosity, color, config) are initialized once and placed
  into ``ctx.obj``.
- Subcommands read their input via `antsi.cli.io` and share the helpers in
  `antsi.cli.cmd_common`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from antsi.cli.commands.check import check_command
from antsi.cli.commands.escape import escape_command
from antsi.cli.commands.render import render_command
from antsi.cli.commands.strip import strip_command
from antsi.cli.commands.version import version_command
from antsi.cli.console import ClickConsole
from antsi.cli.errors import AntsiConfigError, AntsiUnexpectedError
from antsi.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_cli_color_mode,
    resolve_verbosity,
)
from antsi.config.logging import get_logger, resolve_env_log_level, setup_logging
from antsi.config.model import MutableConfig
from antsi.core.errors import ConfigError
from antsi.rendering.capability import resolve_color_mode

if TYPE_CHECKING:
    from antsi.config.logging import AntsiLogger
    from antsi.config.model import Config
    from antsi.rendering.capability import ColorMode

logger: AntsiLogger = get_logger(__name__)


def load_config(*, config_paths: tuple[str, ...], no_config: bool) -> Config:
    """Resolve the layered configuration for this invocation.

    Raises:
        AntsiConfigError: If a config file is missing, unreadable or invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_files=[Path(p) for p in config_paths],
            discover=not no_config,
        )
    except ConfigError as e:
        raise AntsiConfigError(str(e)) from e
    return draft.freeze()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, config & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_paths (tuple[str, ...]): Extra config files from ``--config``.
        no_config (bool): Whether config discovery is disabled.
    """
    ctx.obj = ctx.obj or {}

    # Configure internal logging via env:
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    # Console first, so that errors below are reported through it.
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    config: Config = load_config(config_paths=config_paths, no_config=no_config)
    ctx.obj["config"] = config

    effective: ColorMode = resolve_cli_color_mode(
        color_mode=color_mode, no_color=no_color, config_mode=config.color
    )
    enable_color: bool = resolve_color_mode(effective)
    ctx.obj["color_mode"] = effective
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug(
        "Color mode %s (enabled=%s), config files: %s",
        effective,
        enable_color,
        [str(p) for p in config.config_files],
    )


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="antsi: convert styled markup like '[fg:red](text)' to ANSI escape codes.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the antsi CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_paths=config_paths,
        no_config=no_config,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'antsi render TEXT' to render styled markup.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(strip_command)

cli.add_command(check_command)

cli.add_command(escape_command)

cli.add_command(version_command)


def main() -> None:
    """Console-script entry point.

    Click reports its own exceptions; anything else is logged and mapped to
    ``UNEXPECTED_ERROR``.
    """
    try:
        cli.main(prog_name="antsi")
    except Exception as e:
        logger.exception("Unexpected error")
        err = AntsiUnexpectedError(f"{type(e).__name__}: {e}")
        err.show()
        sys.exit(err.exit_code)


if __name__ == "__main__":
    main()
