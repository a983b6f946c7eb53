# topmark:header:start
#
#   project      : antsi
#   file         : options.py
#   file_relpath : src/antsi/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config, input) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, ParamSpec, TypeVar

import click

from antsi.cli.cli_types import EnumChoiceParam
from antsi.cli.errors import AntsiUsageError
from antsi.config.logging import TRACE_LEVEL
from antsi.rendering.capability import ColorMode

P = ParamSpec("P")
R = TypeVar("R")

# Verbosity levels, mapped to standard logging levels
LOG_LEVELS: dict[str, int] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: The verbosity as a logging level.

    Raises:
        AntsiUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise AntsiUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def resolve_cli_color_mode(
    *,
    color_mode: ColorMode | None,
    no_color: bool,
    config_mode: ColorMode,
) -> ColorMode:
    """Combine ``--color``, ``--no-color`` and the configured mode.

    ``--no-color`` beats ``--color``, which beats the configuration.
    """
    if no_color:
        return ColorMode.NEVER
    if color_mode is not None:
        return color_mode
    return config_mode


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --config and --no-config options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with config options added.
    """
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        metavar="FILE",
        help="Additional TOML config file(s), applied after discovered ones.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not discover pyproject.toml / antsi.toml config files.",
    )(f)
    return f


def common_input_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the TEXT argument and --file option to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with input options added.
    """
    f = click.option(
        "--file",
        "-f",
        "files",
        multiple=True,
        metavar="PATH",
        help="Read input from file(s); use '-' for STDIN.",
    )(f)
    f = click.argument("texts", nargs=-1, metavar="[TEXT]...")(f)
    return f
