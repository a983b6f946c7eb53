# topmark:header:start
#
#   project      : antsi
#   file         : errors.py
#   file_relpath : src/antsi/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the antsi CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from antsi.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from antsi.cli.console import ClickConsole


def _context_console() -> ClickConsole | None:
    """Return the console stored on the current Click context, if any."""
    ctx: click.Context | None = click.get_current_context(silent=True)
    if ctx is None or not isinstance(ctx.obj, dict):
        return None
    return ctx.obj.get("console")


class AntsiCliError(click.ClickException):
    """Base class for all antsi CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        console: ClickConsole | None = _context_console()
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class AntsiUsageError(AntsiCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class AntsiMarkupError(AntsiCliError):
    """Error for input holding invalid styled markup.

    The message is a complete, already formatted diagnostic report and is
    written to stderr without further decoration.
    """

    exit_code = ExitCode.MARKUP_ERROR

    def show(self, file: IO[Any] | None = None) -> None:
        """Write the diagnostic report to stderr."""
        console: ClickConsole | None = _context_console()
        if console is None:
            stream: IO[Any] = file or click.get_text_stream("stderr")
            click.echo(self.format_message(), file=stream, color=True)
            return
        console.diagnostic(self.format_message())


class AntsiFileNotFoundError(AntsiCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class AntsiIOError(AntsiCliError):
    """Error for I/O and decoding errors reading inputs."""

    exit_code = ExitCode.IO_ERROR


class AntsiConfigError(AntsiCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class AntsiUnexpectedError(AntsiCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
