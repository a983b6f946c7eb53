# topmark:header:start
#
#   project      : antsi
#   file         : io.py
#   file_relpath : src/antsi/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input collection for Click commands.

Commands read markup from exactly one kind of source:

- TEXT arguments, joined with a single space;
- ``--file`` paths, in order (``-`` reads STDIN once);
- otherwise STDIN.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple

import click

from antsi.cli.errors import AntsiFileNotFoundError, AntsiIOError, AntsiUsageError
from antsi.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from antsi.config.logging import AntsiLogger

logger: AntsiLogger = get_logger(__name__)

#: Display name of the joined TEXT arguments.
ARGUMENTS_NAME: str = "<arguments>"

#: Display name of STDIN.
STDIN_NAME: str = "<stdin>"


class InputSource(NamedTuple):
    """A unit of markup read from the command line.

    Attributes:
        name (str): Display name (a path, ``<arguments>`` or ``<stdin>``).
        text (str): The raw markup.
    """

    name: str
    text: str


def read_stdin() -> str:
    """Read all of STDIN as text.

    Raises:
        AntsiUsageError: If STDIN is an interactive terminal.
    """
    stream = click.get_text_stream("stdin")
    if stream.isatty():
        raise AntsiUsageError("No input: pass TEXT arguments, --file PATH, or pipe text on STDIN.")
    return stream.read()


def read_file(path: Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        AntsiFileNotFoundError: If ``path`` does not exist.
        AntsiIOError: If ``path`` cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise AntsiFileNotFoundError(f"No such file: {path}") from e
    except UnicodeDecodeError as e:
        raise AntsiIOError(f"Cannot decode {path} as UTF-8: {e}") from e
    except OSError as e:
        raise AntsiIOError(f"Cannot read {path}: {e.strerror or e}") from e


def collect_sources(texts: Sequence[str], files: Sequence[str]) -> list[InputSource]:
    """Resolve the command inputs into a list of sources.

    Args:
        texts (Sequence[str]): Positional TEXT arguments.
        files (Sequence[str]): ``--file`` values (``-`` for STDIN).

    Returns:
        list[InputSource]: Sources in command-line order.

    Raises:
        AntsiUsageError: If TEXT and ``--file`` are combined, or STDIN is requested twice.
        AntsiFileNotFoundError: If a file does not exist.
        AntsiIOError: If a file cannot be read.
    """
    if texts and files:
        raise AntsiUsageError("Pass markup either as TEXT arguments or with --file, not both.")
    if texts:
        return [InputSource(ARGUMENTS_NAME, " ".join(texts))]
    if not files:
        logger.debug("Reading input from STDIN")
        return [InputSource(STDIN_NAME, read_stdin())]

    if sum(1 for f in files if f == "-") > 1:
        raise AntsiUsageError("STDIN ('-') can be given to --file only once.")
    sources: list[InputSource] = []
    for f in files:
        if f == "-":
            sources.append(InputSource(STDIN_NAME, read_stdin()))
        else:
            logger.debug("Reading input from %s", f)
            sources.append(InputSource(f, read_file(Path(f))))
    return sources
