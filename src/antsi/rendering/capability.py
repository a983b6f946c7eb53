# topmark:header:start
#
#   project      : antsi
#   file         : capability.py
#   file_relpath : src/antsi/rendering/capability.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal color capability detection.

`resolve_color_mode` decides whether ANSI sequences should be written to a
stream, following the de-facto conventions:

* an explicit mode (``always`` / ``never``) wins;
* ``FORCE_COLOR`` set to anything but ``0`` enables color;
* ``NO_COLOR`` (any value, even empty) disables color;
* otherwise color is enabled only when the stream is a TTY.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Final

from antsi.core.enum_mixins import KeyedStrEnum, join_keys

if TYPE_CHECKING:
    from typing import TextIO

FORCE_COLOR_ENV: Final[str] = "FORCE_COLOR"
NO_COLOR_ENV: Final[str] = "NO_COLOR"


class ColorMode(KeyedStrEnum):
    """User-selectable color policy."""

    AUTO = ("auto",)
    ALWAYS = ("always", ("on", "yes", "true"))
    NEVER = ("never", ("off", "no", "false"))

    def __init__(self, key: str, aliases: tuple[str, ...] = ()) -> None:
        self.aliases = aliases


def stream_isatty(stream: TextIO | None) -> bool:
    """Return whether ``stream`` is attached to a terminal (False if it cannot tell)."""
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError, OSError):
        # Detached or closed streams cannot be probed.
        return False


def resolve_color_mode(
    mode: ColorMode | str | None = None,
    *,
    stream: TextIO | None = None,
    isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        mode (ColorMode | str | None): Explicit color mode, or its keyword (e.g.
            ``"always"``); None behaves like ``auto``.
        stream (TextIO | None): Stream the output goes to; defaults to ``sys.stdout``.
        isatty (bool | None): Pre-computed TTY status; if None, ``stream`` is probed.

    Returns:
        bool: True if ANSI sequences should be emitted.

    Raises:
        ValueError: If ``mode`` is a string that names no color mode.
    """
    if isinstance(mode, str) and not isinstance(mode, ColorMode):
        parsed: ColorMode | None = ColorMode.parse(mode)
        if parsed is None:
            raise ValueError(
                f"Invalid color mode {mode!r} (expected one of: {join_keys(ColorMode)})"
            )
        mode = parsed
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv(FORCE_COLOR_ENV)
    if force_color and force_color != "0":
        return True
    if os.getenv(NO_COLOR_ENV) is not None:
        return False
    if isatty is None:
        isatty = stream_isatty(stream if stream is not None else sys.stdout)
    return isatty
