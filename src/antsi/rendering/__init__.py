# topmark:header:start
#
#   project      : antsi
#   file         : __init__.py
#   file_relpath : src/antsi/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output side of antsi: ANSI/plain renderers, color detection and diagnostics."""

from __future__ import annotations

from antsi.rendering.ansi import remove_sgr, render_ansi, render_plain
from antsi.rendering.capability import ColorMode, resolve_color_mode, stream_isatty
from antsi.rendering.diagnostics import format_error, format_errors, locate

__all__ = [
    "ColorMode",
    "format_error",
    "format_errors",
    "locate",
    "remove_sgr",
    "render_ansi",
    "render_plain",
    "resolve_color_mode",
    "stream_isatty",
]
