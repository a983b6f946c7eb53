# topmark:header:start
#
#   project      : antsi
#   file         : __init__.py
#   file_relpath : src/antsi/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""antsi package.

antsi styles text for the terminal. It converts a small markup language,
``[fg:red;deco:bold](like this)``, to ANSI escape codes, and exposes both a
typed API and a CLI.
"""

from __future__ import annotations

from antsi.api import colorize, escape, parse, render, strip, validate
from antsi.core.errors import AntsiError, ConfigError
from antsi.markup.errors import MarkupError, ParseError
from antsi.markup.nodes import Content, Node, Styled
from antsi.rendering.capability import ColorMode
from antsi.styles import Color, Decoration, Style

__all__ = [
    "AntsiError",
    "Color",
    "ColorMode",
    "ConfigError",
    "Content",
    "Decoration",
    "MarkupError",
    "Node",
    "ParseError",
    "Style",
    "Styled",
    "colorize",
    "escape",
    "parse",
    "render",
    "strip",
    "validate",
]
