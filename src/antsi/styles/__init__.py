# topmark:header:start
#
#   project      : antsi
#   file         : __init__.py
#   file_relpath : src/antsi/styles/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style primitives: colors, decorations and composed styles."""

from __future__ import annotations

from antsi.styles.color import Color
from antsi.styles.decoration import Decoration
from antsi.styles.style import CSI, RESET, Style, sgr

__all__ = [
    "CSI",
    "RESET",
    "Color",
    "Decoration",
    "Style",
    "sgr",
]
