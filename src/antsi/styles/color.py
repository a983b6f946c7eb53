# topmark:header:start
#
#   project      : antsi
#   file         : color.py
#   file_relpath : src/antsi/styles/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standard ANSI colors and their SGR codes."""

from __future__ import annotations

from antsi.core.enum_mixins import KeyedStrEnum


class Color(KeyedStrEnum):
    """The 16 standard ANSI colors plus the terminal default.

    The enum `.value` is the markup keyword; `foreground_code` and
    `background_code` carry the SGR parameter for each layer.
    """

    BLACK = ("black", 30, 40)
    RED = ("red", 31, 41)
    GREEN = ("green", 32, 42)
    YELLOW = ("yellow", 33, 43)
    BLUE = ("blue", 34, 44)
    MAGENTA = ("magenta", 35, 45)
    CYAN = ("cyan", 36, 46)
    WHITE = ("white", 37, 47)
    DEFAULT = ("default", 39, 49)

    BRIGHT_BLACK = ("bright-black", 90, 100)
    BRIGHT_RED = ("bright-red", 91, 101)
    BRIGHT_GREEN = ("bright-green", 92, 102)
    BRIGHT_YELLOW = ("bright-yellow", 93, 103)
    BRIGHT_BLUE = ("bright-blue", 94, 104)
    BRIGHT_MAGENTA = ("bright-magenta", 95, 105)
    BRIGHT_CYAN = ("bright-cyan", 96, 106)
    BRIGHT_WHITE = ("bright-white", 97, 107)

    foreground_code: int
    background_code: int

    def __init__(self, key: str, foreground_code: int, background_code: int) -> None:
        self.foreground_code = foreground_code
        self.background_code = background_code

    @property
    def is_bright(self) -> bool:
        """Whether this is one of the high-intensity variants."""
        return self.key.startswith("bright-")
