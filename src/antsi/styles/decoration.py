# topmark:header:start
#
#   project      : antsi
#   file         : decoration.py
#   file_relpath : src/antsi/styles/decoration.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standard ANSI text decorations and their SGR codes."""

from __future__ import annotations

from antsi.core.enum_mixins import KeyedStrEnum


class Decoration(KeyedStrEnum):
    """Text decorations with their *apply* and *remove* SGR codes.

    Note that some decorations share a remove code: ``22`` turns off both bold
    and dim, ``25`` turns off both blink speeds.
    """

    BOLD = ("bold", 1, 22)
    DIM = ("dim", 2, 22, ("faint",))
    ITALIC = ("italic", 3, 23)
    UNDERLINE = ("underline", 4, 24)
    SLOW_BLINK = ("slow-blink", 5, 25)
    FAST_BLINK = ("fast-blink", 6, 25)
    INVERT = ("invert", 7, 27, ("reverse",))
    HIDE = ("hide", 8, 28, ("conceal",))
    STRIKE_THROUGH = ("strike-through", 9, 29, ("strikethrough",))

    apply_code: int
    remove_code: int

    def __init__(
        self,
        key: str,
        apply_code: int,
        remove_code: int,
        aliases: tuple[str, ...] = (),
    ) -> None:
        self.apply_code = apply_code
        self.remove_code = remove_code
        self.aliases = aliases
