# topmark:header:start
#
#   project      : antsi
#   file         : style.py
#   file_relpath : src/antsi/styles/style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable style values and SGR sequence construction.

A `Style` describes what a single markup block asks for. The renderer combines
nested styles with `Style.inherit` to obtain the *effective* style of a block:
foreground and background of the child win when set, and decorations accumulate
(there is no markup to switch off a decoration inherited from a parent).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

    from antsi.styles.color import Color
    from antsi.styles.decoration import Decoration

#: Control Sequence Introducer.
CSI: Final[str] = "\x1b["

#: SGR sequence that resets all attributes.
RESET: Final[str] = f"{CSI}0m"


def sgr(codes: Iterable[int]) -> str:
    """Return the SGR escape sequence for ``codes`` (empty string if there are none)."""
    params: str = ";".join(str(c) for c in codes)
    return f"{CSI}{params}m" if params else ""


def _unique(decorations: Iterable[Decoration]) -> tuple[Decoration, ...]:
    # dict preserves insertion order
    return tuple(dict.fromkeys(decorations))


@dataclass(frozen=True)
class Style:
    """Styling requested by one markup block.

    Attributes:
        foreground (Color | None): Foreground color, or None to inherit.
        background (Color | None): Background color, or None to inherit.
        decorations (tuple[Decoration, ...]): Decorations in first-seen order, without
            duplicates.
    """

    foreground: Color | None = None
    background: Color | None = None
    decorations: tuple[Decoration, ...] = field(default=())

    def __post_init__(self) -> None:
        deduped: tuple[Decoration, ...] = _unique(self.decorations)
        if deduped != self.decorations:
            object.__setattr__(self, "decorations", deduped)

    @property
    def is_empty(self) -> bool:
        """True when the style requests nothing."""
        return self.foreground is None and self.background is None and not self.decorations

    def codes(self) -> list[int]:
        """Return the SGR codes for this style: foreground, background, then decorations."""
        out: list[int] = []
        if self.foreground is not None:
            out.append(self.foreground.foreground_code)
        if self.background is not None:
            out.append(self.background.background_code)
        out.extend(d.apply_code for d in self.decorations)
        return out

    def sequence(self) -> str:
        """Return the SGR sequence applying this style, or ``""`` for an empty style."""
        return sgr(self.codes())

    def inherit(self, child: Style) -> Style:
        """Return the effective style of ``child`` when nested inside ``self``."""
        return Style(
            foreground=child.foreground if child.foreground is not None else self.foreground,
            background=child.background if child.background is not None else self.background,
            decorations=_unique((*self.decorations, *child.decorations)),
        )

    def with_decorations(self, decorations: Iterable[Decoration]) -> Style:
        """Return a copy whose decorations are replaced by ``decorations``."""
        return replace(self, decorations=_unique(decorations))

    def describe(self) -> str:
        """Render the style back as a markup specifier list (e.g. ``fg:red;deco:bold``)."""
        parts: list[str] = []
        if self.foreground is not None:
            parts.append(f"fg:{self.foreground.key}")
        if self.background is not None:
            parts.append(f"bg:{self.background.key}")
        if self.decorations:
            parts.append("deco:" + ",".join(d.key for d in self.decorations))
        return ";".join(parts)
