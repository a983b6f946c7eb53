# topmark:header:start
#
#   project      : antsi
#   file         : ansi.py
#   file_relpath : src/antsi/rendering/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a parsed document as ANSI-styled or plain text.

ANSI rendering keeps track of the *effective* style (the style of a block
combined with those of its ancestors):

* entering a styled block emits only the block's own SGR sequence, since the
  ancestors' attributes are already active;
* leaving it emits a full reset followed by the parent's effective sequence,
  which is the only portable way to undo attributes (``22`` clears both bold and
  dim, ``25`` clears both blink speeds);
* a block whose subtree produces no text emits nothing at all.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from antsi.markup.nodes import Content, walk_text
from antsi.styles.style import RESET, Style

if TYPE_CHECKING:
    from collections.abc import Iterable

    from antsi.markup.nodes import Node


def render_ansi(nodes: Iterable[Node]) -> str:
    """Return ``nodes`` rendered with ANSI escape sequences."""
    return "".join(_render(nodes, Style()))


def _render(nodes: Iterable[Node], parent: Style) -> list[str]:
    out: list[str] = []
    for node in nodes:
        if isinstance(node, Content):
            out.append(node.text)
            continue

        effective: Style = parent.inherit(node.style)
        inner: str = "".join(_render(node.children, effective))
        if not inner:
            continue
        out.append(node.style.sequence())
        out.append(inner)
        out.append(RESET)
        out.append(parent.sequence())
    return out


def render_plain(nodes: Iterable[Node]) -> str:
    """Return the text of ``nodes`` with all styling removed."""
    return "".join(walk_text(nodes))


#: Matches SGR sequences such as ``\x1b[31;1m`` and ``\x1b[0m``.
SGR_RE: re.Pattern[str] = re.compile(r"\x1b\[[0-9;]*m")


def remove_sgr(text: str) -> str:
    """Remove SGR escape sequences from already rendered ``text``."""
    return SGR_RE.sub("", text)
