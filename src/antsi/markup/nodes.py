# topmark:header:start
#
#   project      : antsi
#   file         : nodes.py
#   file_relpath : src/antsi/markup/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document tree produced by the markup parser.

A document is a flat list of nodes; `Styled` nodes hold their own child list.
Text never appears in two adjacent `Content` nodes: `Nodes.push_text` appends
to the previous one when possible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from antsi.styles.style import Style


@dataclass
class Content:
    """A piece of text that does not change the styling."""

    text: str


@dataclass
class Styled:
    """Child nodes rendered with additional styling."""

    style: Style
    children: list[Node] = field(default_factory=list)


Node = Union[Content, Styled]


class Nodes:
    """Mutable sequence of nodes with text coalescing."""

    def __init__(self, items: Iterable[Node] = ()) -> None:
        self._items: list[Node] = list(items)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Nodes):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Nodes({self._items!r})"

    def push(self, node: Node) -> None:
        """Add a node to the end of the sequence."""
        self._items.append(node)

    def push_text(self, text: str) -> None:
        """Add text to the end of the sequence.

        If the last node is unstyled content, the text is appended to it;
        otherwise a new `Content` node is created.
        """
        if self._items and isinstance(self._items[-1], Content):
            self._items[-1].text += text
        else:
            self._items.append(Content(text))

    def extend(self, nodes: Iterable[Node]) -> None:
        """Append ``nodes``, coalescing leading content with the current tail."""
        for node in nodes:
            if isinstance(node, Content):
                self.push_text(node.text)
            else:
                self.push(node)

    def to_list(self) -> list[Node]:
        """Return the nodes as a plain list."""
        return list(self._items)


def walk_text(nodes: Iterable[Node]) -> Iterator[str]:
    """Yield the text of every `Content` node, depth-first."""
    for node in nodes:
        if isinstance(node, Content):
            yield node.text
        else:
            yield from walk_text(node.children)
