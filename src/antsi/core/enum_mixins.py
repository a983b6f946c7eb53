# topmark:header:start
#
#   project      : antsi
#   file         : enum_mixins.py
#   file_relpath : src/antsi/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for antsi (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``: ``str, Enum`` whose ``.value`` is a stable keyword
      (the word users type), with optional aliases and two lookup flavors:

        * ``lookup()``: exact, case-insensitive match on keyword or alias.
          Used by the markup lexer, where only documented spellings count.
        * ``parse()``: lenient match that also accepts member names and
          normalizes ``-``, ``_`` and spaces. Used for config values and CLI
          options.

Design:
    Subclasses attach extra metadata (SGR codes, labels) by defining
    ``__init__``; ``__new__`` here only stores the keyword. This keeps Enum
    semantics (hashing, equality, ``repr``) intact.

Example:
    ```python
    class Mode(KeyedStrEnum):
        AUTO = ("auto",)
        NEVER = ("never", ("off",))

        def __init__(self, key: str, aliases: tuple[str, ...] = ()) -> None:
            self.aliases = aliases


    assert Mode.lookup("OFF") is Mode.NEVER
    assert Mode.parse("Never") is Mode.NEVER
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match config keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable keyword; metadata lives on attributes.

    Attributes:
        aliases (tuple[str, ...]): Alternative spellings accepted by `lookup()`
            and `parse()`. Subclasses set this in ``__init__``.
    """

    aliases: tuple[str, ...]

    def __new__(cls: type[_KS], key: str, *_meta: Any) -> _KS:
        """Create a new member whose value is ``key``.

        Args:
            key (str): The stable keyword (stored as `.value`).
            *_meta (Any): Metadata consumed by the subclass ``__init__``.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.aliases = ()
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable keyword (same as `.value`)."""
        return str(self.value)

    @property
    def spellings(self) -> tuple[str, ...]:
        """Keyword followed by all aliases."""
        return (self.key, *self.aliases)

    @classmethod
    def lookup(cls: type[_KS], word: str | None) -> _KS | None:
        """Return the member spelled exactly ``word`` (ignoring case), or ``None``."""
        if word is None:
            return None
        folded: str = word.lower()
        for m in cls:
            if any(folded == s.lower() for s in m.spellings):
                return m
        return None

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against:
          - the stable key (`.value`)
          - the member name (`.name`)
          - any configured aliases

        Matching is case-insensitive and normalizes '-', ' ' to '_' via `_norm_token()`.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.name):
                return m
            for s in m.spellings:
                if token == _norm_token(s):
                    return m
        return None

    @classmethod
    def keys(cls) -> list[str]:
        """Return the keywords of all members, in definition order."""
        return [m.key for m in cls]


def join_keys(members: Iterable[KeyedStrEnum], sep: str = ", ") -> str:
    """Join member keywords for help texts and error messages."""
    return sep.join(m.key for m in members)
