# topmark:header:start
#
#   project      : antsi
#   file         : test_api_properties.py
#   file_relpath : tests/api/test_api_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests tying escape, strip and colorize together."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

import antsi
from antsi.rendering.ansi import remove_sgr

SPECIFIERS: list[str] = [
    "fg:red",
    "bg:bright-blue",
    "deco:bold",
    "deco:italic,underline",
    "fg:default;deco:dim",
    "bg:black;fg:white;deco:invert",
]

# Plain words that never form markup or SGR sequences on their own.
plain_text = st.text(alphabet="abc XYZ:;,.!0123456789", max_size=12)


def _block(spec: str, children: list[str]) -> str:
    return f"[{spec}]({''.join(children)})"


markup = st.recursive(
    plain_text,
    lambda inner: st.builds(
        _block, st.sampled_from(SPECIFIERS), st.lists(inner, max_size=3)
    ),
    max_leaves=10,
).map(str)

documents = st.lists(st.one_of(plain_text, markup), max_size=4).map("".join)


@given(st.text())
def test_strip_of_escape_is_identity(text: str) -> None:
    assert antsi.strip(antsi.escape(text)) == text


@given(st.text())
def test_colorize_of_escape_is_identity(text: str) -> None:
    assert antsi.colorize(antsi.escape(text)) == text


@given(documents)
def test_removing_sgr_from_colorized_equals_strip(source: str) -> None:
    assert remove_sgr(antsi.colorize(source)) == antsi.strip(source)


@given(documents)
def test_strip_output_has_no_markup(source: str) -> None:
    stripped: str = antsi.strip(source)
    assert not any(c in stripped for c in "[]()")
    assert "\x1b" not in stripped


@given(documents)
def test_colorized_output_ends_reset_when_styled(source: str) -> None:
    colored: str = antsi.colorize(source)
    if "\x1b" in colored:
        assert "\x1b[0m" in colored
