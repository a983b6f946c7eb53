# topmark:header:start
#
#   project      : antsi
#   file         : test_diagnostics.py
#   file_relpath : tests/rendering/test_diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable diagnostics for parse errors."""

from __future__ import annotations

from antsi.markup.parser import parse
from antsi.rendering.diagnostics import Location, format_error, format_errors, locate


def test_locate() -> None:
    assert locate("abc", 0) == Location(1, 1, "abc")
    assert locate("ab\ncd", 4) == Location(2, 2, "cd")
    assert locate("ab\ncd", 3) == Location(2, 1, "cd")
    assert locate("abc", 10) == Location(1, 4, "abc")


def test_format_error() -> None:
    source = "before \\a after"
    (error,) = parse(source).errors

    assert format_error(source, error).splitlines() == [
        "error: unknown escape sequence '\\a' at 7..9",
        " --> line 1, column 8",
        "  |",
        "1 | before \\a after",
        "  |" + " " * 8 + "^^",
    ]


def test_format_error_with_origin() -> None:
    source = "ok\n[fg:red](x"
    (error,) = parse(source).errors

    lines: list[str] = format_error(source, error, origin="motd.txt").splitlines()

    assert lines[0] == "error: expected ')', found end of input"
    assert lines[1] == " --> motd.txt, line 2, column 11"
    assert lines[3] == "2 | [fg:red](x"
    assert lines[4] == "  |" + " " * 11 + "^"


def test_format_errors_appends_summary() -> None:
    source = "a ) b ("
    errors = parse(source).errors

    report: str = format_errors(source, errors)

    assert len(errors) == 2
    assert report.count("error: unescaped control character") == 2
    assert report.endswith("\n\nfound 2 markup errors")
    assert "\x1b" not in report


def test_format_errors_without_errors_is_empty() -> None:
    assert format_errors("fine", []) == ""
