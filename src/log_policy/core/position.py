"""Map a match offset in a whole file's text to its line and columns."""

from __future__ import annotations

from typing import NamedTuple


class Position(NamedTuple):
    line_number: int
    column_start: int
    column_end: int
    line_text: str


def _utf8_len(s: str) -> int:
    return len(s.encode("utf-8"))


def locate(text: str, start: int, end: int) -> Position:
    """Return the 1-based line, 0-based column range and full line for a match.

    *start*/*end* are string offsets into *text*; the returned columns are
    UTF-8 byte offsets into the line. A match may not cross a newline. The
    line text excludes its terminator (``\\n`` or ``\\r\\n``).
    """
    if not 0 <= start <= end <= len(text):
        raise ValueError(f"offsets [{start}, {end}) out of range for text of length {len(text)}")

    line_number = text.count("\n", 0, start) + 1
    line_start = text.rfind("\n", 0, start) + 1
    line_end = text.find("\n", start)
    if line_end == -1:
        line_end = len(text)
    if end > line_end:
        raise ValueError(f"match [{start}, {end}) spans more than one line")

    line_text = text[line_start:line_end]
    # A CRLF file's "\r" belongs to the terminator, not the line, so it is
    # neither printed nor counted towards the line length.
    if line_text.endswith("\r"):
        line_text = line_text[:-1]
    return Position(
        line_number,
        _utf8_len(text[line_start:start]),
        _utf8_len(text[line_start:end]),
        line_text,
    )
