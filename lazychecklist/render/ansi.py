"""ANSI-aware width measurement for clipping styled rows."""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal columns taken by ``ch`` (0 combining, 2 wide, else 1)."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in ANSI_ESCAPE_RE.sub("", text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences are kept verbatim and do not count toward width.
    """
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    pos = 0
    while pos < len(text):
        match = ANSI_ESCAPE_RE.match(text, pos)
        if match:
            out.append(match.group(0))
            pos = match.end()
            continue
        ch = text[pos]
        width = char_display_width(ch)
        if col + width > max_cols:
            break
        out.append(ch)
        col += width
        pos += 1
    return "".join(out)
