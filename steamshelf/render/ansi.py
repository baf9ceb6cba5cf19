"""ANSI-aware text measurement and line shaping utilities.

Every frame line must occupy an exact number of terminal columns, so widths
are measured in display cells with escape sequences excluded.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
ANSI_RESET = "\033[0m"
ELLIPSIS = "…"
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies, ignoring escapes."""
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            if col + w > max_cols:
                break
            out.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def truncate_text(text: str, max_cols: int) -> str:
    """Shorten ``text`` to ``max_cols`` cells, ending in an ellipsis when cut."""
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    clipped = clip_ansi_line(text, max_cols - 1)
    if "\x1b" in clipped:
        clipped += ANSI_RESET
    return clipped + ELLIPSIS


def fit_line(text: str, width: int) -> str:
    """Clip or pad a styled line to exactly ``width`` display columns."""
    if width <= 0:
        return ""
    clipped = clip_ansi_line(text, width)
    if "\x1b" in clipped:
        clipped += ANSI_RESET
    return clipped + " " * (width - display_width(clipped))


def fit_lines(lines: list[str], height: int) -> list[str]:
    """Cut ``lines`` to ``height`` entries, padding with empty strings."""
    if height <= 0:
        return []
    out = list(lines[:height])
    out.extend("" for _ in range(height - len(out)))
    return out
