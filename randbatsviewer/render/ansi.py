"""Width-aware helpers for styled terminal rows.

Escape sequences pass through untouched and take no columns, so colored
rows can be clipped and padded to exact pane widths.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")


def char_display_width(ch: str, col: int) -> int:
    """Return columns used by ``ch`` when drawn at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def sanitize_text(text: str) -> str:
    """Replace terminal control bytes in untrusted text with ``?``."""
    return _CONTROL_RE.sub("?", text)


def _tokens(text: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(piece, is_escape)`` pairs, one escape or one character each."""
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        yield from ((ch, False) for ch in text[pos : match.start()])
        yield match.group(0), True
        pos = match.end()
    yield from ((ch, False) for ch in text[pos:])


def display_width(text: str) -> int:
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` to ``max_cols`` columns, keeping every escape sequence.

    Escapes after the cut are kept so a trailing reset still applies. Tabs
    become spaces.
    """
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    col = 0
    full = False
    for piece, is_escape in _tokens(text):
        if is_escape:
            out.append(piece)
            continue
        if full:
            continue
        width = char_display_width(piece, col)
        if col + width > max_cols:
            full = True
            continue
        out.append(" " * width if piece == "\t" else piece)
        col += width
        full = col >= max_cols
    return "".join(out)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip then right-pad ``text`` with spaces to exactly ``width`` columns."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))
