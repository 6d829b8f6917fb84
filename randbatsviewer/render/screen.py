"""Frame composition for the split candidate/detail terminal view.

Defines render context data and builds fully composed ANSI frames.
Rendering never mutates runtime or selector state.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

from ..layout import ScreenLayout
from ..ui_theme import UITheme
from .ansi import fit_ansi_line, sanitize_text

APP_TITLE = "Pokemon Showdown Random Battle Moveset Viewer"
DIVIDER = "│"


@dataclass
class RenderContext:
    layout: ScreenLayout
    theme: UITheme
    prompt_prefix: str
    query: str
    placeholder: str
    candidates: tuple[str, ...] = ()
    focused_index: int = -1
    list_open: bool = True
    list_start: int = 0
    closed_hint: str = ""
    detail_lines: list[str] = field(default_factory=list)
    detail_start: int = 0
    status_text: str = ""
    right_title: str = ""


def build_status_line(left_text: str, width: int, right_text: str = "│ ^C quit") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def _prompt_row(context: RenderContext) -> str:
    theme = context.theme
    prefix = f"{theme.prompt}{context.prompt_prefix}{theme.reset}"
    if context.query:
        return f"{prefix}{theme.query}{context.query}{theme.reset}"
    return f"{prefix}{theme.placeholder}{context.placeholder}{theme.reset}"


def left_pane_rows(context: RenderContext) -> list[str]:
    """Return prompt row plus one row per visible candidate slot."""
    theme = context.theme
    width = context.layout.left_width
    rows = [fit_ansi_line(_prompt_row(context), width)]
    list_rows = context.layout.list_rows
    if not context.list_open:
        hint = f"{theme.dim}{context.closed_hint}{theme.reset}" if context.closed_hint else ""
        rows.append(fit_ansi_line(hint, width))
        rows.extend(" " * width for _ in range(list_rows - 1))
        return rows

    for offset in range(list_rows):
        idx = context.list_start + offset
        if idx >= len(context.candidates):
            rows.append(" " * width)
            continue
        label = sanitize_text(context.candidates[idx])
        if idx == context.focused_index:
            if theme.candidate_focused:
                text = f"{theme.candidate_focused}{fit_ansi_line(' ' + label, width)}{theme.reset}"
                rows.append(text)
                continue
            rows.append(fit_ansi_line(f">{label}", width))
            continue
        rows.append(fit_ansi_line(f"{theme.candidate} {label}{theme.reset}", width))
    return rows


def right_pane_rows(context: RenderContext) -> list[str]:
    width = context.layout.right_width
    body_rows = context.layout.body_rows
    visible = context.detail_lines[context.detail_start : context.detail_start + body_rows]
    rows = [fit_ansi_line(" " + line if line else "", width) for line in visible]
    rows.extend(" " * width for _ in range(body_rows - len(rows)))
    return rows


def build_frame(context: RenderContext) -> list[str]:
    """Return every terminal row of one frame, top to bottom."""
    theme = context.theme
    layout = context.layout
    title = f"{theme.title} {APP_TITLE}{theme.reset}"
    if context.right_title:
        title_width = layout.width - len(context.right_title) - 1
        title = fit_ansi_line(title, max(0, title_width)) + f"{theme.dim}{context.right_title}{theme.reset}"
    frame = [fit_ansi_line(title, layout.width)]

    divider = f"{theme.divider}{DIVIDER}{theme.reset}"
    left = left_pane_rows(context)
    right = right_pane_rows(context)
    for row in range(layout.body_rows):
        frame.append(f"{left[row]}{divider}{right[row]}")

    status = build_status_line(sanitize_text(context.status_text), layout.width)
    frame.append(f"{theme.reverse}{status}{theme.reset}" if theme.reverse else status)
    return frame


def render_frame(context: RenderContext) -> None:
    """Write one composed frame to stdout, redrawing from the home position."""
    frame = build_frame(context)
    out = ["\033[H"]
    for idx, row in enumerate(frame):
        out.append(row)
        out.append("\033[K")
        if idx + 1 < len(frame):
            out.append("\r\n")
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))
