"""Mutable presentation state for one interactive session.

Selection semantics live in ``SelectorController``; this holds only viewport
offsets, theme, and redraw bookkeeping.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppState:
    theme_name: str
    no_color: bool = False
    residue_style: str | None = None
    list_start: int = 0
    detail_start: int = 0
    dirty: bool = True
