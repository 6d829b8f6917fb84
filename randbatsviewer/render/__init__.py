"""Rendering of selector state and selections into ANSI text rows."""

from .detail import detail_lines, group_lines, highlight_literal
from .screen import RenderContext, build_frame, render_frame

__all__ = [
    "RenderContext",
    "build_frame",
    "detail_lines",
    "group_lines",
    "highlight_literal",
    "render_frame",
]
