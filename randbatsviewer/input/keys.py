"""Keyboard and mouse dispatch for the selector screen.

Maps decoded key tokens onto selector intents and app-level actions. The
handler holds no state; every effect goes through injected callbacks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..selector.navigation import KeyIntent

KEY_INTENTS: dict[str, KeyIntent] = {
    "DOWN": KeyIntent.MOVE_NEXT,
    "UP": KeyIntent.MOVE_PREVIOUS,
    "ENTER": KeyIntent.COMMIT,
    "ESC": KeyIntent.DISMISS,
}
QUIT_KEYS = frozenset({"CTRL_C", "CTRL_Q"})
DETAIL_SCROLL_STEP = 10
WHEEL_SCROLL_STEP = 3


@dataclass(frozen=True)
class KeyCallbacks:
    """External operations required for key handling."""

    key_intent: Callable[[KeyIntent], None]
    current_query: Callable[[], str]
    set_query: Callable[[str], None]
    toggle_category_picker: Callable[[], None]
    toggle_theme: Callable[[], None]
    scroll_detail: Callable[[int], None]
    click_at: Callable[[int, int], None]
    wheel_at: Callable[[int, int, int], None]


def parse_mouse_col_row(mouse_key: str) -> tuple[int | None, int | None]:
    """Parse ``MOUSE_*:col:row`` key tokens into integer coordinates."""
    parts = mouse_key.split(":")
    if len(parts) < 3:
        return None, None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None, None


def handle_key(key: str, callbacks: KeyCallbacks) -> bool:
    """Handle one key token. Returns whether the application should quit."""
    if not key:
        return False
    if key in QUIT_KEYS:
        return True

    intent = KEY_INTENTS.get(key)
    if intent is not None:
        callbacks.key_intent(intent)
        return False

    if key == "TAB":
        callbacks.toggle_category_picker()
        return False
    if key == "CTRL_T":
        callbacks.toggle_theme()
        return False
    if key == "PAGE_DOWN":
        callbacks.scroll_detail(DETAIL_SCROLL_STEP)
        return False
    if key == "PAGE_UP":
        callbacks.scroll_detail(-DETAIL_SCROLL_STEP)
        return False
    if key == "BACKSPACE":
        query = callbacks.current_query()
        if query:
            callbacks.set_query(query[:-1])
        return False
    if key == "CTRL_U":
        if callbacks.current_query():
            callbacks.set_query("")
        return False

    if key.startswith("MOUSE_LEFT_DOWN:"):
        col, row = parse_mouse_col_row(key)
        if col is not None and row is not None:
            callbacks.click_at(col, row)
        return False
    if key.startswith("MOUSE_WHEEL_UP:") or key.startswith("MOUSE_WHEEL_DOWN:"):
        col, row = parse_mouse_col_row(key)
        direction = -1 if key.startswith("MOUSE_WHEEL_UP:") else 1
        if col is not None and row is not None:
            callbacks.wheel_at(col, row, direction * WHEEL_SCROLL_STEP)
        return False

    if len(key) == 1 and key.isprintable():
        callbacks.set_query(callbacks.current_query() + key)
    return False
