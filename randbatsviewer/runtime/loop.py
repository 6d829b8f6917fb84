"""Main interactive event loop for the terminal UI.

Renders when dirty, decodes one key, and dispatches it. Feature logic lives
in the application object; this loop is only wiring.
"""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from ..input import handle_key, read_key
from ..render import render_frame
from .terminal import TerminalController

if TYPE_CHECKING:
    from .app import SelectorApp

KEY_POLL_TIMEOUT_MS = 250


def run_main_loop(app: SelectorApp, terminal: TerminalController, stdin_fd: int) -> None:
    """Run the interactive loop until a quit key is pressed."""
    last_size: tuple[int, int] | None = None
    callbacks = app.key_callbacks()
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                app.resize(term.columns, term.lines)

            if app.state.dirty:
                render_frame(app.render_context())
                app.state.dirty = False

            key = read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            if handle_key(key, callbacks):
                return
