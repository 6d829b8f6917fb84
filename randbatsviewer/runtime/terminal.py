"""Raw-mode terminal session for the selector screen.

The selector draws full frames on the alternate screen and needs click and
wheel events for the candidate list, so one session switches all of that on
and restores the saved tty attributes on the way out.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ALT_SCREEN_ON = b"\x1b[?1049h"
ALT_SCREEN_OFF = b"\x1b[?1049l"
CURSOR_HIDE = b"\x1b[?25l"
CURSOR_SHOW = b"\x1b[?25h"
# Button press/release reporting in SGR encoding; no motion tracking.
MOUSE_ON = b"\x1b[?1000h\x1b[?1006h"
MOUSE_OFF = b"\x1b[?1000l\x1b[?1006l"
CLEAR_SCREEN = b"\x1b[2J"


class TerminalController:
    """Owns the tty state of one interactive selector session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Go raw, hide the cursor, and start a blank alternate screen."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, ALT_SCREEN_ON + CURSOR_HIDE + MOUSE_ON + CLEAR_SCREEN)

    def disable_tui_mode(self) -> None:
        """Undo ``enable_tui_mode`` and put back the saved tty attributes."""
        os.write(self.stdout_fd, MOUSE_OFF + CURSOR_SHOW + ALT_SCREEN_OFF)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Run the selector loop inside a session, restoring the tty even on errors."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
