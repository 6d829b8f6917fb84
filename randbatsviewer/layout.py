"""Screen geometry for the split candidate/detail view.

Row 1 is the title bar, the last row is the status line. Between them the
left pane holds the prompt row followed by candidate rows; the right pane
holds the detail view.
"""

from __future__ import annotations

from dataclasses import dataclass

MIN_LEFT_WIDTH = 16
MAX_LEFT_WIDTH = 40
LEFT_WIDTH_PERCENT = 30
TITLE_ROWS = 1
PROMPT_ROWS = 1
STATUS_ROWS = 1


def clamp_left_width(total_width: int) -> int:
    """Return left pane width for a terminal of ``total_width`` columns."""
    preferred = (total_width * LEFT_WIDTH_PERCENT) // 100
    return max(1, min(total_width - 2, max(MIN_LEFT_WIDTH, min(MAX_LEFT_WIDTH, preferred))))


@dataclass(frozen=True)
class ScreenLayout:
    width: int
    height: int

    @property
    def left_width(self) -> int:
        return clamp_left_width(self.width)

    @property
    def right_width(self) -> int:
        return max(1, self.width - self.left_width - 1)

    @property
    def body_rows(self) -> int:
        return max(1, self.height - TITLE_ROWS - STATUS_ROWS)

    @property
    def list_rows(self) -> int:
        return max(1, self.body_rows - PROMPT_ROWS)

    @property
    def first_list_row(self) -> int:
        """Return 1-based terminal row of the first candidate row."""
        return TITLE_ROWS + PROMPT_ROWS + 1

    def list_index_at(self, col: int, row: int, list_start: int) -> int | None:
        """Map a 1-based terminal cell to a candidate index, if it lies on one."""
        if col < 1 or col > self.left_width:
            return None
        offset = row - self.first_list_row
        if not (0 <= offset < self.list_rows):
            return None
        return list_start + offset


def scroll_into_view(start: int, index: int, rows: int) -> int:
    """Return the nearest list offset that shows ``index`` within ``rows`` rows."""
    rows = max(1, rows)
    if index < start:
        return index
    if index >= start + rows:
        return index - rows + 1
    return start


def clamp_start(start: int, total: int, rows: int) -> int:
    """Clamp a scroll offset so the viewport never runs past ``total`` rows."""
    return max(0, min(start, max(0, total - max(1, rows))))
