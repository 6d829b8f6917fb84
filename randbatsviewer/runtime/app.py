"""Interactive selector application.

``SelectorApp`` adapts key/mouse actions onto the selector controller and the
category picker, turns navigation steps into viewport updates, and builds the
render context for each frame. ``run_selector`` wires it to a real terminal.
"""

from __future__ import annotations

import logging
import sys

from ..catalog.types import format_category
from ..input import KeyCallbacks
from ..layout import ScreenLayout, clamp_start, scroll_into_view
from ..render import RenderContext, detail_lines
from ..selector import KeyIntent, NavigationStep, SelectorController
from ..ui_theme import resolve_theme, toggled_theme_name
from .category_picker import CategoryPicker
from .config import save_theme_name
from .state import AppState

logger = logging.getLogger(__name__)

ENTRY_PROMPT = "search> "
CATEGORY_PROMPT = "format> "
ENTRY_PLACEHOLDER = "Search for a Pokemon"
NO_CATEGORY_PLACEHOLDER = "Select a battle type (Tab)"
CATEGORY_PLACEHOLDER = "Select a battle type"
CLOSED_HINT = "type to search"
WELCOME_LINES = (
    "Select a battle type with Tab, then type to search for a Pokemon.",
    "",
    "Up/Down   move through candidates",
    "Enter     show the focused candidate",
    "Esc       hide the candidate list",
    "Click     show a candidate",
    "PgUp/PgDn scroll this pane",
    "Ctrl-T    toggle dark/light theme",
    "Ctrl-C    quit",
)


class SelectorApp:
    """Session-level glue between input, selector state, and rendering."""

    def __init__(
        self,
        controller: SelectorController,
        state: AppState,
        layout: ScreenLayout | None = None,
        persist_theme: bool = True,
    ) -> None:
        self.controller = controller
        self.state = state
        self.layout = layout if layout is not None else ScreenLayout(80, 24)
        self.persist_theme = persist_theme
        self.picker = CategoryPicker(controller.categories if controller.usable else ())
        self._detail_cache_key: tuple[object, ...] | None = None
        self._detail_cache: list[str] = []

    @property
    def usable(self) -> bool:
        return self.controller.usable

    def key_callbacks(self) -> KeyCallbacks:
        return KeyCallbacks(
            key_intent=self.key_intent,
            current_query=self.current_query,
            set_query=self.set_query,
            toggle_category_picker=self.toggle_category_picker,
            toggle_theme=self.toggle_theme,
            scroll_detail=self.scroll_detail,
            click_at=self.click_at,
            wheel_at=self.wheel_at,
        )

    def resize(self, width: int, height: int) -> None:
        self.layout = ScreenLayout(width, height)
        self.state.list_start = clamp_start(self.state.list_start, len(self.visible_candidates()), self.layout.list_rows)
        self.state.dirty = True

    def visible_candidates(self) -> tuple[str, ...]:
        """Return names backing the list rows (categories while picking)."""
        if self.picker.active:
            return self.picker.navigation.candidates
        return self.controller.state.navigation.candidates

    def _after_step(self, step: NavigationStep) -> None:
        if step.scroll_to is not None:
            self.state.list_start = scroll_into_view(self.state.list_start, step.scroll_to, self.layout.list_rows)
        if step.committed is not None:
            self.state.detail_start = 0
        self.state.dirty = True

    def current_query(self) -> str:
        if self.picker.active:
            return self.picker.query
        return self.controller.state.query

    def set_query(self, text: str) -> None:
        if not self.usable:
            return
        if self.picker.active:
            step = self.picker.set_query(text)
        elif self.controller.state.category is None:
            return
        else:
            step = self.controller.set_query(text)
        self.state.list_start = 0
        self._after_step(step)

    def select_category(self, category: str) -> None:
        step = self.controller.select_category(category)
        self.state.list_start = 0
        self.state.detail_start = 0
        self._after_step(step)

    def key_intent(self, intent: KeyIntent) -> None:
        if not self.usable:
            return
        if self.picker.active:
            step = self.picker.key_intent(intent)
            self._after_step(step)
            if step.committed is not None:
                self.select_category(step.committed)
            elif not self.picker.active:
                self.state.list_start = 0
            return
        self._after_step(self.controller.key_intent(intent))

    def toggle_category_picker(self) -> None:
        if not self.usable:
            return
        if self.picker.active:
            self.picker.close()
        else:
            self.picker.open()
        self.state.list_start = 0
        self.state.dirty = True

    def toggle_theme(self) -> None:
        self.state.theme_name = toggled_theme_name(self.state.theme_name)
        if self.persist_theme:
            save_theme_name(self.state.theme_name)
        self.state.dirty = True

    def scroll_detail(self, delta: int) -> None:
        lines = self.detail_lines()
        prev = self.state.detail_start
        self.state.detail_start = clamp_start(prev + delta, len(lines), self.layout.body_rows)
        if self.state.detail_start != prev:
            self.state.dirty = True

    def click_at(self, col: int, row: int) -> None:
        """Pick the candidate under a left click, if the list is open there."""
        if not self.usable:
            return
        idx = self.layout.list_index_at(col, row, self.state.list_start)
        candidates = self.visible_candidates()
        if idx is None or not (0 <= idx < len(candidates)):
            return
        name = candidates[idx]
        if self.picker.active:
            self.picker.pick(name)
            self.select_category(name)
            return
        if not self.controller.state.navigation.open:
            return
        self._after_step(self.controller.pick(name))

    def wheel_at(self, col: int, row: int, delta: int) -> None:
        if col <= self.layout.left_width:
            prev = self.state.list_start
            self.state.list_start = clamp_start(prev + delta, len(self.visible_candidates()), self.layout.list_rows)
            if self.state.list_start != prev:
                self.state.dirty = True
            return
        self.scroll_detail(delta)

    def detail_lines(self) -> list[str]:
        """Return detail-pane rows for the committed selection (cached per theme)."""
        theme = resolve_theme(self.state.theme_name, self.state.no_color)
        if not self.usable:
            error = self.controller.load_error
            lines = [f"{theme.error}{error}{theme.reset}"]
            if error is not None and error.detail:
                lines.append(f"{theme.dim}{error.detail}{theme.reset}")
            return lines

        selection = self.controller.current_selection()
        style = None if self.state.no_color else (self.state.residue_style or theme.residue_style)
        key = (selection, theme.name, style)
        if key == self._detail_cache_key:
            return self._detail_cache
        if selection is None:
            lines = [f"{theme.dim}{line}{theme.reset}" if line else "" for line in WELCOME_LINES]
        else:
            lines = detail_lines(selection, theme, style)
        self._detail_cache_key = key
        self._detail_cache = lines
        return lines

    def status_text(self) -> str:
        if not self.usable:
            return " data unavailable"
        if self.picker.active:
            return f" {len(self.picker.navigation.candidates)} of {len(self.picker.categories)} formats"
        selector_state = self.controller.state
        if selector_state.category is None:
            return " no format selected"
        total = len(self.controller.entry_names(selector_state.category))
        matches = len(selector_state.navigation.candidates)
        return f" {format_category(selector_state.category)}: {matches} of {total} Pokemon"

    def render_context(self) -> RenderContext:
        theme = resolve_theme(self.state.theme_name, self.state.no_color)
        context = RenderContext(
            layout=self.layout,
            theme=theme,
            prompt_prefix=ENTRY_PROMPT,
            query="",
            placeholder=ENTRY_PLACEHOLDER,
            list_start=self.state.list_start,
            detail_lines=self.detail_lines(),
            detail_start=self.state.detail_start,
            status_text=self.status_text(),
            right_title=f"theme: {self.state.theme_name} (^T) ",
        )
        if not self.usable:
            context.list_open = False
            return context
        if self.picker.active:
            nav = self.picker.navigation
            context.prompt_prefix = CATEGORY_PROMPT
            context.placeholder = CATEGORY_PLACEHOLDER
            context.query = self.picker.query
            context.candidates = tuple(format_category(name) for name in nav.candidates)
            context.focused_index = nav.focused_index
            context.list_open = nav.open
            return context

        selector_state = self.controller.state
        nav = selector_state.navigation
        context.query = selector_state.query
        if selector_state.category is None:
            context.placeholder = NO_CATEGORY_PLACEHOLDER
        context.candidates = nav.candidates
        context.focused_index = nav.focused_index
        context.list_open = nav.open
        context.closed_hint = CLOSED_HINT if selector_state.category is not None else ""
        return context


def run_selector(
    controller: SelectorController,
    theme_name: str,
    no_color: bool = False,
    residue_style: str | None = None,
    category: str | None = None,
    query: str = "",
) -> None:
    """Run the interactive selector on the controlling terminal."""
    from .loop import run_main_loop
    from .terminal import TerminalController

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("Interactive mode needs a terminal; use --list or --render instead.")

    state = AppState(theme_name=theme_name, no_color=no_color, residue_style=residue_style)
    app = SelectorApp(controller, state)
    if controller.usable:
        if category is not None:
            app.select_category(category)
            if query:
                app.set_query(query)
        elif len(controller.categories) > 0:
            app.toggle_category_picker()

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    logger.debug("starting interactive session (category=%r)", category)
    run_main_loop(app, terminal, stdin_fd)
