"""Candidate-list navigation as a pure reducer.

``NavigationState`` is immutable; every transition returns a fresh
``NavigationStep`` carrying the next state, an optional committed name, and an
optional scroll-into-view signal for the presentation layer.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, replace


class KeyIntent(enum.Enum):
    """Keyboard intents understood by the candidate list."""

    MOVE_NEXT = "move_next"
    MOVE_PREVIOUS = "move_previous"
    COMMIT = "commit"
    DISMISS = "dismiss"


NO_FOCUS = -1


@dataclass(frozen=True)
class NavigationState:
    """Open flag, focused candidate index, and the candidate names."""

    open: bool = True
    focused_index: int = NO_FOCUS
    candidates: tuple[str, ...] = ()

    @property
    def focused_name(self) -> str | None:
        """Return the focused candidate, or ``None`` when nothing is focused."""
        if 0 <= self.focused_index < len(self.candidates):
            return self.candidates[self.focused_index]
        return None


@dataclass(frozen=True)
class NavigationStep:
    """Result of one transition.

    ``scroll_to`` is set only when focus moved to a non-negative index; the
    boundary brings that row into view. ``committed`` is set only when a
    candidate was finalized.
    """

    state: NavigationState
    committed: str | None = None
    scroll_to: int | None = None


def open_with(candidates: Iterable[str]) -> NavigationStep:
    """Open the list over new candidates with nothing focused."""
    return NavigationStep(NavigationState(open=True, focused_index=NO_FOCUS, candidates=tuple(candidates)))


def _move(state: NavigationState, target: int) -> NavigationStep:
    if target == state.focused_index:
        return NavigationStep(state)
    next_state = replace(state, focused_index=target)
    return NavigationStep(next_state, scroll_to=target if target >= 0 else None)


def apply_intent(state: NavigationState, intent: KeyIntent) -> NavigationStep:
    """Apply one keyboard intent; every intent is ignored while closed."""
    if not state.open:
        return NavigationStep(state)

    if intent is KeyIntent.MOVE_NEXT:
        if not state.candidates:
            return NavigationStep(state)
        return _move(state, min(state.focused_index + 1, len(state.candidates) - 1))

    if intent is KeyIntent.MOVE_PREVIOUS:
        if state.focused_index <= NO_FOCUS:
            return NavigationStep(state)
        return _move(state, max(state.focused_index - 1, 0))

    if intent is KeyIntent.COMMIT:
        name = state.focused_name
        if name is None:
            return NavigationStep(state)
        return NavigationStep(replace(state, open=False, focused_index=NO_FOCUS), committed=name)

    if intent is KeyIntent.DISMISS:
        return NavigationStep(replace(state, open=False))

    raise ValueError(f"unsupported intent: {intent!r}")


def pick(state: NavigationState, name: str) -> NavigationStep:
    """Commit ``name`` directly (pointer selection) and close the list."""
    return NavigationStep(replace(state, open=False, focused_index=NO_FOCUS), committed=name)
