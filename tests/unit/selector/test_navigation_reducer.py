"""Tests for the candidate-list navigation reducer.

Covers clamped focus movement, commit/dismiss/pick transitions, and the
scroll-into-view signal emitted on focus changes.
"""

from __future__ import annotations

from dataclasses import fields
import unittest

from randbatsviewer.selector import navigation
from randbatsviewer.selector.navigation import KeyIntent, NavigationState


def _open(*names: str, focused: int = -1) -> NavigationState:
    return NavigationState(open=True, focused_index=focused, candidates=tuple(names))


class NavigationReducerTests(unittest.TestCase):
    def test_step_exposes_only_state_commit_and_scroll(self) -> None:
        step = navigation.open_with(("Pikachu",))
        self.assertEqual({f.name for f in fields(step)}, {"state", "committed", "scroll_to"})

    def test_open_with_resets_focus(self) -> None:
        step = navigation.open_with(["a", "b"])
        self.assertEqual(step.state, NavigationState(open=True, focused_index=-1, candidates=("a", "b")))
        self.assertIsNone(step.committed)
        self.assertIsNone(step.scroll_to)

    def test_move_next_advances_and_clamps_without_wrapping(self) -> None:
        state = _open("a", "b")
        step = navigation.apply_intent(state, KeyIntent.MOVE_NEXT)
        self.assertEqual(step.state.focused_index, 0)
        self.assertEqual(step.scroll_to, 0)

        step = navigation.apply_intent(step.state, KeyIntent.MOVE_NEXT)
        self.assertEqual(step.state.focused_index, 1)
        self.assertEqual(step.scroll_to, 1)

        step = navigation.apply_intent(step.state, KeyIntent.MOVE_NEXT)
        self.assertEqual(step.state.focused_index, 1)
        self.assertIsNone(step.scroll_to)

    def test_move_next_on_empty_candidates_is_noop(self) -> None:
        state = _open()
        step = navigation.apply_intent(state, KeyIntent.MOVE_NEXT)
        self.assertIs(step.state, state)
        self.assertEqual(step.state.focused_index, -1)

    def test_move_previous_stays_unfocused_and_never_wraps(self) -> None:
        state = _open("a", "b", "c")
        step = navigation.apply_intent(state, KeyIntent.MOVE_PREVIOUS)
        self.assertEqual(step.state.focused_index, -1)
        self.assertIsNone(step.scroll_to)

    def test_move_previous_clamps_at_first_candidate(self) -> None:
        step = navigation.apply_intent(_open("a", "b", "c", focused=2), KeyIntent.MOVE_PREVIOUS)
        self.assertEqual(step.state.focused_index, 1)
        self.assertEqual(step.scroll_to, 1)
        step = navigation.apply_intent(step.state, KeyIntent.MOVE_PREVIOUS)
        self.assertEqual(step.state.focused_index, 0)
        step = navigation.apply_intent(step.state, KeyIntent.MOVE_PREVIOUS)
        self.assertEqual(step.state.focused_index, 0)
        self.assertIsNone(step.scroll_to)

    def test_commit_emits_focused_candidate_and_closes(self) -> None:
        step = navigation.apply_intent(_open("a", "b", focused=1), KeyIntent.COMMIT)
        self.assertEqual(step.committed, "b")
        self.assertFalse(step.state.open)

    def test_commit_without_focus_is_noop(self) -> None:
        state = _open("a", "b")
        step = navigation.apply_intent(state, KeyIntent.COMMIT)
        self.assertIsNone(step.committed)
        self.assertEqual(step.state, state)

    def test_commit_with_stale_focus_is_noop(self) -> None:
        state = NavigationState(open=True, focused_index=5, candidates=("a",))
        step = navigation.apply_intent(state, KeyIntent.COMMIT)
        self.assertIsNone(step.committed)
        self.assertEqual(step.state, state)

    def test_dismiss_closes_and_keeps_candidates(self) -> None:
        step = navigation.apply_intent(_open("a", focused=0), KeyIntent.DISMISS)
        self.assertFalse(step.state.open)
        self.assertEqual(step.state.candidates, ("a",))
        self.assertIsNone(step.committed)

    def test_intents_are_ignored_while_closed(self) -> None:
        closed = NavigationState(open=False, focused_index=0, candidates=("a", "b"))
        for intent in KeyIntent:
            step = navigation.apply_intent(closed, intent)
            self.assertIs(step.state, closed)
            self.assertIsNone(step.committed)
            self.assertIsNone(step.scroll_to)

    def test_pick_commits_regardless_of_focus(self) -> None:
        step = navigation.pick(_open("a", "b", focused=0), "b")
        self.assertEqual(step.committed, "b")
        self.assertFalse(step.state.open)
        self.assertEqual(step.state.focused_index, -1)

    def test_focused_name(self) -> None:
        self.assertIsNone(_open("a").focused_name)
        self.assertEqual(_open("a", "b", focused=1).focused_name, "b")


if __name__ == "__main__":
    unittest.main()
