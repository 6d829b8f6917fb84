"""Category picker reusing the entry filter and navigation reducer."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..search.filter import filter_entries
from ..selector import navigation
from ..selector.navigation import KeyIntent, NavigationState, NavigationStep


@dataclass
class CategoryPicker:
    """Transient category list shown in place of the entry candidates."""

    categories: tuple[str, ...]
    active: bool = False
    query: str = ""
    navigation: NavigationState = field(default_factory=lambda: NavigationState(open=False))

    def open(self) -> NavigationStep:
        self.active = True
        self.query = ""
        step = navigation.open_with(self.categories)
        self.navigation = step.state
        return step

    def close(self) -> None:
        self.active = False
        self.navigation = NavigationState(open=False)

    def set_query(self, text: str) -> NavigationStep:
        self.query = text
        step = navigation.open_with(filter_entries(self.categories, text))
        self.navigation = step.state
        return step

    def key_intent(self, intent: KeyIntent) -> NavigationStep:
        """Apply an intent; committing or dismissing closes the picker."""
        step = navigation.apply_intent(self.navigation, intent)
        self.navigation = step.state
        if not step.state.open:
            self.active = False
        return step

    def pick(self, name: str) -> NavigationStep:
        step = navigation.pick(self.navigation, name)
        self.close()
        return step
