"""Category/entry selector: navigation reducer plus orchestrating controller."""

from .controller import Selection, SelectorController, SelectorState
from .navigation import KeyIntent, NavigationState, NavigationStep

__all__ = [
    "KeyIntent",
    "NavigationState",
    "NavigationStep",
    "Selection",
    "SelectorController",
    "SelectorState",
]
