"""Interactive runtime: terminal session, event loop, and persisted config."""

from .app import SelectorApp, run_selector

__all__ = ["SelectorApp", "run_selector"]
