"""Selector controller tying filtering, navigation, and view-model building.

The controller owns one immutable ``SelectorState`` snapshot and replaces it
wholesale on every transition. Each operation returns the ``NavigationStep`` it
applied so the boundary can honor scroll-into-view signals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from ..catalog.types import Catalog, EntryCatalog
from ..errors import DataLoadFailure, SelectorUnavailable, UnknownCategory
from ..search.filter import filter_entries
from ..view_model.builder import build_display_groups
from ..view_model.types import DisplayGroup
from . import navigation
from .navigation import KeyIntent, NavigationState, NavigationStep

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorState:
    """Active category, query text, candidate navigation, and committed entry."""

    category: str | None = None
    query: str = ""
    navigation: NavigationState = field(default_factory=lambda: NavigationState(open=False))
    committed: str | None = None


@dataclass(frozen=True)
class Selection:
    """Committed entry materialized for rendering."""

    category: str
    name: str
    level: object | None
    groups: tuple[DisplayGroup, ...]


class SelectorController:
    """Stateful facade over the pure selector pieces."""

    def __init__(self, source: Catalog | DataLoadFailure) -> None:
        """Bind to a loaded catalog, or to the failure that prevented loading."""
        if isinstance(source, DataLoadFailure):
            self._catalog: Catalog = {}
            self._load_error: DataLoadFailure | None = source
        else:
            self._catalog = source
            self._load_error = None
        self._state = SelectorState()
        self._selection_key: tuple[str, str] | None = None
        self._selection: Selection | None = None

    @property
    def state(self) -> SelectorState:
        return self._state

    @property
    def load_error(self) -> DataLoadFailure | None:
        return self._load_error

    @property
    def usable(self) -> bool:
        return self._load_error is None

    @property
    def categories(self) -> tuple[str, ...]:
        """Return category names in catalog order."""
        return tuple(self._catalog)

    def entry_names(self, category: str) -> tuple[str, ...]:
        """Return every entry name of ``category`` in catalog order."""
        return tuple(self._entries(category))

    def _require_usable(self) -> None:
        if self._load_error is not None:
            raise SelectorUnavailable(str(self._load_error))

    def _entries(self, category: str | None) -> EntryCatalog:
        if category is None:
            return {}
        return self._catalog.get(category, {})

    def _apply(self, step: NavigationStep, **changes: object) -> NavigationStep:
        committed = step.committed if step.committed is not None else self._state.committed
        next_changes: dict[str, object] = {"navigation": step.state, "committed": committed}
        next_changes.update(changes)
        self._state = replace(self._state, **next_changes)
        if step.committed is not None:
            logger.debug("committed %r in %r", step.committed, self._state.category)
        return step

    def select_category(self, category: str) -> NavigationStep:
        """Switch category: clear query and selection, open the full candidate list."""
        self._require_usable()
        if category not in self._catalog:
            raise UnknownCategory(category)
        logger.debug("category changed to %r", category)
        step = navigation.open_with(self._entries(category))
        self._state = SelectorState(category=category, query="", navigation=step.state, committed=None)
        return step

    def set_query(self, text: str) -> NavigationStep:
        """Replace query text, recompute candidates, and (re)open with no focus."""
        self._require_usable()
        step = navigation.open_with(filter_entries(self._entries(self._state.category), text))
        return self._apply(step, query=text)

    def key_intent(self, intent: KeyIntent) -> NavigationStep:
        """Route one keyboard intent through the navigation reducer."""
        self._require_usable()
        return self._apply(navigation.apply_intent(self._state.navigation, intent))

    def pick(self, name: str) -> NavigationStep:
        """Commit ``name`` directly, as from a pointer click, and close the list."""
        self._require_usable()
        return self._apply(navigation.pick(self._state.navigation, name))

    def current_selection(self) -> Selection | None:
        """Return the committed entry with its display groups, or ``None``.

        Groups are built once per (category, name) commit and reused until
        either changes.
        """
        self._require_usable()
        category = self._state.category
        name = self._state.committed
        if category is None or name is None:
            return None
        key = (category, name)
        if key == self._selection_key:
            return self._selection

        record = self._entries(category).get(name)
        selection = None
        if record is not None:
            selection = Selection(
                category=category,
                name=name,
                level=record.get("level"),
                groups=build_display_groups(record),
            )
        self._selection_key = key
        self._selection = selection
        return selection
