"""Literal, case-insensitive substring filtering over entry names.

Matching keeps catalog insertion order; there is no scoring or ranking.
"""

from __future__ import annotations

from collections.abc import Iterable


def matches_query(name: str, query: str) -> bool:
    """Return whether ``name`` contains ``query`` ignoring case."""
    return query.lower() in name.lower()


def filter_entries(names: Iterable[str], query: str) -> tuple[str, ...]:
    """Return names containing ``query`` (case-insensitive) in original order.

    An empty query matches every name.
    """
    return tuple(name for name in names if matches_query(name, query))
