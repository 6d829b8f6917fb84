"""Entry-name search helpers."""

from .filter import filter_entries, matches_query

__all__ = ["filter_entries", "matches_query"]
